"""SOL and SPL token transfers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams as SystemTransferParams
from solders.system_program import transfer as system_transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    create_associated_token_account,
    get_associated_token_address,
    transfer,
)
from spl.token.models import TransferParams

from solana_quick_wallet.connection import SolanaConnection, require_initialized
from solana_quick_wallet.errors import (
    InvalidTransferRequestError,
    MintLookupError,
    SolanaWalletError,
    TransferFailedError,
)
from solana_quick_wallet.features.transfer.validators import (
    validate_sol_transfer,
    validate_spl_transfer,
)
from solana_quick_wallet.network import classify_error, describe_error
from solana_quick_wallet.shared.logging import get_logger
from solana_quick_wallet.transaction import submit_and_confirm
from solana_quick_wallet.validation import AmountValidator
from solana_quick_wallet.wallet import load_keypair

logger = get_logger(__name__)


@dataclass
class TransferResult:
    transaction_signature: str

    def to_dict(self) -> dict:
        return {"transactionSignature": self.transaction_signature}


async def fetch_mint_decimals(connection: SolanaConnection, mint: Pubkey) -> int:
    """Read the decimals of an SPL Token mint.

    Raises:
        MintLookupError: The account is missing or is not an SPL Token mint.
    """
    response = await connection.client.get_account_info_json_parsed(
        mint, connection.commitment
    )
    account = response.value
    if account is None:
        raise MintLookupError(
            message=f"Token mint {mint} does not exist.", token_address=str(mint)
        )
    if account.owner != TOKEN_PROGRAM_ID:
        raise MintLookupError(
            message=f"Account {mint} is not owned by the SPL Token program.",
            token_address=str(mint),
        )

    parsed: Any = getattr(account.data, "parsed", None)
    if not isinstance(parsed, dict) or parsed.get("type") != "mint":
        raise MintLookupError(
            message=f"Account {mint} is not a token mint.", token_address=str(mint)
        )
    return int(parsed["info"]["decimals"])


async def build_spl_transfer_instructions(
    connection: SolanaConnection,
    sender: Pubkey,
    recipient: Pubkey,
    mint: Pubkey,
    base_units: int,
) -> list[Instruction]:
    """Instructions moving ``base_units`` of ``mint`` between associated accounts.

    The recipient's associated token account is created, paid for by the
    sender, whenever it does not exist yet.
    """
    source = get_associated_token_address(sender, mint)
    dest = get_associated_token_address(recipient, mint)

    instructions: list[Instruction] = []
    dest_info = await connection.client.get_account_info(dest, connection.commitment)
    if dest_info.value is None:
        logger.info("Creating associated token account %s for %s", dest, recipient)
        instructions.append(create_associated_token_account(sender, recipient, mint))

    instructions.append(
        transfer(
            TransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=source,
                dest=dest,
                owner=sender,
                amount=base_units,
            )
        )
    )
    return instructions


async def send_sol(
    from_private_key: str, to_public_key: str, amount: Any
) -> TransferResult:
    """Transfer ``amount`` SOL and wait for confirmation.

    The amount is converted to lamports before anything is sent. Invalid input
    raises ``InvalidTransferRequestError`` or ``InvalidPrivateKeyError`` without
    contacting the node. Any failure after that raises ``TransferFailedError``.
    """
    connection = require_initialized()
    request = validate_sol_transfer(from_private_key, to_public_key, amount)
    sender = load_keypair(from_private_key)

    instruction = system_transfer(
        SystemTransferParams(
            from_pubkey=sender.pubkey(),
            to_pubkey=request.recipient,
            lamports=request.base_units,
        )
    )

    try:
        signature = await submit_and_confirm(connection, [instruction], sender)
    except SolanaWalletError:
        raise
    except Exception as e:
        logger.error(
            describe_error(e, connection.rpc_url, "Error sending SOL"), exc_info=True
        )
        raise TransferFailedError(
            message="Failed to send SOL.",
            original_error=e,
            error_type=classify_error(e),
        ) from e

    logger.info(
        "Sent %s SOL from %s to %s: %s",
        request.amount,
        sender.pubkey(),
        to_public_key,
        signature,
    )
    return TransferResult(transaction_signature=signature)


async def send_spl_token(
    from_private_key: str, to_public_key: str, amount: Any, token_address: str
) -> TransferResult:
    """Transfer ``amount`` of the token minted at ``token_address``.

    The mint is read first to scale ``amount`` by its decimals. The
    recipient's associated token account is created in the same transaction
    when it does not exist.
    """
    connection = require_initialized()
    request = validate_spl_transfer(
        from_private_key, to_public_key, amount, token_address
    )
    sender = load_keypair(from_private_key)

    try:
        decimals = await fetch_mint_decimals(connection, request.mint)

        units = AmountValidator.validate_full(request.amount, decimals)
        if not units.is_valid:
            raise InvalidTransferRequestError(
                message=f"Invalid amount: {units.error_message}", field="amount"
            )

        instructions = await build_spl_transfer_instructions(
            connection,
            sender.pubkey(),
            request.recipient,
            request.mint,
            units.normalized_value,
        )
        signature = await submit_and_confirm(connection, instructions, sender)
    except SolanaWalletError:
        raise
    except Exception as e:
        logger.error(
            describe_error(e, connection.rpc_url, "Error sending SPL token"),
            exc_info=True,
        )
        raise TransferFailedError(
            message="Failed to send SPL token.",
            original_error=e,
            error_type=classify_error(e),
        ) from e

    logger.info(
        "Sent %s of %s from %s to %s: %s",
        request.amount,
        token_address,
        sender.pubkey(),
        to_public_key,
        signature,
    )
    return TransferResult(transaction_signature=signature)
