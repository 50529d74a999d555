"""Transaction assembly and submission shared by the transfer services."""

from __future__ import annotations

from collections.abc import Sequence

from solana.rpc.models import TxOpts
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import Message
from solders.transaction import Transaction

from solana_quick_wallet.connection import SolanaConnection
from solana_quick_wallet.errors import TransferFailedError
from solana_quick_wallet.shared.logging import get_logger

logger = get_logger(__name__)


async def build_transaction(
    connection: SolanaConnection,
    instructions: Sequence[Instruction],
    signer: Keypair,
) -> tuple[Transaction, int]:
    """Sign ``instructions`` against the latest blockhash.

    Returns the transaction and the last block height at which it is valid.
    """
    blockhash_resp = await connection.client.get_latest_blockhash(
        connection.commitment
    )
    blockhash = blockhash_resp.value.blockhash
    message = Message.new_with_blockhash(list(instructions), signer.pubkey(), blockhash)
    transaction = Transaction([signer], message, blockhash)
    return transaction, blockhash_resp.value.last_valid_block_height


async def submit_and_confirm(
    connection: SolanaConnection,
    instructions: Sequence[Instruction],
    signer: Keypair,
) -> str:
    """Sign ``instructions`` as one transaction, send it and wait for confirmation.

    The fee payer is ``signer``. Returns the base58 transaction signature.
    """
    transaction, last_valid_block_height = await build_transaction(
        connection, instructions, signer
    )

    send_resp = await connection.client.send_transaction(
        transaction,
        opts=TxOpts(preflight_commitment=connection.commitment),
    )
    signature = send_resp.value
    logger.debug("Transaction submitted: %s", signature)

    confirm_resp = await connection.client.confirm_transaction(
        signature,
        connection.commitment,
        last_valid_block_height=last_valid_block_height,
    )
    statuses = confirm_resp.value
    status = statuses[0] if statuses else None
    if status is None:
        raise TransferFailedError(message=f"Transaction {signature} was not confirmed.")
    if status.err is not None:
        raise TransferFailedError(
            message=f"Transaction {signature} failed on-chain: {status.err}"
        )

    return str(signature)
