"""Balance lookups for SOL and SPL tokens."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from solana.rpc.models import TokenAccountOpts

from solana_quick_wallet.connection import require_initialized
from solana_quick_wallet.errors import (
    BalanceQueryError,
    InvalidAddressError,
    SolanaWalletError,
    TokenBalanceQueryError,
)
from solana_quick_wallet.network import classify_error, describe_error
from solana_quick_wallet.shared.logging import get_logger
from solana_quick_wallet.validation import AddressValidator
from solana_quick_wallet.wallet import LAMPORTS_PER_SOL

logger = get_logger(__name__)


@dataclass
class SolBalance:
    public_key: str
    balance: Decimal

    def to_dict(self) -> dict:
        return {"publicKey": self.public_key, "balance": self.balance}


@dataclass
class SplBalance:
    public_key: str
    token_address: str
    balance: Decimal

    def to_dict(self) -> dict:
        return {
            "publicKey": self.public_key,
            "tokenAddress": self.token_address,
            "balance": self.balance,
        }


def _require_address(value: Any, field: str):
    result = AddressValidator.validate(value)
    if not result.is_valid:
        raise InvalidAddressError(
            message=f"Invalid {field}: {result.error_message}",
            field=field,
            value=value if isinstance(value, str) else None,
        )
    return result.normalized_value


def lamports_to_sol(lamports: int) -> Decimal:
    return Decimal(lamports) / Decimal(LAMPORTS_PER_SOL)


def parse_ui_amount(token_amount: dict[str, Any]) -> Decimal:
    ui_amount_string = token_amount.get("uiAmountString")
    if ui_amount_string is not None:
        return Decimal(ui_amount_string)
    ui_amount = token_amount.get("uiAmount")
    if ui_amount is None:
        return Decimal(0)
    return Decimal(str(ui_amount))


async def get_sol_balance(public_key: str) -> SolBalance:
    """Balance of ``public_key`` in SOL, converted exactly from lamports."""
    connection = require_initialized()
    owner = _require_address(public_key, "public_key")

    try:
        response = await connection.client.get_balance(owner, connection.commitment)
        balance = lamports_to_sol(response.value)
    except SolanaWalletError:
        raise
    except Exception as e:
        logger.error(
            describe_error(e, connection.rpc_url, "Error fetching SOL balance"),
            exc_info=True,
        )
        raise BalanceQueryError(original_error=e, error_type=classify_error(e)) from e

    return SolBalance(public_key=public_key, balance=balance)


async def get_spl_balance(public_key: str, token_address: str) -> SplBalance:
    """Balance of ``token_address`` held by ``public_key``, in UI units.

    An owner without a token account for the mint has a balance of 0. When the
    owner holds several accounts for the mint only the first is read.
    """
    connection = require_initialized()
    owner = _require_address(public_key, "public_key")
    mint = _require_address(token_address, "token_address")

    try:
        response = await connection.client.get_token_accounts_by_owner_json_parsed(
            owner,
            TokenAccountOpts(mint=mint),
            connection.commitment,
        )
        accounts = response.value
        if accounts:
            token_amount = accounts[0].account.data.parsed["info"]["tokenAmount"]
            balance = parse_ui_amount(token_amount)
        else:
            balance = Decimal(0)
    except SolanaWalletError:
        raise
    except Exception as e:
        logger.error(
            describe_error(e, connection.rpc_url, "Error fetching SPL balance"),
            exc_info=True,
        )
        raise TokenBalanceQueryError(
            original_error=e, error_type=classify_error(e)
        ) from e

    return SplBalance(
        public_key=public_key, token_address=token_address, balance=balance
    )
