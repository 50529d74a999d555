"""Transfer request validators for Solana Quick Wallet.

Every check here runs before any RPC call so that a rejected request has no
side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from solders.pubkey import Pubkey

from solana_quick_wallet.errors import InvalidTransferRequestError
from solana_quick_wallet.validation import AddressValidator, AmountValidator
from solana_quick_wallet.wallet import SOL_DECIMALS


@dataclass
class TransferRequest:
    recipient: Pubkey
    amount: Decimal
    base_units: int | None = None
    mint: Pubkey | None = None


def _require_private_key(value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidTransferRequestError(
            message="Missing required field: from_private_key.",
            field="from_private_key",
        )


def _require_address(value: Any, field: str) -> Pubkey:
    result = AddressValidator.validate(value)
    if not result.is_valid:
        raise InvalidTransferRequestError(
            message=f"Invalid {field}: {result.error_message}", field=field
        )
    return result.normalized_value


def _require_amount(value: Any) -> Decimal:
    result = AmountValidator.parse_amount(value)
    if not result.is_valid:
        raise InvalidTransferRequestError(
            message=f"Invalid amount: {result.error_message}", field="amount"
        )
    return result.normalized_value


def validate_sol_transfer(
    from_private_key: Any, to_public_key: Any, amount: Any
) -> TransferRequest:
    _require_private_key(from_private_key)
    recipient = _require_address(to_public_key, "to_public_key")
    parsed_amount = _require_amount(amount)

    lamports = AmountValidator.validate_full(parsed_amount, SOL_DECIMALS)
    if not lamports.is_valid:
        raise InvalidTransferRequestError(
            message=f"Invalid amount: {lamports.error_message}", field="amount"
        )

    return TransferRequest(
        recipient=recipient,
        amount=parsed_amount,
        base_units=lamports.normalized_value,
    )


def validate_spl_transfer(
    from_private_key: Any, to_public_key: Any, amount: Any, token_address: Any
) -> TransferRequest:
    _require_private_key(from_private_key)
    recipient = _require_address(to_public_key, "to_public_key")
    parsed_amount = _require_amount(amount)
    mint = _require_address(token_address, "token_address")

    return TransferRequest(recipient=recipient, amount=parsed_amount, mint=mint)
