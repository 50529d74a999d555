"""Transfer feature module for Solana Quick Wallet."""

from solana_quick_wallet.features.transfer.service import (
    TransferResult,
    send_sol,
    send_spl_token,
)
from solana_quick_wallet.features.transfer.validators import (
    TransferRequest,
    validate_sol_transfer,
    validate_spl_transfer,
)

__all__ = [
    "TransferResult",
    "TransferRequest",
    "send_sol",
    "send_spl_token",
    "validate_sol_transfer",
    "validate_spl_transfer",
]
