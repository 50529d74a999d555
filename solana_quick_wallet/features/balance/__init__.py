"""Balance feature module for Solana Quick Wallet."""

from solana_quick_wallet.features.balance.service import (
    SolBalance,
    SplBalance,
    get_sol_balance,
    get_spl_balance,
)

__all__ = [
    "SolBalance",
    "SplBalance",
    "get_sol_balance",
    "get_spl_balance",
]
