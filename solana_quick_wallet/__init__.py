"""Solana Quick Wallet - a thin async helper library over the Solana SDK.

This package is organized into feature-based modules:
- connection: the process-wide RPC connection
- wallet: keypair creation and recovery
- features.balance: SOL and SPL token balances
- features.transfer: SOL and SPL token transfers
- shared: Shared utilities (logging)
"""

from solana_quick_wallet.connection import (
    DEFAULT_RPC_URL,
    SolanaConnection,
    close_solana_connection,
    get_connection,
    initialize_solana_connection,
)
from solana_quick_wallet.errors import (
    BalanceQueryError,
    InvalidAddressError,
    InvalidPrivateKeyError,
    InvalidTransferRequestError,
    MintLookupError,
    NotInitializedError,
    SolanaWalletError,
    TokenBalanceQueryError,
    TransferFailedError,
    WalletCreationError,
)
from solana_quick_wallet.features.balance import (
    SolBalance,
    SplBalance,
    get_sol_balance,
    get_spl_balance,
)
from solana_quick_wallet.features.transfer import (
    TransferResult,
    send_sol,
    send_spl_token,
)
from solana_quick_wallet.network import NetworkErrorType
from solana_quick_wallet.wallet import (
    LAMPORTS_PER_SOL,
    WalletKeys,
    create_wallet,
    create_wallet_from_private_key,
)

__version__ = "0.1.0"
__all__ = [
    "initialize_solana_connection",
    "close_solana_connection",
    "get_connection",
    "create_wallet",
    "create_wallet_from_private_key",
    "get_sol_balance",
    "get_spl_balance",
    "send_sol",
    "send_spl_token",
    "SolanaConnection",
    "WalletKeys",
    "SolBalance",
    "SplBalance",
    "TransferResult",
    "NetworkErrorType",
    "DEFAULT_RPC_URL",
    "LAMPORTS_PER_SOL",
    "SolanaWalletError",
    "NotInitializedError",
    "InvalidPrivateKeyError",
    "InvalidAddressError",
    "InvalidTransferRequestError",
    "WalletCreationError",
    "BalanceQueryError",
    "TokenBalanceQueryError",
    "MintLookupError",
    "TransferFailedError",
]
