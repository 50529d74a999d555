"""Typed failures raised by Solana Quick Wallet operations.

Every public operation either returns its record or raises exactly one of the
errors below. Network-wrapped errors keep the low-level exception in
``original_error`` (and as ``__cause__``) for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass

from solana_quick_wallet.network import NetworkErrorType


@dataclass
class SolanaWalletError(Exception):
    message: str
    original_error: Exception | None = None
    error_type: NetworkErrorType | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class NotInitializedError(SolanaWalletError):
    message: str = (
        "Solana connection not initialized. Call initialize_solana_connection() first."
    )


@dataclass
class InvalidPrivateKeyError(SolanaWalletError):
    message: str = "Invalid private key."
    reason: str | None = None


@dataclass
class InvalidAddressError(SolanaWalletError):
    message: str = "Invalid address."
    field: str | None = None
    value: str | None = None


@dataclass
class InvalidTransferRequestError(SolanaWalletError):
    message: str = "Invalid transfer request."
    field: str | None = None


@dataclass
class WalletCreationError(SolanaWalletError):
    message: str = "Failed to create wallet."


@dataclass
class BalanceQueryError(SolanaWalletError):
    message: str = "Failed to fetch SOL balance."


@dataclass
class TokenBalanceQueryError(SolanaWalletError):
    message: str = "Failed to fetch SPL balance."


@dataclass
class MintLookupError(SolanaWalletError):
    message: str = "Token mint not found."
    token_address: str | None = None


@dataclass
class TransferFailedError(SolanaWalletError):
    message: str = "Transfer failed."


__all__ = [
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
