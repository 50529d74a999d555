"""Shared utilities for Solana Quick Wallet."""

from solana_quick_wallet.shared.logging import (
    LoggingConfig,
    SanitizingFormatter,
    get_logger,
    sanitize_message,
    setup_logging,
)

__all__ = [
    "LoggingConfig",
    "SanitizingFormatter",
    "get_logger",
    "sanitize_message",
    "setup_logging",
]
