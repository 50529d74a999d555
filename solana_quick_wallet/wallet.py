"""Keypair creation and recovery from base58 private keys."""

from __future__ import annotations

from dataclasses import dataclass

import base58
from solders.keypair import Keypair

from solana_quick_wallet.errors import InvalidPrivateKeyError, WalletCreationError
from solana_quick_wallet.shared.logging import get_logger
from solana_quick_wallet.validation import PrivateKeyValidator

logger = get_logger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000
SOL_DECIMALS = 9


@dataclass
class WalletKeys:
    public_key: str
    private_key: str

    def to_dict(self) -> dict:
        return {
            "publicKey": self.public_key,
            "privateKey": self.private_key,
        }

    def __repr__(self) -> str:
        return f"WalletKeys(public_key={self.public_key!r}, private_key='[REDACTED]')"


def load_keypair(private_key: str) -> Keypair:
    """Rebuild a ``Keypair`` from a base58-encoded 64-byte secret key.

    Raises:
        InvalidPrivateKeyError: empty input, bad base58, wrong length, or a
            secret whose public half does not match its private half.
    """
    result = PrivateKeyValidator.validate(private_key)
    if not result.is_valid:
        raise InvalidPrivateKeyError(reason=result.error_message)

    try:
        return Keypair.from_bytes(result.normalized_value)
    except Exception as e:
        raise InvalidPrivateKeyError(
            reason="Private key bytes are not a valid ed25519 keypair",
            original_error=e,
        ) from e


def create_wallet() -> WalletKeys:
    """Generate a new random keypair with a base58-encoded secret key."""
    try:
        keypair = Keypair()
        private_key = base58.b58encode(bytes(keypair)).decode("ascii")
        public_key = str(keypair.pubkey())
    except Exception as e:
        logger.error("Error creating wallet: %s", e, exc_info=True)
        raise WalletCreationError(original_error=e) from e

    logger.info("Created wallet %s", public_key)
    return WalletKeys(public_key=public_key, private_key=private_key)


def create_wallet_from_private_key(private_key: str) -> WalletKeys:
    """Restore the wallet for a base58-encoded 64-byte secret key."""
    keypair = load_keypair(private_key)
    return WalletKeys(public_key=str(keypair.pubkey()), private_key=private_key)
