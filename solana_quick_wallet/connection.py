"""Process-wide Solana RPC connection handle."""

from __future__ import annotations

from dataclasses import dataclass

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment

from solana_quick_wallet.errors import NotInitializedError
from solana_quick_wallet.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_RPC_URL = "https://api.devnet.solana.com"
DEFAULT_COMMITMENT = "confirmed"
DEFAULT_TIMEOUT = 10.0
COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")


@dataclass
class SolanaConnection:
    rpc_url: str
    commitment: Commitment
    client: AsyncClient

    @classmethod
    def create(
        cls,
        rpc_url: str,
        commitment: str,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> "SolanaConnection":
        level = Commitment(commitment)
        return cls(
            rpc_url=rpc_url,
            commitment=level,
            client=AsyncClient(rpc_url, commitment=level, timeout=timeout),
        )


_connection: SolanaConnection | None = None


def initialize_solana_connection(
    rpc_url: str | None = None,
    commitment: str = DEFAULT_COMMITMENT,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> None:
    """Point every wallet operation at ``rpc_url`` (devnet when omitted).

    Replaces any existing connection. No request is sent until an operation
    needs the network.
    """
    global _connection

    final_rpc_url = rpc_url or DEFAULT_RPC_URL
    if commitment not in COMMITMENT_LEVELS:
        logger.warning("Unrecognized commitment level %r passed through", commitment)

    _connection = SolanaConnection.create(final_rpc_url, commitment, timeout)
    logger.info(
        "Solana connection initialized to: %s with commitment: %s",
        final_rpc_url,
        commitment,
    )


def get_connection() -> SolanaConnection | None:
    return _connection


def require_initialized() -> SolanaConnection:
    if _connection is None:
        raise NotInitializedError()
    return _connection


async def close_solana_connection() -> None:
    """Close the HTTP session of the current connection and forget it.

    ``initialize_solana_connection`` cannot await, so a replaced client keeps
    its pool open until this is called.
    """
    global _connection

    if _connection is None:
        return

    connection, _connection = _connection, None
    await connection.client.close()
    logger.info("Solana connection to %s closed", connection.rpc_url)
