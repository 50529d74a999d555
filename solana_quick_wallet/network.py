"""Classification of RPC failures raised by the Solana client stack."""

from enum import Enum

import httpx
from solana.exceptions import SolanaRpcException
from solana.rpc.core import (
    RPCException,
    TransactionExpiredBlockheightExceededError,
    UnconfirmedTxError,
)


class NetworkErrorType(Enum):
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_ERROR = "http_error"
    RPC_ERROR = "rpc_error"
    UNCONFIRMED = "unconfirmed"
    UNKNOWN = "unknown"


def unwrap_error(error: BaseException) -> BaseException:
    # solana-py re-raises transport failures as SolanaRpcException from the httpx error
    while isinstance(error, SolanaRpcException) and error.__cause__ is not None:
        error = error.__cause__
    return error


def classify_error(error: BaseException) -> NetworkErrorType:
    error = unwrap_error(error)
    if isinstance(error, httpx.TimeoutException):
        return NetworkErrorType.TIMEOUT
    elif isinstance(error, httpx.NetworkError):
        return NetworkErrorType.CONNECTION_ERROR
    elif isinstance(error, httpx.HTTPStatusError):
        return NetworkErrorType.HTTP_ERROR
    elif isinstance(error, RPCException):
        return NetworkErrorType.RPC_ERROR
    elif isinstance(
        error, (UnconfirmedTxError, TransactionExpiredBlockheightExceededError)
    ):
        return NetworkErrorType.UNCONFIRMED
    return NetworkErrorType.UNKNOWN


def describe_error(error: BaseException, endpoint: str, context: str = "") -> str:
    error_type = classify_error(error)
    cause = unwrap_error(error)
    context_prefix = f"{context}: " if context else ""

    if error_type == NetworkErrorType.TIMEOUT:
        return f"{context_prefix}RPC timeout. Endpoint may be unavailable: {endpoint}"
    elif error_type == NetworkErrorType.CONNECTION_ERROR:
        return (
            f"{context_prefix}Cannot connect to RPC endpoint: {endpoint}. "
            "Check your network connection."
        )
    elif error_type == NetworkErrorType.HTTP_ERROR:
        response = getattr(cause, "response", None)
        status_code = getattr(response, "status_code", None)
        return f"{context_prefix}HTTP error {status_code} from {endpoint}"
    elif error_type == NetworkErrorType.RPC_ERROR:
        return f"{context_prefix}RPC error: {cause}"
    elif error_type == NetworkErrorType.UNCONFIRMED:
        return f"{context_prefix}Transaction was not confirmed: {cause}"
    return f"{context_prefix}Unexpected error: {cause!r}"
