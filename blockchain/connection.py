"""
RPC Connection
Builds the Web3 client bound to the configured JSON-RPC endpoint
"""

from typing import Optional

from web3 import Web3
from loguru import logger

from utils.exceptions import RPCConnectionError


def connect(rpc_url: str, request_timeout: Optional[float] = None) -> Web3:
    """
    Create a Web3 instance for `rpc_url` and check it responds

    Args:
        rpc_url: HTTP(S) JSON-RPC endpoint
        request_timeout: Per-request HTTP timeout in seconds (None = library default)

    Returns:
        Connected Web3 instance

    Raises:
        RPCConnectionError: If the endpoint does not answer
    """
    request_kwargs = {'timeout': request_timeout} if request_timeout is not None else None
    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs=request_kwargs))

    if not w3.is_connected():
        raise RPCConnectionError(f"Failed to connect to {rpc_url}")

    logger.success(f"Connected to {rpc_url}")
    return w3
