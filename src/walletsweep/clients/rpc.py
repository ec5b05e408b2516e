"""Ethereum JSON-RPC transport over httpx."""

import itertools
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class RpcError(Exception):
    """JSON-RPC or transport failure."""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        self.code = code
        self.data = data
        super().__init__(message)


class JsonRpcClient:
    """Minimal async JSON-RPC 2.0 client.

    Example:
        async with JsonRpcClient("https://eth.llamarpc.com") as rpc:
            block = await rpc.call("eth_blockNumber")
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None
        self._ids = itertools.count(1)

    async def call(self, method: str, params: Optional[list] = None) -> Any:
        """Call an RPC method and return its result.

        Raises:
            RpcError: On HTTP failure or a JSON-RPC error object
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": next(self._ids),
        }

        try:
            response = await self._client.post(self.url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"RPC {method} failed: {e}")
            raise RpcError(f"RPC connection failed: {e}") from e
        except ValueError as e:
            raise RpcError(f"Invalid RPC response for {method}") from e

        error = data.get("error")
        if error:
            logger.debug(f"RPC {method} returned error: {error}")
            raise RpcError(
                error.get("message", "Unknown RPC error"),
                code=error.get("code"),
                data=error.get("data"),
            )

        return data.get("result")

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "JsonRpcClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def hex_to_int(value: Optional[str]) -> int:
    """Parse a hex quantity from an RPC result."""
    return int(value or "0x0", 16)
