"""Read-only chain access over JSON-RPC."""

import logging
from typing import Optional

from eth_abi import decode, encode
from web3 import Web3

from walletsweep.clients.rpc import DEFAULT_TIMEOUT, JsonRpcClient, RpcError
from walletsweep.withdrawal.units import checksum_address

logger = logging.getLogger(__name__)

# ERC-20 balanceOf(address) function selector
BALANCE_OF_SELECTOR = "0x70a08231"


class RpcChainReader:
    """Chain reader backed by an Ethereum RPC endpoint."""

    def __init__(self, rpc: JsonRpcClient):
        self.rpc = rpc

    @classmethod
    def from_url(cls, rpc_url: str, timeout: float = DEFAULT_TIMEOUT) -> "RpcChainReader":
        return cls(JsonRpcClient(rpc_url, timeout=timeout))

    async def get_bytecode(self, address: str, block: str = "latest") -> Optional[str]:
        """Get deployed code at an address ("0x" for plain accounts)."""
        code = await self.rpc.call("eth_getCode", [checksum_address(address), block])
        logger.debug(f"eth_getCode {address}: {len(code or '') // 2 - 1} bytes")
        return code

    async def get_token_balance(self, token_address: str, owner: str, block: str = "latest") -> int:
        """Get an ERC-20 balance in base units via balanceOf.

        Args:
            token_address: Token contract
            owner: Account whose balance is read
            block: Block tag or number

        Returns:
            Balance in the token's smallest unit

        Raises:
            InvalidAddressError: If either address is invalid
            RpcError: If the call fails or returns no data
        """
        token = checksum_address(token_address, "token address")
        data = BALANCE_OF_SELECTOR + encode(["address"], [checksum_address(owner, "owner address")]).hex()

        result = await self.rpc.call("eth_call", [{"to": token, "data": data}, block])
        if not result or result == "0x":
            raise RpcError(f"balanceOf returned no data for token {token}")

        (balance,) = decode(["uint256"], Web3.to_bytes(hexstr=result))
        return balance

    async def aclose(self) -> None:
        await self.rpc.aclose()

    async def __aenter__(self) -> "RpcChainReader":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
