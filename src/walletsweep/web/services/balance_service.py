"""Balance service for non-custodial web mode.

Reads known-token balances from chain state with ERC-20 balanceOf calls.

SECURITY: This service:
- Only queries public blockchain data
- Never accesses private keys
- Never signs transactions
"""

import logging
from typing import Optional

import httpx

from walletsweep.chains import is_supported_chain
from walletsweep.clients.reader import RpcChainReader
from walletsweep.clients.rpc import JsonRpcClient, RpcError
from walletsweep.config import get_settings
from walletsweep.tokens import TokenInfo, get_known_tokens
from walletsweep.web.contracts.balances import TokenBalance, WalletBalanceResponse
from walletsweep.withdrawal.errors import InvalidAddressError
from walletsweep.withdrawal.units import checksum_address, format_units

logger = logging.getLogger(__name__)


class BalanceService:
    """Service for fetching wallet token balances from blockchain state."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def get_wallet_balances(self, chain_id: int, address: str) -> WalletBalanceResponse:
        """Get balances of every known token on a chain.

        Tokens are read one at a time. A failed read is reported on that
        token and does not stop the others.

        Args:
            chain_id: EVM chain ID
            address: Wallet address

        Returns:
            WalletBalanceResponse with one entry per known token
        """
        if not is_supported_chain(chain_id):
            return self._error_response(chain_id, address, f"Unsupported chain ID {chain_id}")

        try:
            owner = checksum_address(address, "wallet address")
        except InvalidAddressError as e:
            return self._error_response(chain_id, address, str(e))

        settings = get_settings()
        rpc_url = settings.get_rpc_url(chain_id)
        logger.info(f"Fetching token balances for {owner} on chain {chain_id}")

        async with httpx.AsyncClient(timeout=settings.rpc_timeout, transport=self._transport) as client:
            reader = RpcChainReader(JsonRpcClient(rpc_url, client=client))
            balances = [
                await self._read_balance(reader, token, owner)
                for token in get_known_tokens(chain_id)
            ]

        return WalletBalanceResponse(
            success=True,
            chain_id=chain_id,
            address=owner,
            balances=balances,
        )

    async def _read_balance(
        self,
        reader: RpcChainReader,
        token: TokenInfo,
        owner: str,
    ) -> TokenBalance:
        balance = TokenBalance(
            address=token.address,
            symbol=token.symbol,
            name=token.name,
            decimals=token.decimals,
        )
        try:
            raw = await reader.get_token_balance(token.address, owner)
        except RpcError as e:
            logger.warning(f"Error fetching {token.symbol} balance for {owner}: {e}")
            balance.error = str(e)
            return balance

        balance.balance = format_units(raw, token.decimals)
        balance.balance_raw = str(raw)
        return balance

    def _error_response(self, chain_id: int, address: str, error: str) -> WalletBalanceResponse:
        """Build error response."""
        return WalletBalanceResponse(
            success=False,
            chain_id=chain_id,
            address=address,
            error=error,
        )
