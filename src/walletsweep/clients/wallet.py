"""Wallet clients that submit contract calls.

LocalWalletClient signs with a private key held in this process.
RemoteWalletClient forwards the call to a wallet's JSON-RPC endpoint, where
the user approves or rejects it.
"""

import logging
from typing import Any, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from walletsweep.clients.rpc import JsonRpcClient, RpcError, hex_to_int
from walletsweep.withdrawal.base import ContractCallDescriptor
from walletsweep.withdrawal.errors import WalletRejectedError

logger = logging.getLogger(__name__)

# EIP-1193 provider error: the user rejected the request
USER_REJECTED_CODE = 4001

# Headroom over eth_estimateGas (numerator / denominator)
GAS_BUFFER = (12, 10)


class LocalWalletClient:
    """Wallet client that signs locally with eth_account."""

    def __init__(
        self,
        account: LocalAccount,
        rpc: JsonRpcClient,
        chain_id: Optional[int] = None,
    ):
        self._account = account
        self.rpc = rpc
        self._chain_id = chain_id

    @classmethod
    def from_key(
        cls,
        private_key: str,
        rpc: JsonRpcClient,
        chain_id: Optional[int] = None,
    ) -> "LocalWalletClient":
        return cls(Account.from_key(private_key), rpc, chain_id)

    @property
    def chain_id(self) -> Optional[int]:
        return self._chain_id

    @property
    def account(self) -> Optional[str]:
        return self._account.address

    async def connect(self) -> None:
        """Read the chain ID from the RPC node if it was not given."""
        if self._chain_id is None:
            self._chain_id = hex_to_int(await self.rpc.call("eth_chainId"))
            logger.info(f"Local wallet {self.account} connected to chain {self._chain_id}")

    async def _build_transaction(self, descriptor: ContractCallDescriptor) -> dict[str, Any]:
        await self.connect()
        data = descriptor.encode()
        sender = self._account.address

        nonce = hex_to_int(await self.rpc.call("eth_getTransactionCount", [sender, "pending"]))
        gas_price = hex_to_int(await self.rpc.call("eth_gasPrice"))
        gas_estimate = hex_to_int(
            await self.rpc.call(
                "eth_estimateGas",
                [{"from": sender, "to": descriptor.address, "data": data}],
            )
        )
        numerator, denominator = GAS_BUFFER

        return {
            "chainId": self._chain_id,
            "nonce": nonce,
            "to": descriptor.address,
            "value": 0,
            "data": data,
            "gas": gas_estimate * numerator // denominator,
            "gasPrice": gas_price,
        }

    async def write_contract(self, descriptor: ContractCallDescriptor) -> str:
        """Sign and broadcast a contract call."""
        tx = await self._build_transaction(descriptor)
        signed = self._account.sign_transaction(tx)
        logger.info(
            f"Broadcasting {descriptor.function_name} to {descriptor.address} "
            f"(nonce {tx['nonce']}, gas {tx['gas']})"
        )
        raw_tx = Web3.to_hex(signed.raw_transaction)
        tx_hash = await self.rpc.call("eth_sendRawTransaction", [raw_tx])
        if not tx_hash:
            raise RpcError("eth_sendRawTransaction returned no transaction hash")
        return tx_hash


class RemoteWalletClient:
    """Wallet client for an external wallet's JSON-RPC endpoint.

    The wallet holds the key and prompts the user for every transaction.
    A JSON-RPC error with code 4001 means the user declined.
    """

    def __init__(self, rpc: JsonRpcClient):
        self.rpc = rpc
        self._chain_id: Optional[int] = None
        self._account: Optional[str] = None

    @property
    def chain_id(self) -> Optional[int]:
        return self._chain_id

    @property
    def account(self) -> Optional[str]:
        return self._account

    async def connect(self) -> None:
        """Read the wallet's active chain and account."""
        self._chain_id = hex_to_int(await self.rpc.call("eth_chainId"))
        accounts = await self.rpc.call("eth_accounts") or []
        self._account = accounts[0] if accounts else None
        logger.info(f"Remote wallet account {self._account} on chain {self._chain_id}")

    async def write_contract(self, descriptor: ContractCallDescriptor) -> str:
        """Ask the wallet to sign and send a contract call.

        Raises:
            WalletRejectedError: If the user declined in the wallet
            RpcError: On any other wallet failure
        """
        if not self._account:
            raise RpcError("Wallet has no connected account")

        tx = {
            "from": self._account,
            "to": descriptor.address,
            "data": descriptor.encode(),
            "value": "0x0",
        }
        try:
            tx_hash = await self.rpc.call("eth_sendTransaction", [tx])
        except RpcError as e:
            if e.code == USER_REJECTED_CODE:
                raise WalletRejectedError(str(e)) from e
            raise

        if not tx_hash:
            raise RpcError("eth_sendTransaction returned no transaction hash")
        return tx_hash

    async def aclose(self) -> None:
        await self.rpc.aclose()

    async def __aenter__(self) -> "RemoteWalletClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
