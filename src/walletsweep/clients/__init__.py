"""JSON-RPC clients used to verify contracts and submit withdrawals."""

from walletsweep.clients.reader import RpcChainReader
from walletsweep.clients.rpc import JsonRpcClient, RpcError
from walletsweep.clients.wallet import LocalWalletClient, RemoteWalletClient

__all__ = [
    "JsonRpcClient",
    "LocalWalletClient",
    "RemoteWalletClient",
    "RpcChainReader",
    "RpcError",
]
