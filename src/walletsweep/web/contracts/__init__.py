"""Request and response contracts for the web layer.

These Pydantic models define the API interface for web clients.
"""

from walletsweep.web.contracts.balances import TokenBalance, WalletBalanceResponse
from walletsweep.web.contracts.chains import (
    ChainRouteInfo,
    ChainRouteListResponse,
    KnownToken,
    KnownTokenListResponse,
)
from walletsweep.web.contracts.withdrawals import (
    ContractCall,
    PrepareWithdrawalRequest,
    PrepareWithdrawalResponse,
    TokenAmount,
    UnsignedWithdrawalTransaction,
)

__all__ = [
    # Balance contracts
    "TokenBalance",
    "WalletBalanceResponse",
    # Chain contracts
    "ChainRouteInfo",
    "ChainRouteListResponse",
    "KnownToken",
    "KnownTokenListResponse",
    # Withdrawal contracts
    "ContractCall",
    "PrepareWithdrawalRequest",
    "PrepareWithdrawalResponse",
    "TokenAmount",
    "UnsignedWithdrawalTransaction",
]
