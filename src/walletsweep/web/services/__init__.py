"""Web services for read-only and non-custodial operations.

SECURITY: These services MUST NOT:
- Access private keys
- Sign or broadcast transactions

These services CAN:
- Read the chain route table and known tokens
- Read token balances from chain state
- Prepare unsigned transactions for client signing
- Query the address screening server
"""

from walletsweep.web.services.balance_service import BalanceService
from walletsweep.web.services.chain_service import ChainService
from walletsweep.web.services.screening_service import ScreeningError, ScreeningService
from walletsweep.web.services.withdrawal_service import WithdrawalService

__all__ = [
    "BalanceService",
    "ChainService",
    "ScreeningError",
    "ScreeningService",
    "WithdrawalService",
]
