"""HTTP controllers for web API endpoints.

SECURITY: These controllers MUST NOT sign or broadcast transactions.
"""

from walletsweep.web.controllers.balances import router as balances_router
from walletsweep.web.controllers.chains import router as chains_router
from walletsweep.web.controllers.screening import router as screening_router
from walletsweep.web.controllers.withdrawals import router as withdrawals_router

__all__ = [
    "balances_router",
    "chains_router",
    "screening_router",
    "withdrawals_router",
]
