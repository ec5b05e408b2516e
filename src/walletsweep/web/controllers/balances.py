"""Balance API endpoints for non-custodial web mode.

SECURITY: These endpoints:
- Only query public blockchain data
- Never access private keys
- Never sign transactions
"""

from fastapi import APIRouter, Depends

from walletsweep.web.contracts.balances import WalletBalanceResponse
from walletsweep.web.services.balance_service import BalanceService

router = APIRouter(prefix="/balances", tags=["balances"])


def get_balance_service() -> BalanceService:
    return BalanceService()


@router.get("/{chain_id}/{address}", response_model=WalletBalanceResponse)
async def get_wallet_balances(
    chain_id: int,
    address: str,
    service: BalanceService = Depends(get_balance_service),
) -> WalletBalanceResponse:
    """Get the wallet's balance of every known token on a chain.

    Tokens that could not be read carry an error instead of a balance.
    """
    return await service.get_wallet_balances(chain_id, address)
