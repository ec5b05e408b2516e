"""Withdrawal API endpoints for non-custodial web mode.

These endpoints return withdrawal transaction TEMPLATES only.
The client's wallet signs and broadcasts.
"""

import logging

from fastapi import APIRouter

from walletsweep.web.contracts.withdrawals import (
    PrepareWithdrawalRequest,
    PrepareWithdrawalResponse,
)
from walletsweep.web.services.withdrawal_service import WithdrawalService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/withdrawals", tags=["withdrawals"])

# Service instance
_withdrawal_service = WithdrawalService()


@router.post("/prepare", response_model=PrepareWithdrawalResponse)
async def prepare_withdrawal(request: PrepareWithdrawalRequest) -> PrepareWithdrawalResponse:
    """Get the batch withdrawal transaction template.

    The client must:
    1. Review the transaction and any warnings
    2. Run the bytecode check against the target contract
    3. Sign and broadcast with their wallet
    """
    logger.info(
        f"Withdrawal template requested: {len(request.tokens)} tokens on chain {request.chain_id}"
    )
    return _withdrawal_service.prepare_withdrawal(request)
