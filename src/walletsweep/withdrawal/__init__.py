"""Batch withdrawal module.

Builds contract calls for the user's selected tokens and submits them
through the user's own wallet in a single transaction.
"""

from walletsweep.withdrawal.base import (
    ContractCallDescriptor,
    TokenWithdrawalRequest,
    WithdrawalFailed,
    WithdrawalOutcome,
    WithdrawalSubmitted,
)
from walletsweep.withdrawal.builder import build_withdrawal_requests
from walletsweep.withdrawal.executor import BatchWithdrawalExecutor, batch_withdraw_tokens

__all__ = [
    "BatchWithdrawalExecutor",
    "ContractCallDescriptor",
    "TokenWithdrawalRequest",
    "WithdrawalFailed",
    "WithdrawalOutcome",
    "WithdrawalSubmitted",
    "batch_withdraw_tokens",
    "build_withdrawal_requests",
]
