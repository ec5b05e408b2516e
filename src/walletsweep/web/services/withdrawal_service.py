"""Withdrawal service for non-custodial web mode.

This service provides withdrawal transaction TEMPLATES only.
The user's wallet signs and broadcasts - the backend NEVER does.

It ONLY:
- Validates withdrawal parameters
- Builds contract calls for the connected chain
- Encodes the single transaction the wallet will be asked to approve
"""

import logging
from typing import Any

from walletsweep.chains import get_route
from walletsweep.web.contracts.withdrawals import (
    ContractCall,
    PrepareWithdrawalRequest,
    PrepareWithdrawalResponse,
    UnsignedWithdrawalTransaction,
)
from walletsweep.withdrawal.base import ContractCallDescriptor, TokenWithdrawalRequest
from walletsweep.withdrawal.builder import build_withdrawal_requests
from walletsweep.withdrawal.errors import WithdrawalError
from walletsweep.withdrawal.units import shorten_address

logger = logging.getLogger(__name__)


def _json_safe(value: Any) -> Any:
    """Render uint256 values as strings and tuples as lists."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def _to_contract_call(descriptor: ContractCallDescriptor) -> ContractCall:
    return ContractCall(
        address=descriptor.address,
        function_name=descriptor.function_name,
        args=_json_safe(descriptor.args),
        abi=list(descriptor.abi),
    )


class WithdrawalService:
    """Non-custodial withdrawal service that returns transaction templates."""

    def prepare_withdrawal(self, request: PrepareWithdrawalRequest) -> PrepareWithdrawalResponse:
        """Build the withdrawal transaction template.

        Args:
            request: Chain, destination and token selection

        Returns:
            PrepareWithdrawalResponse with the unsigned transaction, or an error
        """
        tokens = [
            TokenWithdrawalRequest(
                token_address=token.token_address,
                amount=token.amount,
                decimals=token.decimals,
            )
            for token in request.tokens
        ]

        try:
            descriptors = build_withdrawal_requests(
                tokens, request.destination_address, request.chain_id
            )
        except WithdrawalError as e:
            logger.warning(f"Withdrawal template failed: {e}")
            return self._error_response(request, e)

        descriptor = descriptors[0]
        route = get_route(request.chain_id)
        chain_name = route.name if route else str(request.chain_id)

        warnings = []
        if len(tokens) > 1:
            skipped = [token.token_address for token in tokens[1:]]
            warnings.append(
                f"Only the first token is included in the transaction on {chain_name}; "
                f"not included: {', '.join(skipped)}"
            )

        transaction = UnsignedWithdrawalTransaction(
            chain_id=request.chain_id,
            to=descriptor.address,
            data=descriptor.encode(),
            description=(
                f"{descriptor.function_name} via {shorten_address(descriptor.address)} "
                f"to {shorten_address(request.destination_address)} on {chain_name}"
            ),
        )

        return PrepareWithdrawalResponse(
            success=True,
            chain_id=request.chain_id,
            destination=request.destination_address,
            transaction=transaction,
            calls=[_to_contract_call(d) for d in descriptors],
            warnings=warnings,
        )

    def _error_response(
        self,
        request: PrepareWithdrawalRequest,
        error: WithdrawalError,
    ) -> PrepareWithdrawalResponse:
        """Build error response."""
        return PrepareWithdrawalResponse(
            success=False,
            chain_id=request.chain_id,
            destination=request.destination_address,
            error=str(error),
            error_kind=error.kind.value,
        )
