"""Withdrawal contracts for non-custodial web mode.

These contracts define withdrawal transaction templates.
Actual withdrawals are signed and broadcast client-side - the backend NEVER
signs or broadcasts.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from walletsweep.withdrawal.units import MAX_DECIMALS


class TokenAmount(BaseModel):
    """A token selected for withdrawal."""

    token_address: str = Field(..., description="ERC-20 token contract address")
    amount: str = Field(..., description="Amount as a decimal string (e.g. '1.5')")
    decimals: Optional[int] = Field(
        None, ge=0, le=MAX_DECIMALS, description="Token decimals (18 if omitted)"
    )


class PrepareWithdrawalRequest(BaseModel):
    """Request for a batch withdrawal transaction template."""

    chain_id: int = Field(..., description="Chain the wallet is connected to")
    destination_address: str = Field(..., min_length=1, description="Recipient address")
    tokens: list[TokenAmount] = Field(..., min_length=1, description="Tokens to withdraw")


class ContractCall(BaseModel):
    """A contract call descriptor, JSON-safe (uint256 values as strings)."""

    address: str = Field(..., description="Contract address")
    function_name: str = Field(..., description="Called function")
    args: list[Any] = Field(default_factory=list, description="Call arguments")
    abi: list[dict] = Field(default_factory=list, description="ABI fragment")


class UnsignedWithdrawalTransaction(BaseModel):
    """Unsigned transaction for client-side signing."""

    chain_id: int = Field(..., description="EVM chain ID")
    to: str = Field(..., description="Contract address")
    value: str = Field(default="0x0", description="Native value (hex)")
    data: str = Field(..., description="ABI-encoded call data (hex)")
    description: str = Field(default="", description="Human-readable description")


class PrepareWithdrawalResponse(BaseModel):
    """Response containing the withdrawal transaction template."""

    success: bool = Field(..., description="Whether the template was created")
    chain_id: int = Field(..., description="Requested chain ID")
    destination: str = Field(..., description="Destination address")

    # The one transaction the wallet will be asked to approve
    transaction: Optional[UnsignedWithdrawalTransaction] = Field(None)

    # Every call that was built, in token order
    calls: list[ContractCall] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    error: Optional[str] = Field(None, description="Error message if failed")
    error_kind: Optional[str] = Field(None, description="Error classification")
