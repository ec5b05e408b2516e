"""Balance contracts for non-custodial web mode.

Balances are read from chain state with ERC-20 balanceOf calls. Only the
known tokens for the chain are queried.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TokenBalance(BaseModel):
    """Balance of a single known token."""

    address: str = Field(..., description="Token contract address")
    symbol: str = Field(..., description="Token symbol (USDC, DAI, etc.)")
    name: str = Field(..., description="Token name")
    decimals: int = Field(..., description="Token decimals")
    balance: Optional[str] = Field(None, description="Balance in human-readable units")
    balance_raw: Optional[str] = Field(None, description="Balance in smallest units")
    error: Optional[str] = Field(None, description="Why the balance could not be read")


class WalletBalanceResponse(BaseModel):
    """Known-token balances of a wallet on one chain."""

    success: bool = Field(..., description="Whether the query ran")
    chain_id: int = Field(..., description="EVM chain ID")
    address: str = Field(..., description="Wallet address queried")
    balances: list[TokenBalance] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="Error message if failed")
