"""Chain route contracts."""

from typing import Optional

from pydantic import BaseModel, Field


class ChainRouteInfo(BaseModel):
    """Withdrawal route for one chain."""

    chain_id: int = Field(..., description="EVM chain ID (1 for Ethereum, etc.)")
    name: str = Field(..., description="Chain display name")
    contract_address: str = Field(..., description="Batch transfer contract address")
    supports_multi_token: bool = Field(
        default=False,
        description="Whether several tokens can be withdrawn in one transaction"
    )
    max_tokens: int = Field(..., description="Maximum tokens to select per withdrawal")
    rpc_url: Optional[str] = Field(None, description="Configured RPC URL (credentials redacted)")


class ChainRouteListResponse(BaseModel):
    """Response containing all withdrawal routes."""

    success: bool = True
    chains: list[ChainRouteInfo] = Field(default_factory=list)
    total: int = Field(default=0, description="Total number of chains")


class KnownToken(BaseModel):
    """A token with known metadata on a chain."""

    address: str = Field(..., description="Token contract address")
    symbol: str = Field(..., description="Token symbol")
    name: str = Field(..., description="Token name")
    decimals: int = Field(..., description="Token decimals")


class KnownTokenListResponse(BaseModel):
    """Known tokens for one chain."""

    success: bool = True
    chain_id: int = Field(..., description="EVM chain ID")
    tokens: list[KnownToken] = Field(default_factory=list)
    total: int = Field(default=0, description="Total number of tokens")
