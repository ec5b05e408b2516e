"""Chain route API endpoints."""

from fastapi import APIRouter, HTTPException

from walletsweep.web.contracts.chains import (
    ChainRouteInfo,
    ChainRouteListResponse,
    KnownTokenListResponse,
)
from walletsweep.web.services.chain_service import ChainService

router = APIRouter(prefix="/chains", tags=["chains"])

# Service instance
_chain_service = ChainService()


@router.get("", response_model=ChainRouteListResponse)
async def get_chains() -> ChainRouteListResponse:
    """Get all chains that support batch withdrawals."""
    return _chain_service.get_supported_chains()


@router.get("/{chain_id}", response_model=ChainRouteInfo)
async def get_chain(chain_id: int) -> ChainRouteInfo:
    """Get the withdrawal route for a chain ID."""
    chain = _chain_service.get_chain(chain_id)
    if not chain:
        raise HTTPException(status_code=404, detail=f"Chain not found: {chain_id}")
    return chain


@router.get("/{chain_id}/tokens", response_model=KnownTokenListResponse)
async def get_chain_tokens(chain_id: int) -> KnownTokenListResponse:
    """Get the known tokens (with decimals) for a chain."""
    tokens = _chain_service.get_known_tokens(chain_id)
    if tokens is None:
        raise HTTPException(status_code=404, detail=f"Chain not found: {chain_id}")
    return tokens
