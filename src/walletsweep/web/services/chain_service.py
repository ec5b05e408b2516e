"""Chain service for withdrawal route metadata.

Provides read-only access to the chain route table and known tokens.
"""

from typing import Optional

from walletsweep.chains import CHAIN_ROUTES, ChainRoute
from walletsweep.config import get_settings
from walletsweep.tokens import get_known_tokens
from walletsweep.web.contracts.chains import (
    ChainRouteInfo,
    ChainRouteListResponse,
    KnownToken,
    KnownTokenListResponse,
)


class ChainService:
    """READ-ONLY service for supported chains."""

    def _to_info(self, route: ChainRoute) -> ChainRouteInfo:
        settings = get_settings()
        return ChainRouteInfo(
            chain_id=int(route.chain_id),
            name=route.name,
            contract_address=route.contract_address,
            supports_multi_token=route.supports_multi_token,
            max_tokens=route.max_tokens,
            rpc_url=settings.redact_url(settings.get_rpc_url(route.chain_id)) or None,
        )

    def get_supported_chains(self) -> ChainRouteListResponse:
        """Get all chains with a withdrawal route."""
        chains = [self._to_info(route) for route in CHAIN_ROUTES.values()]
        return ChainRouteListResponse(
            success=True,
            chains=chains,
            total=len(chains),
        )

    def get_chain(self, chain_id: int) -> Optional[ChainRouteInfo]:
        """Get the route for a chain ID, or None if unsupported."""
        route = CHAIN_ROUTES.get(chain_id)
        return self._to_info(route) if route else None

    def get_known_tokens(self, chain_id: int) -> Optional[KnownTokenListResponse]:
        """Get the known tokens for a chain, or None if unsupported."""
        if chain_id not in CHAIN_ROUTES:
            return None

        tokens = [
            KnownToken(
                address=token.address,
                symbol=token.symbol,
                name=token.name,
                decimals=token.decimals,
            )
            for token in get_known_tokens(chain_id)
        ]
        return KnownTokenListResponse(chain_id=chain_id, tokens=tokens, total=len(tokens))
