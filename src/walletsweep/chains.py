"""Batch withdrawal routes for all supported EVM chains.

Supports 7 chains:
- Ethereum, Polygon (Disperse.app, multiple tokens per transaction)
- Optimism, BSC, Gnosis, Arbitrum, Avalanche (single ERC-20 transfer)

The table is immutable and checked when this module is imported.
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional

from web3 import Web3


class SupportedChain(IntEnum):
    """EVM chain IDs with a configured withdrawal route."""

    ETHEREUM = 1
    OPTIMISM = 10
    BSC = 56
    GNOSIS = 100
    POLYGON = 137
    ARBITRUM = 42161
    AVALANCHE = 43114


DEFAULT_CHAIN_ID = SupportedChain.ETHEREUM


@dataclass(frozen=True)
class ChainRoute:
    """Withdrawal route for one chain."""

    chain_id: int
    name: str
    contract_address: str
    supports_multi_token: bool = False

    @property
    def max_tokens(self) -> int:
        """Tokens a wallet UI should let the user select for one withdrawal."""
        return 4 if self.supports_multi_token else 1


# ======================
# Route Table
# ======================

DISPERSE_APP = "0xD152f549545093347A162Dce210e7293f1452150"
DISPERSE_APP_POLYGON = "0xb5c5F672F106A5CC1cE0D67b9a574C6a8e5E36cF"
GNOSIS_MULTISEND = "0x7f00aF5a6261D1B0e87dc594e95D161982EB265d"

_ROUTES = (
    ChainRoute(SupportedChain.ETHEREUM, "Ethereum", DISPERSE_APP, supports_multi_token=True),
    ChainRoute(SupportedChain.OPTIMISM, "Optimism", DISPERSE_APP),
    ChainRoute(SupportedChain.BSC, "BNB Smart Chain", DISPERSE_APP),
    ChainRoute(SupportedChain.GNOSIS, "Gnosis", GNOSIS_MULTISEND),
    ChainRoute(SupportedChain.POLYGON, "Polygon", DISPERSE_APP_POLYGON, supports_multi_token=True),
    ChainRoute(SupportedChain.ARBITRUM, "Arbitrum One", DISPERSE_APP),
    ChainRoute(SupportedChain.AVALANCHE, "Avalanche C-Chain", DISPERSE_APP),
)


def validate_routes(routes: Mapping[int, ChainRoute]) -> None:
    """Check that every supported chain has exactly one non-empty route.

    Raises:
        RuntimeError: If a chain is missing or has an empty contract address
    """
    missing = [chain.name for chain in SupportedChain if chain not in routes]
    if missing:
        raise RuntimeError(f"No withdrawal route for chains: {', '.join(missing)}")

    empty = [str(chain_id) for chain_id, route in routes.items() if not route.contract_address]
    if empty:
        raise RuntimeError(f"Empty contract address for chain IDs: {', '.join(empty)}")


def _build_routes() -> Mapping[int, ChainRoute]:
    routes: dict[int, ChainRoute] = {}
    for route in _ROUTES:
        if route.chain_id in routes:
            raise RuntimeError(f"Duplicate withdrawal route for chain ID {route.chain_id}")
        if route.contract_address:
            route = replace(
                route, contract_address=Web3.to_checksum_address(route.contract_address.lower())
            )
        routes[int(route.chain_id)] = route
    validate_routes(routes)
    return MappingProxyType(routes)


CHAIN_ROUTES: Mapping[int, ChainRoute] = _build_routes()


def get_route(chain_id: int) -> Optional[ChainRoute]:
    """Get the withdrawal route for a chain ID, or None if unsupported."""
    return CHAIN_ROUTES.get(chain_id)


def is_supported_chain(chain_id: int) -> bool:
    """Check if batch withdrawals are supported on a chain."""
    return chain_id in CHAIN_ROUTES
