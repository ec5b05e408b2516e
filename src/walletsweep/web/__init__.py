"""Web boundary layer for non-custodial operations.

SECURITY PRINCIPLES:
1. This layer MUST NOT import from clients/ wallet signing code.
2. All operations are read-only or prepare data for client-side signing.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
