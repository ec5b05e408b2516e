"""Withdrawal request builder.

Turns the user's token selection into contract call descriptors for the
connected chain. Pure: no network access, no signing.
"""

import logging
from typing import Mapping, Optional, Sequence

from walletsweep.chains import CHAIN_ROUTES, ChainRoute
from walletsweep.tokens import find_token
from walletsweep.withdrawal.base import ContractCallDescriptor, TokenWithdrawalRequest
from walletsweep.withdrawal.errors import (
    AmountParseError,
    ContractNotConfiguredError,
    UnsupportedChainError,
)
from walletsweep.withdrawal.units import DEFAULT_DECIMALS, checksum_address, parse_units

logger = logging.getLogger(__name__)


# Disperse.app: sends one token to many recipients
DISPERSE_ABI: tuple[dict, ...] = (
    {
        "name": "disperseTokenSimple",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "token", "type": "address"},
            {"name": "recipients", "type": "address[]"},
            {"name": "values", "type": "uint256[]"},
        ],
        "outputs": [],
    },
)

ERC20_TRANSFER_ABI: tuple[dict, ...] = (
    {
        "name": "transfer",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "value", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
)


def _resolve_decimals(token: TokenWithdrawalRequest, chain_id: int) -> int:
    if token.decimals is not None:
        return token.decimals

    known = find_token(chain_id, token.token_address)
    if known is not None:
        logger.debug(f"Using {known.decimals} decimals for {known.symbol} ({known.address})")
        return known.decimals

    logger.warning(
        f"No decimals given for token {token.token_address}, assuming {DEFAULT_DECIMALS}"
    )
    return DEFAULT_DECIMALS


def _to_base_units(token: TokenWithdrawalRequest, chain_id: int) -> int:
    decimals = _resolve_decimals(token, chain_id)

    try:
        return parse_units(token.amount, decimals)
    except AmountParseError as e:
        logger.error(f"Error processing token {token.token_address}: {e.reason}")
        raise AmountParseError(token.amount, token.token_address, e.reason) from e


def _disperse_call(
    route: ChainRoute,
    token: TokenWithdrawalRequest,
    destination: str,
) -> ContractCallDescriptor:
    amount = _to_base_units(token, route.chain_id)
    return ContractCallDescriptor(
        address=checksum_address(route.contract_address, "contract address"),
        abi=DISPERSE_ABI,
        function_name="disperseTokenSimple",
        args=(
            checksum_address(token.token_address, "token address"),
            (destination,),
            (amount,),
        ),
    )


def _transfer_call(
    route: ChainRoute,
    token: TokenWithdrawalRequest,
    destination: str,
) -> ContractCallDescriptor:
    amount = _to_base_units(token, route.chain_id)
    return ContractCallDescriptor(
        address=checksum_address(token.token_address, "token address"),
        abi=ERC20_TRANSFER_ABI,
        function_name="transfer",
        args=(destination, amount),
    )


def build_withdrawal_requests(
    tokens: Sequence[TokenWithdrawalRequest],
    destination_address: str,
    chain_id: int,
    routes: Optional[Mapping[int, ChainRoute]] = None,
) -> list[ContractCallDescriptor]:
    """Build contract call descriptors for a batch withdrawal.

    On multi-token chains every token gets its own Disperse.app call. On
    other chains only the first token is used, as a plain ERC-20 transfer.
    Tokens without decimals use the known-token list for the chain, then 18.

    Args:
        tokens: Selected tokens with decimal-string amounts
        destination_address: Recipient of every token
        chain_id: Chain the wallet is connected to
        routes: Route table override (defaults to CHAIN_ROUTES)

    Returns:
        Descriptors in token order, never empty for a non-empty token list

    Raises:
        UnsupportedChainError: If the chain has no route
        ContractNotConfiguredError: If the route has no contract address
        AmountParseError: If a token amount is not a valid number
        InvalidAddressError: If the destination or a token address is invalid
    """
    route_table = CHAIN_ROUTES if routes is None else routes

    route = route_table.get(chain_id)
    if route is None:
        raise UnsupportedChainError(chain_id)

    if not route.contract_address:
        raise ContractNotConfiguredError(chain_id)

    if not tokens:
        return []

    destination = checksum_address(destination_address, "destination address")

    if route.supports_multi_token:
        return [_disperse_call(route, token, destination) for token in tokens]

    if len(tokens) > 1:
        logger.warning(
            f"{route.name} supports one token per withdrawal - "
            f"ignoring {len(tokens) - 1} of {len(tokens)} selected tokens"
        )

    return [_transfer_call(route, tokens[0], destination)]
