"""Tests for the withdrawal request builder and chain routes."""

import pytest
from eth_utils import function_signature_to_4byte_selector
from web3 import Web3

from conftest import DAI, DESTINATION, USDC, USDT, flip_case
from walletsweep.chains import (
    CHAIN_ROUTES,
    DISPERSE_APP,
    DISPERSE_APP_POLYGON,
    ChainRoute,
    SupportedChain,
    get_route,
    is_supported_chain,
    validate_routes,
)
from walletsweep.withdrawal.base import TokenWithdrawalRequest
from walletsweep.withdrawal.builder import build_withdrawal_requests
from walletsweep.withdrawal.errors import (
    AmountParseError,
    ContractNotConfiguredError,
    ErrorKind,
    InvalidAddressError,
    UnsupportedChainError,
)

SINGLE_TOKEN_CHAINS = [10, 56, 100, 42161, 43114]


class TestChainRoutes:
    """Tests for the static route table."""

    def test_all_supported_chains_have_routes(self):
        assert set(CHAIN_ROUTES) == {1, 10, 56, 100, 137, 42161, 43114}
        assert all(route.contract_address for route in CHAIN_ROUTES.values())

    def test_only_ethereum_and_polygon_are_multi_token(self):
        multi = {chain_id for chain_id, route in CHAIN_ROUTES.items() if route.supports_multi_token}
        assert multi == {1, 137}

    def test_max_tokens(self):
        assert get_route(1).max_tokens == 4
        assert get_route(56).max_tokens == 1

    def test_routes_are_read_only(self):
        with pytest.raises(TypeError):
            CHAIN_ROUTES[5] = ChainRoute(5, "Goerli", DISPERSE_APP)

    def test_is_supported_chain(self):
        assert is_supported_chain(137)
        assert not is_supported_chain(5)
        assert get_route(5) is None

    def test_validate_routes_rejects_empty_contract(self):
        routes = dict(CHAIN_ROUTES)
        routes[56] = ChainRoute(SupportedChain.BSC, "BNB Smart Chain", "")

        with pytest.raises(RuntimeError, match="Empty contract address"):
            validate_routes(routes)

    def test_validate_routes_rejects_missing_chain(self):
        routes = {k: v for k, v in CHAIN_ROUTES.items() if k != 100}

        with pytest.raises(RuntimeError, match="GNOSIS"):
            validate_routes(routes)


class TestBuildWithdrawalRequests:
    """Tests for build_withdrawal_requests."""

    @pytest.mark.parametrize("chain_id", [int(chain) for chain in SupportedChain])
    def test_every_supported_chain_builds(self, chain_id, tokens):
        requests = build_withdrawal_requests(tokens, DESTINATION, chain_id)

        assert requests
        route = CHAIN_ROUTES[chain_id]
        if route.supports_multi_token:
            assert requests[0].address == Web3.to_checksum_address(route.contract_address)
        else:
            # Plain ERC-20 transfer goes to the token contract itself
            assert requests[0].address == tokens[0].token_address

    @pytest.mark.parametrize("chain_id", [0, 5, 250, 8453, 11155111])
    def test_unsupported_chain(self, chain_id, tokens):
        with pytest.raises(UnsupportedChainError) as exc_info:
            build_withdrawal_requests(tokens, DESTINATION, chain_id)

        assert str(exc_info.value) == f"Batch withdrawals not supported on chain ID {chain_id}"
        assert exc_info.value.kind == ErrorKind.UNSUPPORTED_CHAIN

    @pytest.mark.parametrize("chain_id,contract", [(1, DISPERSE_APP), (137, DISPERSE_APP_POLYGON)])
    def test_multi_token_chain_one_call_per_token(self, chain_id, contract, tokens):
        requests = build_withdrawal_requests(tokens, DESTINATION, chain_id)

        assert len(requests) == len(tokens)
        for request, token in zip(requests, tokens):
            assert request.address == Web3.to_checksum_address(contract.lower())
            assert request.function_name == "disperseTokenSimple"
            token_arg, recipients, values = request.args
            assert token_arg == token.token_address
            assert recipients == (DESTINATION,)
            assert len(values) == 1

        assert requests[0].args[2] == (1_500_000,)
        assert requests[1].args[2] == (250_000_000,)
        assert requests[2].args[2] == (1,)

    def test_single_token_chain_uses_first_token_only(self, tokens):
        requests = build_withdrawal_requests(tokens, DESTINATION, 56)

        assert len(requests) == 1
        request = requests[0]
        assert request.function_name == "transfer"
        assert request.address == USDC
        assert request.args == (DESTINATION, 1_500_000)

    def test_single_token_chain_logs_ignored_tokens(self, tokens, caplog):
        with caplog.at_level("WARNING"):
            build_withdrawal_requests(tokens, DESTINATION, 42161)

        assert "ignoring 2 of 3 selected tokens" in caplog.text

    def test_default_decimals_is_18(self):
        token = TokenWithdrawalRequest(token_address=DAI, amount="2")
        requests = build_withdrawal_requests([token], DESTINATION, 10)

        assert requests[0].args[1] == 2 * 10**18

    def test_known_token_decimals_used_when_missing(self, caplog):
        token = TokenWithdrawalRequest(token_address=USDC.lower(), amount="1.5")

        with caplog.at_level("WARNING"):
            requests = build_withdrawal_requests([token], DESTINATION, 1)

        assert requests[0].args[2] == (1_500_000,)
        assert "assuming 18" not in caplog.text

    def test_known_token_decimals_follow_chain(self):
        bsc_usdt = "0x55d398326f99059fF775485246999027B3197955"
        token = TokenWithdrawalRequest(token_address=bsc_usdt, amount="1.5")

        requests = build_withdrawal_requests([token], DESTINATION, 56)

        assert requests[0].args[1] == 15 * 10**17

    def test_explicit_decimals_win_over_registry(self):
        token = TokenWithdrawalRequest(token_address=USDC, amount="1.5", decimals=18)

        requests = build_withdrawal_requests([token], DESTINATION, 1)

        assert requests[0].args[2] == (15 * 10**17,)

    def test_unknown_token_falls_back_with_warning(self, caplog):
        token = TokenWithdrawalRequest(token_address=DAI, amount="2")

        with caplog.at_level("WARNING"):
            build_withdrawal_requests([token], DESTINATION, 10)

        assert f"No decimals given for token {DAI}, assuming 18" in caplog.text

    def test_invalid_amount_names_token(self):
        bad = TokenWithdrawalRequest(token_address=USDT, amount="abc", decimals=6)
        good = TokenWithdrawalRequest(token_address=USDC, amount="1", decimals=6)

        with pytest.raises(AmountParseError) as exc_info:
            build_withdrawal_requests([good, bad], DESTINATION, 1)

        assert exc_info.value.token_address == USDT
        assert USDT in str(exc_info.value)
        assert '"abc"' in str(exc_info.value)

    def test_invalid_amount_single_token_chain(self):
        bad = TokenWithdrawalRequest(token_address=USDT, amount="1.2345678", decimals=6)

        with pytest.raises(AmountParseError):
            build_withdrawal_requests([bad], DESTINATION, 56)

    def test_invalid_destination(self, tokens):
        with pytest.raises(InvalidAddressError):
            build_withdrawal_requests(tokens, "0xnot-an-address", 1)

    def test_mistyped_checksum_destination(self, tokens):
        with pytest.raises(InvalidAddressError) as exc_info:
            build_withdrawal_requests(tokens, flip_case(DESTINATION), 56)

        assert exc_info.value.kind == ErrorKind.INVALID_ADDRESS

    def test_invalid_token_address(self):
        token = TokenWithdrawalRequest(token_address="0x1234", amount="1", decimals=6)

        with pytest.raises(InvalidAddressError):
            build_withdrawal_requests([token], DESTINATION, 56)

    def test_lowercase_destination_is_checksummed(self, tokens):
        requests = build_withdrawal_requests(tokens, DESTINATION.lower(), 56)

        assert requests[0].args[0] == DESTINATION

    def test_contract_not_configured(self, tokens):
        routes = {56: ChainRoute(SupportedChain.BSC, "BNB Smart Chain", "")}

        with pytest.raises(ContractNotConfiguredError) as exc_info:
            build_withdrawal_requests(tokens, DESTINATION, 56, routes=routes)

        assert "no configured contract for chain ID 56" in str(exc_info.value)

    def test_unsupported_chain_checked_before_amounts(self):
        bad = TokenWithdrawalRequest(token_address=USDT, amount="abc", decimals=6)

        with pytest.raises(UnsupportedChainError):
            build_withdrawal_requests([bad], DESTINATION, 5)


class TestContractCallEncoding:
    """Tests for ABI encoding of descriptors."""

    def test_transfer_calldata(self):
        token = TokenWithdrawalRequest(token_address=USDC, amount="1.5", decimals=6)
        descriptor = build_withdrawal_requests([token], DESTINATION, 56)[0]

        data = descriptor.encode()

        assert data.startswith("0xa9059cbb")
        assert data[10:74] == DESTINATION.lower()[2:].rjust(64, "0")
        assert int(data[74:138], 16) == 1_500_000
        assert len(data) == 2 + 8 + 128

    def test_disperse_calldata(self):
        token = TokenWithdrawalRequest(token_address=USDC, amount="3", decimals=6)
        descriptor = build_withdrawal_requests([token], DESTINATION, 1)[0]

        selector = function_signature_to_4byte_selector(
            "disperseTokenSimple(address,address[],uint256[])"
        )
        data = descriptor.encode()

        assert descriptor.selector == "0x" + selector.hex()
        assert data.startswith(descriptor.selector)
        assert DESTINATION.lower()[2:] in data
        assert USDC.lower()[2:] in data
        assert format(3_000_000, "x").rjust(64, "0") in data
