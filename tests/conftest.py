"""Pytest configuration and fixtures."""

import os
from typing import Optional
from unittest.mock import AsyncMock

import pytest
from web3 import Web3

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ.pop("LEGACY_SERVER_URL", None)
os.environ.pop("WALLET_RPC_URL", None)

from walletsweep.withdrawal.base import TokenWithdrawalRequest

DESTINATION = Web3.to_checksum_address("0x" + "de" * 20)
SENDER = Web3.to_checksum_address("0x" + "5e" * 20)
USDC = Web3.to_checksum_address("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")
USDT = Web3.to_checksum_address("0xdac17f958d2ee523a2206206994597c13d831ec7")
DAI = Web3.to_checksum_address("0x6b175474e89094c44da98b954eedeac495271d0f")

CONTRACT_CODE = "0x6080604052348015600f57600080fd5b50"
TX_HASH = "0x" + "ab" * 32


class FakeWalletClient:
    """Wallet client double with an AsyncMock write_contract."""

    def __init__(
        self,
        chain_id: Optional[int] = 1,
        account: Optional[str] = SENDER,
        tx_hash: str = TX_HASH,
    ):
        self.chain_id = chain_id
        self.account = account
        self.write_contract = AsyncMock(return_value=tx_hash)


class FakeChainReader:
    """Chain reader double with an AsyncMock get_bytecode."""

    def __init__(self, code=CONTRACT_CODE):
        self.get_bytecode = AsyncMock(return_value=code)


@pytest.fixture
def tokens() -> list[TokenWithdrawalRequest]:
    """Three tokens with correct decimals."""
    return [
        TokenWithdrawalRequest(token_address=USDC, amount="1.5", decimals=6),
        TokenWithdrawalRequest(token_address=USDT, amount="250", decimals=6),
        TokenWithdrawalRequest(token_address=DAI, amount="0.000000000000000001", decimals=18),
    ]


@pytest.fixture
def wallet_client() -> FakeWalletClient:
    return FakeWalletClient()


@pytest.fixture
def chain_reader() -> FakeChainReader:
    return FakeChainReader()


def flip_case(address: str) -> str:
    """Swap the case of the first letter so the EIP-55 checksum no longer matches."""
    digits = address[2:]
    index = next(i for i, char in enumerate(digits) if char.isalpha())
    return "0x" + digits[:index] + digits[index].swapcase() + digits[index + 1:]
