"""Base types for batch token withdrawals.

Withdrawal flow:
1. Caller selects tokens, amounts and a destination address
2. Inputs are validated (clients, account, destination, tokens)
3. Contract call descriptors are built for the wallet's chain
4. The target address is checked for deployed bytecode
5. ONE transaction is submitted through the wallet client
6. The result is returned as WithdrawalSubmitted or WithdrawalFailed
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, Union, runtime_checkable

from eth_abi import encode
from eth_utils import function_abi_to_4byte_selector

from walletsweep.withdrawal.errors import ErrorKind


@dataclass(frozen=True)
class TokenWithdrawalRequest:
    """One token selected for withdrawal."""

    token_address: str
    amount: str  # Decimal string as entered by the user
    decimals: Optional[int] = None  # None falls back to 18


@dataclass(frozen=True)
class ContractCallDescriptor:
    """A ready-to-sign contract call."""

    address: str
    abi: tuple[dict[str, Any], ...]
    function_name: str
    args: tuple[Any, ...]

    @property
    def function_abi(self) -> dict[str, Any]:
        """ABI entry for the called function."""
        for entry in self.abi:
            if entry.get("type") == "function" and entry.get("name") == self.function_name:
                return entry
        raise ValueError(f"Function {self.function_name} not found in ABI")

    @property
    def selector(self) -> str:
        """4-byte function selector as 0x-prefixed hex."""
        return "0x" + function_abi_to_4byte_selector(self.function_abi).hex()

    def encode(self) -> str:
        """ABI-encode the call into transaction data (0x-prefixed hex)."""
        fn_abi = self.function_abi
        types = [param["type"] for param in fn_abi.get("inputs", [])]
        args = [list(arg) if isinstance(arg, tuple) else arg for arg in self.args]
        return self.selector + encode(types, args).hex()


class WithdrawalStage(str, Enum):
    """Stages of a single withdrawal attempt."""

    VALIDATING = "validating"
    BUILDING = "building"
    VERIFYING = "verifying"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class WithdrawalSubmitted:
    """The withdrawal transaction was accepted by the wallet."""

    hash: str
    warnings: tuple[str, ...] = field(default=())

    @property
    def success(self) -> bool:
        return True

    @property
    def stage(self) -> WithdrawalStage:
        return WithdrawalStage.SUCCEEDED

    def to_dict(self) -> dict[str, Any]:
        return {"hash": self.hash}


@dataclass(frozen=True)
class WithdrawalFailed:
    """The withdrawal was not submitted, or the wallet refused it."""

    error: str
    kind: ErrorKind = ErrorKind.UNEXPECTED
    # Stage the attempt was in when it failed
    failed_at: WithdrawalStage = WithdrawalStage.VALIDATING

    @property
    def success(self) -> bool:
        return False

    @property
    def stage(self) -> WithdrawalStage:
        return WithdrawalStage.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


WithdrawalOutcome = Union[WithdrawalSubmitted, WithdrawalFailed]


@runtime_checkable
class WalletClient(Protocol):
    """Signing client connected to the user's wallet."""

    @property
    def chain_id(self) -> Optional[int]:
        """Currently connected chain, None if unknown."""
        ...

    @property
    def account(self) -> Optional[str]:
        """Connected signing account, None if not connected."""
        ...

    async def write_contract(self, descriptor: ContractCallDescriptor) -> str:
        """Submit a contract call and return the transaction hash.

        Raises:
            WalletRejectedError: If the user declined to sign
        """
        ...


@runtime_checkable
class ChainReader(Protocol):
    """Read-only chain access."""

    async def get_bytecode(self, address: str) -> Optional[Union[bytes, str]]:
        """Return the deployed code at an address, empty for plain accounts."""
        ...
