"""Withdrawal error taxonomy.

Every failure the executor can report maps to one ErrorKind. Builder
failures are raised as WithdrawalError subclasses and converted into
WithdrawalFailed outcomes at the executor boundary.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of a failed withdrawal attempt."""

    # Input errors - reported before any network call
    MISSING_CLIENT = "missing_client"
    WALLET_NOT_CONNECTED = "wallet_not_connected"
    MISSING_DESTINATION = "missing_destination"
    NO_TOKENS = "no_tokens"

    # Build errors
    UNSUPPORTED_CHAIN = "unsupported_chain"
    CONTRACT_NOT_CONFIGURED = "contract_not_configured"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_ADDRESS = "invalid_address"

    # Verification errors - the transaction is never submitted
    NOT_A_CONTRACT = "not_a_contract"
    VERIFICATION_FAILED = "verification_failed"

    # Submission errors
    REJECTED_BY_USER = "rejected_by_user"
    WALLET_ERROR = "wallet_error"

    UNEXPECTED = "unexpected"


class WithdrawalError(Exception):
    """Base class for errors raised while building a withdrawal."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


class UnsupportedChainError(WithdrawalError):
    """Raised when a chain ID has no withdrawal route."""

    kind = ErrorKind.UNSUPPORTED_CHAIN

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Batch withdrawals not supported on chain ID {chain_id}")


class ContractNotConfiguredError(WithdrawalError):
    """Raised when a chain route has an empty contract address."""

    kind = ErrorKind.CONTRACT_NOT_CONFIGURED

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Batch withdrawals have no configured contract for chain ID {chain_id}")


class AmountParseError(WithdrawalError):
    """Raised when a token amount cannot be converted to base units."""

    kind = ErrorKind.INVALID_AMOUNT

    def __init__(self, amount: str, token_address: Optional[str] = None, reason: str = ""):
        self.amount = amount
        self.token_address = token_address
        self.reason = reason
        target = f" for token {token_address}" if token_address else ""
        super().__init__(
            f'Cannot process amount "{amount}"{target}. Please ensure it\'s a valid number.'
        )


class InvalidAddressError(WithdrawalError):
    """Raised when an address fails format or checksum validation."""

    kind = ErrorKind.INVALID_ADDRESS

    def __init__(self, address: str, role: str = "address"):
        self.address = address
        self.role = role
        super().__init__(f"Invalid {role}: {address!r}")


class WalletRejectedError(Exception):
    """Raised by wallet clients when the user declines to sign."""

    def __init__(self, message: str = "User rejected the request."):
        super().__init__(message)
