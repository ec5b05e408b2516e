"""Batch withdrawal executor.

Sends ONE transaction per withdrawal so the user approves a single wallet
prompt. Every failure is returned as a WithdrawalFailed outcome - nothing
raises past execute().
"""

import logging
from typing import Optional, Sequence, Union

from walletsweep.chains import DEFAULT_CHAIN_ID
from walletsweep.withdrawal.base import (
    ChainReader,
    ContractCallDescriptor,
    TokenWithdrawalRequest,
    WalletClient,
    WithdrawalFailed,
    WithdrawalOutcome,
    WithdrawalStage,
    WithdrawalSubmitted,
)
from walletsweep.withdrawal.builder import build_withdrawal_requests
from walletsweep.withdrawal.errors import ErrorKind, WalletRejectedError, WithdrawalError
from walletsweep.withdrawal.units import shorten_address

logger = logging.getLogger(__name__)

REJECTED_MESSAGE = "Transaction was rejected by user"
ABORTED_SUFFIX = "Transaction aborted to protect your funds."
NO_HASH_MESSAGE = "Wallet returned no transaction hash"


def _is_empty_bytecode(code: Optional[Union[bytes, str]]) -> bool:
    if not code:
        return True
    if isinstance(code, str):
        return code.lower() in ("0x", "0x0")
    return False


def _is_user_rejection(error: Exception) -> bool:
    return isinstance(error, WalletRejectedError) or "rejected" in str(error)


def _skipped_token_warnings(
    tokens: Sequence[TokenWithdrawalRequest],
    submitted: int,
) -> tuple[str, ...]:
    skipped = tokens[submitted:]
    if not skipped:
        return ()
    addresses = ", ".join(token.token_address for token in skipped)
    return (
        f"{len(skipped)} of {len(tokens)} selected tokens were not included "
        f"in this transaction: {addresses}",
    )


class BatchWithdrawalExecutor:
    """Validates, builds, verifies and submits a batch withdrawal.

    Stages: validating -> building -> verifying -> submitting, ending in
    succeeded or failed. The stage is reported on the outcome, so one
    executor can run several attempts at once. There are no retries;
    resubmitting after a rejected signature is up to the caller.
    """

    def __init__(self, default_chain_id: int = DEFAULT_CHAIN_ID):
        self.default_chain_id = default_chain_id

    def _enter(self, stage: WithdrawalStage) -> WithdrawalStage:
        logger.debug(f"Withdrawal stage: {stage.value}")
        return stage

    def _fail(self, error: str, kind: ErrorKind, stage: WithdrawalStage) -> WithdrawalFailed:
        logger.debug(f"Withdrawal failed during {stage.value}: {kind.value}")
        return WithdrawalFailed(error=error, kind=kind, failed_at=stage)

    def _validate(
        self,
        tokens: Sequence[TokenWithdrawalRequest],
        destination_address: str,
        wallet_client: Optional[WalletClient],
        chain_reader: Optional[ChainReader],
    ) -> Optional[WithdrawalFailed]:
        stage = WithdrawalStage.VALIDATING

        if wallet_client is None or chain_reader is None:
            logger.error("Missing required client")
            return self._fail(
                "Wallet connection error: Missing required client", ErrorKind.MISSING_CLIENT, stage
            )

        if not wallet_client.account:
            logger.error("Wallet not connected")
            return self._fail("Wallet not connected", ErrorKind.WALLET_NOT_CONNECTED, stage)

        if not destination_address:
            logger.error("Missing destination address")
            return self._fail("Missing destination address", ErrorKind.MISSING_DESTINATION, stage)

        if not tokens:
            logger.error("No tokens specified for withdrawal")
            return self._fail("No tokens specified for withdrawal", ErrorKind.NO_TOKENS, stage)

        return None

    async def verify_contract(
        self,
        descriptor: ContractCallDescriptor,
        chain_reader: ChainReader,
    ) -> Optional[WithdrawalFailed]:
        """Refuse to submit unless the target address holds bytecode."""
        stage = self._enter(WithdrawalStage.VERIFYING)
        address = descriptor.address

        try:
            code = await chain_reader.get_bytecode(address)
        except Exception as e:
            logger.error(f"Error verifying contract {address}: {e}")
            return self._fail(
                f"Failed to verify contract: {e}. {ABORTED_SUFFIX}",
                ErrorKind.VERIFICATION_FAILED,
                stage,
            )

        if _is_empty_bytecode(code):
            logger.error(f"Target address is not a contract: {address}")
            return self._fail(
                f"The address {shorten_address(address)} is not a valid contract "
                f"on this network. {ABORTED_SUFFIX}",
                ErrorKind.NOT_A_CONTRACT,
                stage,
            )

        logger.info(f"Contract verification successful for {address}")
        return None

    async def submit(
        self,
        descriptor: ContractCallDescriptor,
        wallet_client: WalletClient,
    ) -> WithdrawalOutcome:
        """Send the descriptor through the wallet and classify the result."""
        stage = self._enter(WithdrawalStage.SUBMITTING)
        logger.info("Sending transaction to wallet for approval...")

        try:
            tx_hash = await wallet_client.write_contract(descriptor)
        except Exception as e:
            if _is_user_rejection(e):
                logger.warning(f"Transaction rejected by user: {e}")
                return self._fail(REJECTED_MESSAGE, ErrorKind.REJECTED_BY_USER, stage)

            logger.error(f"Error writing contract: {e}")
            message = str(e) or "Unknown error during transaction submission"
            return self._fail(f"Wallet error: {message}", ErrorKind.WALLET_ERROR, stage)

        if not tx_hash:
            logger.error(f"Wallet returned no transaction hash for {descriptor.function_name}")
            return self._fail(
                f"Wallet error: {NO_HASH_MESSAGE}", ErrorKind.WALLET_ERROR, stage
            )

        self._enter(WithdrawalStage.SUCCEEDED)
        logger.info(f"Transaction submitted successfully: {tx_hash}")
        return WithdrawalSubmitted(hash=tx_hash)

    async def execute(
        self,
        tokens: Sequence[TokenWithdrawalRequest],
        destination_address: str,
        wallet_client: Optional[WalletClient],
        chain_reader: Optional[ChainReader],
    ) -> WithdrawalOutcome:
        """Run one withdrawal attempt.

        Args:
            tokens: Tokens and amounts to withdraw
            destination_address: Recipient address
            wallet_client: Connected signing client
            chain_reader: Client used for the bytecode check

        Returns:
            WithdrawalSubmitted with the transaction hash, or WithdrawalFailed
            naming the stage it failed in
        """
        stage = self._enter(WithdrawalStage.VALIDATING)

        try:
            failure = self._validate(tokens, destination_address, wallet_client, chain_reader)
            if failure is not None:
                return failure

            chain_id = wallet_client.chain_id or self.default_chain_id
            logger.info(
                f"Processing batch withdrawal of {len(tokens)} tokens to "
                f"{destination_address} on chain {chain_id}"
            )
            for index, token in enumerate(tokens, start=1):
                logger.debug(f"Token {index}: {token.token_address}, Amount: {token.amount}")

            stage = self._enter(WithdrawalStage.BUILDING)
            try:
                requests = build_withdrawal_requests(tokens, destination_address, chain_id)
            except WithdrawalError as e:
                logger.error(f"Failed to build withdrawal requests: {e}")
                return self._fail(str(e), e.kind, stage)

            # Only ONE transaction is sent, covering a single wallet approval
            descriptor = requests[0]

            stage = WithdrawalStage.VERIFYING
            failure = await self.verify_contract(descriptor, chain_reader)
            if failure is not None:
                return failure

            stage = WithdrawalStage.SUBMITTING
            outcome = await self.submit(descriptor, wallet_client)

        except Exception as e:
            logger.exception("Unexpected error in batch withdrawal")
            return self._fail(
                str(e) or "An unexpected error occurred", ErrorKind.UNEXPECTED, stage
            )

        if isinstance(outcome, WithdrawalSubmitted):
            warnings = _skipped_token_warnings(tokens, submitted=1)
            for warning in warnings:
                logger.warning(warning)
            if warnings:
                outcome = WithdrawalSubmitted(hash=outcome.hash, warnings=warnings)

        return outcome


async def batch_withdraw_tokens(
    tokens: Sequence[TokenWithdrawalRequest],
    destination_address: str,
    wallet_client: Optional[WalletClient],
    chain_reader: Optional[ChainReader],
) -> WithdrawalOutcome:
    """Withdraw tokens to a destination in a single transaction.

    Convenience wrapper around BatchWithdrawalExecutor.execute().
    """
    executor = BatchWithdrawalExecutor()
    return await executor.execute(tokens, destination_address, wallet_client, chain_reader)
