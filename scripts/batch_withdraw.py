#!/usr/bin/env python3
"""Batch Withdrawal Script.

Withdraws one or more ERC-20 tokens to a destination address in a single
transaction.

Usage:
    python scripts/batch_withdraw.py --to 0xDEST --token 0xTOKEN:1.5:6 [--token ...]

Options:
    --to              Destination address
    --token           TOKEN_ADDRESS:AMOUNT[:DECIMALS] (repeatable)
    --chain-id        Chain ID for the local signer (default: read from RPC)
    --rpc-url         RPC endpoint (default: configured URL for the chain)
    --wallet-rpc-url  Use an external wallet's JSON-RPC endpoint instead of
                      WALLET_PRIVATE_KEY
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

from walletsweep.clients import (
    JsonRpcClient,
    LocalWalletClient,
    RemoteWalletClient,
    RpcChainReader,
    RpcError,
)
from walletsweep.config import get_settings
from walletsweep.withdrawal import TokenWithdrawalRequest, WithdrawalSubmitted, batch_withdraw_tokens

load_dotenv()

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def parse_token(value: str) -> TokenWithdrawalRequest:
    """Parse TOKEN_ADDRESS:AMOUNT[:DECIMALS]."""
    parts = value.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Expected TOKEN:AMOUNT[:DECIMALS], got {value!r}")

    decimals = None
    if len(parts) == 3:
        try:
            decimals = int(parts[2])
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid decimals in {value!r}")

    return TokenWithdrawalRequest(token_address=parts[0], amount=parts[1], decimals=decimals)


async def withdraw(
    args: argparse.Namespace,
    chain_id: int,
    remote_wallet: Optional[RemoteWalletClient],
) -> int:
    """Run the withdrawal with the remote wallet, or a local key if there is none."""
    settings = get_settings()
    rpc_url = args.rpc_url or settings.get_rpc_url(chain_id)
    if not rpc_url:
        logger.error(f"No RPC URL configured for chain {chain_id}")
        return 1

    async with RpcChainReader.from_url(rpc_url, timeout=settings.rpc_timeout) as reader:
        wallet = remote_wallet
        if wallet is None:
            private_key = os.getenv("WALLET_PRIVATE_KEY")
            if not private_key:
                logger.error("Set WALLET_PRIVATE_KEY or pass --wallet-rpc-url")
                return 1
            wallet = LocalWalletClient.from_key(private_key, reader.rpc, chain_id=args.chain_id)
            await wallet.connect()

        outcome = await batch_withdraw_tokens(args.token, args.to, wallet, reader)

    if isinstance(outcome, WithdrawalSubmitted):
        print(f"Transaction hash: {outcome.hash}")
        for warning in outcome.warnings:
            print(f"Warning: {warning}")
        return 0

    print(f"Withdrawal failed ({outcome.kind.value}): {outcome.error}", file=sys.stderr)
    return 1


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    wallet_rpc_url = args.wallet_rpc_url or settings.wallet_rpc_url
    chain_id = args.chain_id or settings.default_chain_id

    if not wallet_rpc_url:
        return await withdraw(args, chain_id, None)

    remote_wallet = RemoteWalletClient(JsonRpcClient(wallet_rpc_url, timeout=settings.rpc_timeout))
    try:
        try:
            await remote_wallet.connect()
        except RpcError as e:
            logger.error(f"Could not connect to wallet at {wallet_rpc_url}: {e}")
            return 1
        return await withdraw(args, remote_wallet.chain_id or chain_id, remote_wallet)
    finally:
        await remote_wallet.aclose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Withdraw ERC-20 tokens in one transaction")
    parser.add_argument("--to", required=True, help="Destination address")
    parser.add_argument(
        "--token",
        required=True,
        action="append",
        type=parse_token,
        help="TOKEN_ADDRESS:AMOUNT[:DECIMALS] (repeatable)",
    )
    parser.add_argument("--chain-id", type=int, default=None, help="Chain ID")
    parser.add_argument("--rpc-url", default=None, help="RPC endpoint")
    parser.add_argument("--wallet-rpc-url", default=None, help="External wallet JSON-RPC endpoint")
    args = parser.parse_args()

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
