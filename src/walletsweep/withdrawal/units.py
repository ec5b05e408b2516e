"""Amount and address codecs for token withdrawals.

Amounts are scaled with integer string arithmetic only. Decimal and float
are never involved, so 18-decimal tokens keep every digit.
"""

import re

from web3 import Web3

from walletsweep.withdrawal.errors import AmountParseError, InvalidAddressError

DEFAULT_DECIMALS = 18
MAX_DECIMALS = 77  # 10**77 is the largest power of ten below 2**256
MAX_UINT256 = 2**256 - 1

_AMOUNT_RE = re.compile(r"^(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?$")


def parse_units(amount: str, decimals: int = DEFAULT_DECIMALS) -> int:
    """Convert a decimal string to integer base units.

    Args:
        amount: Decimal string as entered by the user ("1.5", ".25", "10")
        decimals: Token decimal count

    Returns:
        Amount in the token's smallest unit

    Raises:
        AmountParseError: If the string is not a plain non-negative decimal,
            has more fractional digits than the token supports, or does not
            fit in uint256
    """
    if not isinstance(decimals, int) or isinstance(decimals, bool) or not 0 <= decimals <= MAX_DECIMALS:
        raise AmountParseError(str(amount), reason=f"unsupported decimals: {decimals!r}")

    if not isinstance(amount, str):
        raise AmountParseError(str(amount), reason="amount must be a string")

    text = amount.strip()
    match = _AMOUNT_RE.match(text)
    if not match or not (match.group("whole") or match.group("frac")):
        raise AmountParseError(amount, reason="not a decimal number")

    whole = match.group("whole") or "0"
    frac = (match.group("frac") or "").rstrip("0")

    if len(frac) > decimals:
        raise AmountParseError(
            amount, reason=f"more than {decimals} fractional digits"
        )

    value = int(whole + frac.ljust(decimals, "0"))
    if value > MAX_UINT256:
        raise AmountParseError(amount, reason="exceeds uint256")

    return value


def format_units(value: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """Convert integer base units back to a decimal string."""
    sign = "-" if value < 0 else ""
    digits = str(abs(value)).rjust(decimals + 1, "0")
    whole, frac = digits[: len(digits) - decimals], digits[len(digits) - decimals:]
    frac = frac.rstrip("0")
    return f"{sign}{whole}.{frac}" if frac else f"{sign}{whole}"


def checksum_address(address: str, role: str = "address") -> str:
    """Validate an address and return its EIP-55 checksum form.

    All-lowercase and all-uppercase hex is accepted. Mixed case must match
    the checksum exactly.

    Raises:
        InvalidAddressError: If the address is malformed or the checksum fails
    """
    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddressError(str(address), role)

    digits = address[2:] if address[:2] in ("0x", "0X") else address
    if digits not in (digits.lower(), digits.upper()) and not Web3.is_checksum_address(address):
        raise InvalidAddressError(address, role)

    return Web3.to_checksum_address(address)


def shorten_address(address: str) -> str:
    """Shorten an address for display (0x1234...abcd)."""
    return f"{address[:6]}...{address[-4:]}"
