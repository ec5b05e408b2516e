"""Tests for amount and address codecs."""

import pytest

from walletsweep.withdrawal.errors import AmountParseError, InvalidAddressError
from walletsweep.withdrawal.units import (
    MAX_UINT256,
    checksum_address,
    format_units,
    parse_units,
    shorten_address,
)


class TestParseUnits:
    """Tests for decimal string to base unit conversion."""

    def test_fractional_amount_six_decimals(self):
        assert parse_units("1.5", 6) == 1_500_000

    def test_whole_amount(self):
        assert parse_units("250", 6) == 250_000_000

    def test_default_decimals_is_18(self):
        assert parse_units("1") == 10**18

    def test_smallest_unit_18_decimals(self):
        assert parse_units("0.000000000000000001", 18) == 1

    def test_large_18_decimal_amount_is_exact(self):
        """No float or Decimal context rounding on long values."""
        value = parse_units("12345678901234.123456789012345678", 18)
        assert value == 12345678901234123456789012345678

    @pytest.mark.parametrize(
        "amount,expected",
        [(".5", 500_000), ("5.", 5_000_000), ("  2.25 ", 2_250_000), ("1.500000000", 1_500_000)],
    )
    def test_accepted_forms(self, amount, expected):
        assert parse_units(amount, 6) == expected

    def test_zero_decimals(self):
        assert parse_units("42", 0) == 42

    @pytest.mark.parametrize(
        "amount", ["abc", "", ".", "-1", "+1", "1e18", "1,5", "1.2.3", "NaN", "Infinity", "0x10"]
    )
    def test_rejects_invalid_strings(self, amount):
        with pytest.raises(AmountParseError):
            parse_units(amount, 18)

    def test_rejects_excess_precision(self):
        with pytest.raises(AmountParseError) as exc_info:
            parse_units("1.0000001", 6)

        assert "fractional digits" in exc_info.value.reason

    def test_rejects_overflow(self):
        with pytest.raises(AmountParseError):
            parse_units(str(MAX_UINT256 + 1), 0)

    @pytest.mark.parametrize("decimals", [-1, 78, True, "6"])
    def test_rejects_bad_decimals(self, decimals):
        with pytest.raises(AmountParseError):
            parse_units("1", decimals)

    def test_rejects_non_string_amount(self):
        with pytest.raises(AmountParseError):
            parse_units(1.5, 6)


class TestFormatUnits:
    """Tests for base unit to decimal string conversion."""

    def test_format_fraction(self):
        assert format_units(1_500_000, 6) == "1.5"

    def test_format_whole(self):
        assert format_units(10**18) == "1"

    def test_format_smallest_unit(self):
        assert format_units(1, 18) == "0.000000000000000001"

    def test_format_zero_decimals(self):
        assert format_units(7, 0) == "7"


class TestAddresses:
    """Tests for checksum validation."""

    def test_lowercase_address_is_checksummed(self):
        address = checksum_address("0xdac17f958d2ee523a2206206994597c13d831ec7")
        assert address == "0xdAC17F958D2ee523a2206206994597C13D831ec7"

    def test_valid_checksum_passes_through(self):
        address = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
        assert checksum_address(address) == address

    def test_bad_checksum_rejected(self):
        with pytest.raises(InvalidAddressError):
            checksum_address("0xdAc17F958D2ee523a2206206994597C13D831ec7")

    def test_uppercase_hex_is_checksummed(self):
        address = checksum_address("0xDAC17F958D2EE523A2206206994597C13D831EC7")
        assert address == "0xdAC17F958D2ee523a2206206994597C13D831ec7"

    def test_single_flipped_letter_rejected(self):
        with pytest.raises(InvalidAddressError):
            checksum_address("0xdAC17F958D2ee523a2206206994597C13D831eC7", "destination address")

    @pytest.mark.parametrize("address", ["", "0x1234", "not-an-address", "0x" + "zz" * 20])
    def test_malformed_rejected(self, address):
        with pytest.raises(InvalidAddressError):
            checksum_address(address, "destination address")

    def test_error_names_role(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            checksum_address("0x1234", "destination address")

        assert "destination address" in str(exc_info.value)

    def test_shorten_address(self):
        assert shorten_address("0xD152f549545093347A162Dce210e7293f1452150") == "0xD152...2150"
