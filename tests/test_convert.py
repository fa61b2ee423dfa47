"""Tests for binary/decimal/hexadecimal string conversion."""

import pytest

from ordertreelib import (
    ConversionError,
    binary_to_decimal,
    binary_to_hex,
    decimal_to_binary,
    hex_to_binary,
)
from ordertreelib.convert import is_binary_string, is_hex_string

MALFORMED_BINARY = [
    None,
    "",
    "0b",
    "1011",
    "0x101",
    "0b102",
    "0B101",
    "0b" + "1" * 32,
    10,
]

MALFORMED_HEX = [
    None,
    "",
    "0x",
    "FF",
    "0b11",
    "0xff",
    "0xG1",
    "0x123456789",
    "0x80000000",
    255,
]


class TestBinaryToDecimal:

    @pytest.mark.parametrize("binary, expected", [
        ("0b0", 0),
        ("0b1", 1),
        ("0b10", 2),
        ("0b1011", 11),
        ("0b00001011", 11),
        ("0b" + "1" * 31, 2 ** 31 - 1),
    ])
    def test_valid(self, binary, expected):
        assert binary_to_decimal(binary) == expected

    @pytest.mark.parametrize("binary", MALFORMED_BINARY)
    def test_malformed_raises(self, binary):
        with pytest.raises(ConversionError):
            binary_to_decimal(binary)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            binary_to_decimal("0b2")


class TestBinaryToHex:

    @pytest.mark.parametrize("binary, expected", [
        ("0b0", "0x0"),
        ("0b1010", "0xA"),
        ("0b11111", "0x1F"),
        ("0b00011111", "0x1F"),
        ("0b000011111", "0x01F"),
        ("0b110111101010", "0xDEA"),
    ])
    def test_valid(self, binary, expected):
        assert binary_to_hex(binary) == expected

    @pytest.mark.parametrize("binary", MALFORMED_BINARY)
    def test_malformed_returns_none(self, binary):
        assert binary_to_hex(binary) is None


class TestDecimalToBinary:

    @pytest.mark.parametrize("decimal, expected", [
        (0, "0b0"),
        (1, "0b1"),
        (2, "0b10"),
        (11, "0b1011"),
        (255, "0b11111111"),
    ])
    def test_valid(self, decimal, expected):
        assert decimal_to_binary(decimal) == expected

    def test_negative_raises(self):
        with pytest.raises(ConversionError):
            decimal_to_binary(-1)

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_non_integer_raises(self, value):
        with pytest.raises(ConversionError):
            decimal_to_binary(value)


class TestHexToBinary:

    @pytest.mark.parametrize("hex_string, expected", [
        ("0x0", "0b0000"),
        ("0x1", "0b0001"),
        ("0xA", "0b1010"),
        ("0x1F", "0b00011111"),
        ("0x7FFFFFFF", "0b0" + "1" * 31),
    ])
    def test_valid(self, hex_string, expected):
        assert hex_to_binary(hex_string) == expected

    @pytest.mark.parametrize("hex_string", MALFORMED_HEX)
    def test_malformed_returns_none(self, hex_string):
        assert hex_to_binary(hex_string) is None


class TestValidators:

    def test_is_binary_string(self):
        assert is_binary_string("0b1")
        assert not is_binary_string("0b")

    def test_is_hex_string(self):
        assert is_hex_string("0x7FFFFFFF")
        assert not is_hex_string("0x80000000")
        assert is_hex_string("0x8000000")


class TestRoundTrips:

    @pytest.mark.parametrize("value", [0, 1, 5, 16, 1000, 2 ** 31 - 1])
    def test_decimal_binary_decimal(self, value):
        assert binary_to_decimal(decimal_to_binary(value)) == value

    @pytest.mark.parametrize("hex_string", ["0x0", "0x1F", "0xDEAD", "0x7FFFFFF"])
    def test_hex_binary_hex(self, hex_string):
        assert binary_to_hex(hex_to_binary(hex_string)) == hex_string

    def test_eight_hex_digits_exceed_binary_width(self):
        """Eight hex digits expand to 32 binary digits, one more than accepted."""
        assert binary_to_hex(hex_to_binary("0x7FFFFFFF")) is None
