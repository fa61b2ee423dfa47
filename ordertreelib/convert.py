"""Number-base conversion between binary, decimal and hexadecimal strings.

Binary strings are written ``0b`` followed by 1 to 31 binary digits and
hexadecimal strings ``0x`` followed by 1 to 8 uppercase hex digits, so every
accepted value fits a signed 32-bit integer. Leading zero digits are
significant for the string forms: each hex digit corresponds to exactly four
binary digits in both directions.
"""

import logging
from typing import Optional

from ._common.errors import ConversionError

logger = logging.getLogger(__name__)

BINARY_PREFIX = "0b"
HEX_PREFIX = "0x"
MAX_BINARY_DIGITS = 31
MAX_HEX_DIGITS = 8

_BINARY_DIGITS = frozenset("01")
_HEX_DIGITS = "0123456789ABCDEF"


def binary_to_decimal(binary: str) -> int:
    """Convert a binary string to the integer it denotes.

    Args:
        binary: String such as ``"0b1011"``

    Returns:
        Integer value

    Raises:
        ConversionError: If ``binary`` is not a well-formed binary string
    """
    if not is_binary_string(binary):
        raise ConversionError(
            f"binary_to_decimal() requires a well-formed binary string, got {binary!r}"
        )
    return int(binary[len(BINARY_PREFIX):], 2)


def binary_to_hex(binary: str) -> Optional[str]:
    """Convert a binary string to a hexadecimal string.

    The digits are left-padded with zeros to a multiple of four and each
    group of four becomes one hex digit, so ``"0b00011111"`` gives ``"0x1F"``.

    Returns:
        Hex string, or None if ``binary`` is malformed
    """
    if not is_binary_string(binary):
        logger.debug("binary_to_hex() rejected %r", binary)
        return None
    digits = binary[len(BINARY_PREFIX):]
    digits = digits.zfill(-(-len(digits) // 4) * 4)
    nibbles = (digits[i:i + 4] for i in range(0, len(digits), 4))
    return HEX_PREFIX + "".join(_HEX_DIGITS[int(nibble, 2)] for nibble in nibbles)


def decimal_to_binary(decimal: int) -> str:
    """Convert a non-negative integer to a binary string.

    Raises:
        ConversionError: If ``decimal`` is negative or not an integer
    """
    if isinstance(decimal, bool) or not isinstance(decimal, int):
        raise ConversionError(
            f"decimal_to_binary() requires an int, got {type(decimal).__name__}"
        )
    if decimal < 0:
        raise ConversionError(
            f"decimal_to_binary() requires a non-negative argument, got {decimal}"
        )
    return BINARY_PREFIX + format(decimal, 'b')


def hex_to_binary(hex_string: str) -> Optional[str]:
    """Convert a hexadecimal string to a binary string, four digits per hex digit.

    Returns:
        Binary string, or None if ``hex_string`` is malformed
    """
    if not is_hex_string(hex_string):
        logger.debug("hex_to_binary() rejected %r", hex_string)
        return None
    digits = hex_string[len(HEX_PREFIX):]
    return BINARY_PREFIX + "".join(format(_HEX_DIGITS.index(d), '04b') for d in digits)


def is_binary_string(value: object) -> bool:
    """Check that ``value`` is ``0b`` followed by 1-31 binary digits."""
    if not isinstance(value, str) or not value.startswith(BINARY_PREFIX):
        return False
    digits = value[len(BINARY_PREFIX):]
    if not 1 <= len(digits) <= MAX_BINARY_DIGITS:
        return False
    return all(d in _BINARY_DIGITS for d in digits)


def is_hex_string(value: object) -> bool:
    """Check that ``value`` is ``0x`` followed by 1-8 uppercase hex digits.

    An 8-digit value must start with 0-7 so that it fits a signed 32-bit int.
    """
    if not isinstance(value, str) or not value.startswith(HEX_PREFIX):
        return False
    digits = value[len(HEX_PREFIX):]
    if not 1 <= len(digits) <= MAX_HEX_DIGITS:
        return False
    if not all(d in _HEX_DIGITS for d in digits):
        return False
    return len(digits) < MAX_HEX_DIGITS or digits[0] <= '7'
