"""Parsing utilities for beacon and execution payload fields.

Beacon REST quantities arrive as decimal strings, execution JSON-RPC quantities as
``0x``-prefixed hex strings. Hex quantities are parsed as unsigned 64-bit values:
anything wider is rejected with ParseError rather than widened, so arithmetic on
them stays within the precision the reward figures were defined against.
"""

import re

from eth_validator_api.helpers.constants import MAX_UINT64, REWARD_DECIMALS
from eth_validator_api.helpers.errors import ParseError, ValidationError


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def hex_to_number(hex_value: str | None, field: str = "value") -> int:
    """Parse a ``0x``-prefixed hex quantity as an unsigned 64-bit integer.

    Args:
        hex_value: Hex-encoded string, e.g. "0x3b9aca00"
        field: Field name used in error messages

    Returns:
        int: Parsed value in [0, 2**64 - 1]

    Raises:
        ParseError: If the value is missing, not hex, or wider than 64 bits

    Example:
        >>> hex_to_number("0xff")
        255
    """
    if not isinstance(hex_value, str) or hex_value[:2] not in {"0x", "0X"}:
        msg = f"invalid {field}: expected 0x-prefixed hex, got {hex_value!r}"
        raise ParseError(msg)

    digits = hex_value[2:]
    if not _HEX_DIGITS.fullmatch(digits):
        msg = f"invalid {field}: {hex_value!r} is not valid hex"
        raise ParseError(msg)

    value = int(digits, 16)
    if value > MAX_UINT64:
        msg = f"invalid {field}: {hex_value!r} exceeds 64 bits"
        raise ParseError(msg)
    return value


def parse_decimal_int(value: str | int | None, field: str = "value") -> int:
    """Parse a decimal quantity as returned by the beacon REST API.

    Args:
        value: Decimal string such as "32000000000"
        field: Field name used in error messages

    Returns:
        int: Parsed integer

    Raises:
        ParseError: If the value is missing or not a decimal integer
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
        msg = f"invalid {field}: {value!r}"
        raise ParseError(msg)
    return int(value)


def parse_slot(slot: str | int) -> int:
    """Validate a slot path parameter.

    Args:
        slot: Raw slot parameter

    Returns:
        int: Slot number in [0, 2**64 - 1]

    Raises:
        ValidationError: If the slot is non-numeric, negative or wider than 64 bits

    Example:
        >>> parse_slot("123")
        123
    """
    if isinstance(slot, int) and not isinstance(slot, bool):
        parsed = slot
    elif isinstance(slot, str) and _DECIMAL.fullmatch(slot):
        parsed = int(slot)
    else:
        msg = "Invalid slot number"
        raise ValidationError(msg)

    if parsed < 0 or parsed > MAX_UINT64:
        msg = "Invalid slot number"
        raise ValidationError(msg)
    return parsed


def format_reward(value: float) -> str:
    """Format a reward with exactly three decimals.

    Example:
        >>> format_reward(1234567.8914)
        '1234567.891'
    """
    return f"{value:.{REWARD_DECIMALS}f}"


__all__ = [
    "format_reward",
    "hex_to_number",
    "parse_decimal_int",
    "parse_slot",
]
