"""Integer parsing and formatting with C ``int`` semantics."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, as a C cast does."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit; text with no digits yields 0. If the
    magnitude overflows a 64-bit accumulator the result is -1 for a positive
    number and 0 for a negative one. Otherwise the value is truncated to a
    signed 32-bit integer.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    result = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > _LONG_MAX:
            return -1 if sign == 1 else 0
    return _wrap_int32(result * sign)


def int_to_str(n: int) -> str:
    """Format a signed 32-bit integer in decimal.

    Raises ValueError if *n* does not fit in a signed 32-bit integer.
    """
    if not _INT_MIN <= n <= _INT_MAX:
        raise ValueError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)