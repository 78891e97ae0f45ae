"""Integer parsing and formatting with fixed-width overflow semantics."""

from __future__ import annotations

from itertools import takewhile

_INT_BITS = 32
_LONG_BITS = 64
_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", body))
    magnitude = _wrap(int(digits), bits) if digits else 0
    return _wrap(magnitude * sign, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit.  Text with no digits gives 0.
    """
    return _parse(text, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    return _parse(text, _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)