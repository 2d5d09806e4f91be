"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_LEADING = re.compile(r"[ \t\r\f\v\n]*([+-]?)(\d*)")


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str | None) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace and one sign are allowed; reading stops at the first
    non-digit. No digits, or ``None``, give 0. The result wraps like a 32-bit
    signed integer.
    """
    if not text:
        return 0
    match = _LEADING.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return _wrap32(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def itul(n: int) -> str:
    """Return the decimal text of a 64-bit signed integer."""
    if not LLONG_MIN <= n <= LLONG_MAX:
        raise OverflowError(f"{n} does not fit in a 64-bit signed integer")
    return str(n)