"""Conversions between decimal text and numbers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _skip_space_and_sign(s: str) -> tuple[int, int]:
    """Return the sign and the index just past leading whitespace and one sign."""
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    return sign, pos


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C atoi does.

    Leading whitespace and one sign are skipped, digits are read until the
    first non-digit, and the result wraps to a 32-bit signed int. Text with no
    digits gives 0.
    """
    sign, pos = _skip_space_and_sign(s)
    value = 0
    for ch in s[pos:]:
        if ch not in _DIGITS:
            break
        value = value * 10 + ord(ch) - ord("0")
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def atodbl(s: str) -> float:
    """Parse decimal text with an optional fractional part into a float.

    Leading whitespace and one sign are skipped. Characters are not checked:
    every one before the point adds a place, every one after it a fraction.
    """
    sign, pos = _skip_space_and_sign(s)
    whole, _, fraction = s[pos:].partition(".")
    n = 0.0
    for ch in whole:
        n = n * 10 + (ord(ch) - ord("0"))
    multiplier = 10.0
    for ch in fraction:
        n += (ord(ch) - ord("0")) / multiplier
        multiplier *= 10
    return n * sign


def safe_atoi(s: str) -> int:
    """Parse a whole string as a 32-bit signed decimal integer.

    Only an optional sign followed by ASCII digits is accepted. Raises
    ValueError for anything else, and for values outside the 32-bit range.
    """
    sign = 1
    body = s
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body:
        raise ValueError(f"no digits in {s!r}")
    limit = INT_MAX if sign == 1 else INT_MAX + 1
    value = 0
    for ch in body:
        if ch not in _DIGITS:
            raise ValueError(f"invalid character {ch!r} in {s!r}")
        value = value * 10 + ord(ch) - ord("0")
        if value > limit:
            raise ValueError(f"{s!r} is out of the 32-bit int range")
    return sign * value