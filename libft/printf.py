"""Formatted output with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

_INT_MIN = -(2**31)
_UINT_RANGE = 2**32


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return int(value)


def _as_int32(value: int) -> int:
    return (value - _INT_MIN) % _UINT_RANGE + _INT_MIN


def _as_uint32(value: int) -> int:
    return value % _UINT_RANGE


def format_number_base(n: int, base: int, upper: bool = False) -> str:
    """Digits of the non-negative integer n in the given base (2 to 16)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"number must be non-negative, got {n}")
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, remainder = divmod(n, base)
        out.append(digits[remainder])
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Render an address as 0x followed by lower-case hex, or (nil) for zero."""
    if address is None or address == 0:
        return "(nil)"
    if isinstance(address, bool) or not isinstance(address, int):
        raise TypeError(f"expected int address, got {type(address).__name__}")
    if address < 0:
        raise ValueError(f"address must be non-negative, got {address}")
    return "0x" + format_number_base(address, 16, False)


def _char_bytes(value: Union[int, str, bytes]) -> bytes:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"%c expects a single byte, got {value!r}")
        return bytes(value)
    return bytes([_require_int(value, "c") & 0xFF])


def _string_bytes(value: Any) -> bytes:
    if value is None:
        return b"(null)"
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"%s expects str or bytes, got {type(value).__name__}")


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> bytes:
    if spec == "%":
        return b"%"
    if spec == "c":
        return _char_bytes(_next_arg(args, spec))
    if spec == "s":
        return _string_bytes(_next_arg(args, spec))
    if spec == "p":
        return format_pointer(_next_arg(args, spec)).encode("ascii")
    if spec in ("d", "i"):
        value = _as_int32(_require_int(_next_arg(args, spec), spec))
        return str(value).encode("ascii")
    if spec in ("u", "x", "X"):
        value = _as_uint32(_require_int(_next_arg(args, spec), spec))
        base = 10 if spec == "u" else 16
        return format_number_base(value, base, spec == "X").encode("ascii")
    return ("%" + spec).encode("utf-8")


def format_string(fmt: str, *args: Any) -> bytes:
    """Expand fmt with args and return the bytes that printf would write.

    An unknown conversion is copied through as a percent sign and the
    character. A format ending in a lone percent sign, or one that needs more
    arguments than given, raises ValueError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, got {type(fmt).__name__}")
    out = bytearray()
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out += ch.encode("utf-8")
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        out += _convert(spec, remaining)
    return bytes(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of fmt to standard output; return the bytes written."""
    data = format_string(fmt, *args)
    view = memoryview(data)
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(data)