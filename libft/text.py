"""Building new strings from old: copy, slice, join, trim, split, map."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")
    return value


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at index start.

    A start at or past the end of s gives an empty string.
    """
    _require_str(s, "s")
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in charset from both ends of s."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split s on the single character sep, dropping empty pieces."""
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) applied to every character of s."""
    _require_str(s, "s")
    if not callable(f):
        raise TypeError("f must be callable")
    pieces = []
    for index, char in enumerate(s):
        mapped = f(index, char)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(
                f"mapping function must return a single character, got {mapped!r}"
            )
        pieces.append(mapped)
    return "".join(pieces)


def striteri(chars: MutableSequence[T], f: Callable[[int, T], T]) -> None:
    """Replace each item of chars, in place, with f(index, item)."""
    if not callable(f):
        raise TypeError("f must be callable")
    for index, item in enumerate(chars):
        chars[index] = f(index, item)