"""NUL-terminated byte-string routines: length, bounded copy, search, compare.

Every string argument is a bytes-like object. Its content runs up to the first
NUL byte, or to the end of the object when it holds none. Searches return an
index into that content instead of a pointer.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _content(s: ReadableBuffer) -> bytes:
    """Return the bytes of s before its first NUL."""
    if isinstance(s, str):
        raise TypeError("expected a bytes-like object, not str")
    data = bytes(s)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int byte value, got {type(c).__name__}")
    return c & 0xFF


def _check_size(size: int, dst: bytearray) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")


def strlen(s: ReadableBuffer) -> int:
    """Number of bytes before the first NUL."""
    return len(_content(s))


def strlcpy(dst: bytearray, src: ReadableBuffer, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means the copy was cut short.
    """
    _check_size(size, dst)
    data = _content(src)
    if size:
        count = min(len(data), size - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: ReadableBuffer, size: int) -> int:
    """Append src to the string in dst, keeping the total within size bytes.

    Returns the length of the string it tried to build: the initial length of
    dst plus the length of src, or size plus the length of src when dst held no
    NUL within size bytes.
    """
    _check_size(size, dst)
    dest_len = strlen(dst)
    data = _content(src)
    if size <= dest_len:
        return size + len(data)
    count = min(len(data), size - dest_len - 1)
    dst[dest_len:dest_len + count] = data[:count]
    dst[dest_len + count] = 0
    return dest_len + len(data)


def strchr(s: ReadableBuffer, c: int) -> Optional[int]:
    """Index of the first byte equal to c, or None.

    Searching for 0 finds the terminator, at index strlen(s).
    """
    data = _content(s)
    target = _byte(c)
    if target == 0:
        return len(data)
    index = data.find(target)
    return None if index < 0 else index


def strrchr(s: ReadableBuffer, c: int) -> Optional[int]:
    """Index of the last byte equal to c, or None.

    Searching for 0 finds the terminator, at index strlen(s).
    """
    data = _content(s)
    target = _byte(c)
    if target == 0:
        return len(data)
    index = data.rfind(target)
    return None if index < 0 else index


def strncmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare at most n bytes; the difference of the first unequal bytes, or 0."""
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")
    a, b = _content(s1), _content(s2)
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strcmp(s1: ReadableBuffer, s2: ReadableBuffer) -> int:
    """Compare two strings; the difference of the first unequal bytes, or 0."""
    a, b = _content(s1), _content(s2)
    for x, y in zip(a + b"\0", b + b"\0"):
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(big: ReadableBuffer, little: ReadableBuffer, length: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly in big's first length bytes.

    An empty little is found at index 0; None when there is no such occurrence.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    haystack = _content(big)
    needle = _content(little)
    if not needle:
        return 0
    for start in range(len(haystack)):
        if length - start < len(needle):
            break
        if haystack.startswith(needle, start):
            return start
    return None