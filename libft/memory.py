"""Byte-buffer operations: fill, copy, search, compare, allocate."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to the start of dst and return dst."""
    _check_count(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to dst, correct even when the regions overlap."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of c within n bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0 if equal."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of nmemb * size bytes.

    Raises MemoryError when the total size overflows the platform size type.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must be non-negative")
    total = nmemb * size
    if total > SIZE_MAX:
        raise MemoryError(f"allocation of {nmemb} * {size} bytes overflows")
    return bytearray(total)