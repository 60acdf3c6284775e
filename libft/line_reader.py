"""Reading a file descriptor one line at a time, with a buffer kept per descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

DEFAULT_BUFFER_SIZE = 42
DEFAULT_MAX_FD = 1024


class LineReader:
    """Hands out the lines of open file descriptors one call at a time.

    Bytes read past the end of a line are kept for the next call on the same
    descriptor, so several descriptors can be read in turn without mixing up
    their contents.
    """

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        max_fd: int = DEFAULT_MAX_FD,
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if max_fd <= 0:
            raise ValueError(f"descriptor limit must be positive, got {max_fd}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: dict[int, bytes] = {}

    def _check_fd(self, fd: int) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"file descriptor must be int, got {type(fd).__name__}")
        if not 0 <= fd < self.max_fd:
            raise ValueError(
                f"file descriptor {fd} outside the range 0..{self.max_fd - 1}"
            )

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of fd, its newline included, or None at end of input.

        The last line of the input is returned without a newline when it has
        none. A failed read discards whatever was kept for fd and re-raises.
        """
        self._check_fd(fd)
        storage = self._pending.pop(fd, b"")
        while b"\n" not in storage:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                raise
            if not chunk:
                break
            storage += chunk
        if not storage:
            return None
        line, newline, rest = storage.partition(b"\n")
        if rest:
            self._pending[fd] = rest
        return line + newline

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the remaining lines of fd until end of input."""
        while (line := self.read_line(fd)) is not None:
            yield line

    def forget(self, fd: int) -> None:
        """Drop any bytes kept for fd, for example after closing it."""
        self._check_fd(fd)
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of fd using a shared reader, or None at end of input."""
    return _default_reader.read_line(fd)