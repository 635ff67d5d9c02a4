"""Reading text from a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 42


class LineReader:
    """Reads lines from a raw file descriptor in fixed-size chunks.

    Each line keeps its trailing newline; the last line of the input may
    lack one. Data read past the end of a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        try:
            while b"\n" not in self._pending:
                chunk = os.read(self.fd, self.buffer_size)
                if not chunk:
                    break
                self._pending += chunk
        except OSError:
            self._pending = b""
            raise
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition(b"\n")
        self._pending = rest
        return (line + newline).decode("utf-8")

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line readable from ``fd``."""
    yield from LineReader(fd, buffer_size)