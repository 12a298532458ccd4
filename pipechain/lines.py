"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 42

_shared_pending = bytearray()


def _next_line(fd: int, pending: bytearray, size: int) -> Optional[str]:
    try:
        while b"\n" not in pending:
            chunk = os.read(fd, size)
            if not chunk:
                break
            pending += chunk
    except OSError:
        pending.clear()
        raise
    if not pending:
        return None
    end = pending.find(b"\n")
    cut = len(pending) if end < 0 else end + 1
    line = bytes(pending[:cut])
    del pending[:cut]
    return line.decode("utf-8", "surrogateescape")


class LineReader:
    """Reads lines, newline included, from a file descriptor in fixed-size chunks."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._fd = fd
        self._size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """The next line, or None at end of file."""
        return _next_line(self._fd, self._pending, self._size)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(fd: int) -> Optional[str]:
    """The next line read from fd, or None at end of file.

    Unread data is held in a single buffer shared by every call,
    whichever descriptor it is made with.
    """
    if fd < 0:
        raise ValueError(f"invalid file descriptor {fd}")
    return _next_line(fd, _shared_pending, BUFFER_SIZE)