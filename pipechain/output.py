"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str, fd: int) -> None:
    """Write one character to fd."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def put_str(s: str, fd: int) -> None:
    """Write a string to fd."""
    _write_all(fd, s.encode())


def put_endl(s: str, fd: int) -> None:
    """Write a string followed by a newline to fd."""
    _write_all(fd, s.encode() + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write an integer in decimal to fd."""
    _write_all(fd, str(int(n)).encode())