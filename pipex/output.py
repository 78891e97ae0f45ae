"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os


def _write(fd: int, text: str) -> None:
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def put_char_fd(c: str, fd: int) -> None:
    """Write a single character to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(fd, c)


def put_str_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s:
        _write(fd, s)


def put_endl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline; ``None`` writes only the newline."""
    put_str_fd(s, fd)
    put_char_fd("\n", fd)


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write(fd, str(n))