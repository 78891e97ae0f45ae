"""Byte-buffer scanning, comparison, filling and copying."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview, MutableSequence[int]]

SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def memchr(data: Buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first ``n``."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: WritableBuffer | None, src: Buffer | None, n: int) -> WritableBuffer | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; overlapping views are safe."""
    _check_count(n, dest, src)
    # Taking a snapshot of the source first makes overlapping regions correct.
    dest[:n] = bytes(src[:n])
    return dest


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the product would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)