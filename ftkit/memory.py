"""Byte-buffer primitives: fill, allocate, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Bytes) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (truncated to a byte)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf``; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count(n, data)
    target = c & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0