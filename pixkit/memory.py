"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memchr(buf: Buffer, value: int, n: int) -> int:
    """Return the index of the first byte equal to ``value`` among the first
    ``n`` bytes of ``buf``, or -1."""
    _check_count(n, buf)
    return bytes(buf[:n]).find(bytes([value & 0xFF]))


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Gives the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled: the result is as if the source bytes
    were first copied aside.
    """
    if n < 0 or dst < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise IndexError("region lies outside the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)