"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations


def _check_span(buf: bytes | bytearray, start: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if start < 0 or start + n > len(buf):
        raise ValueError(
            f"span {start}..{start + n} outside buffer of length {len(buf)}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first *n* bytes of *buf* to the low byte of *c*; return *buf*."""
    _check_span(buf, 0, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A negative count or size is rejected unless the other factor is zero.
    """
    if (count < 0 and size != 0) or (size < 0 and count != 0):
        raise ValueError(f"invalid allocation {count} x {size}")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of *c* within the first *n*, or None."""
    _check_span(buf, 0, n)
    index = buf.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first *n* bytes; the difference of the first unequal pair, else 0."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into *dest*; return *dest*."""
    _check_span(dest, 0, n)
    _check_span(src, 0, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes inside *buf* from offset *src* to offset *dest*, overlap allowed."""
    _check_span(buf, dest, n)
    _check_span(buf, src, n)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf