"""Byte-buffer operations on bytes-like objects.

Functions that write take a mutable buffer such as a ``bytearray`` and change
it in place. Functions that only read accept any bytes-like object. Asking for
more bytes than a buffer holds raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove", "memset"]

BytesLike = Union[bytes, bytearray, memoryview]


def _count(n: int, name: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def _span(buffer: BytesLike, n: int) -> int:
    n = _count(n)
    if n > len(buffer):
        raise ValueError(f"{n} bytes requested from a buffer of {len(buffer)}")
    return n


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int byte value, got {type(c).__name__}")
    return c % 256


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    n = _span(buffer, n)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    return bytearray(_count(count, "count") * _count(size, "size"))


def memchr(buffer: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (taken modulo 256) in the first ``n`` bytes, or None."""
    n = _span(buffer, n)
    index = bytes(buffer[:n]).find(_byte(c))
    return index if index >= 0 else None


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0 when
    the spans are equal.
    """
    n = _span(first, n)
    _span(second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``; return ``dest``."""
    n = _span(src, n)
    _span(dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The two regions may overlap. Returns ``buffer``.
    """
    n = _count(n)
    dest = _count(dest, "dest")
    src = _count(src, "src")
    size = len(buffer)
    if dest + n > size or src + n > size:
        raise ValueError(f"move of {n} bytes does not fit a buffer of {size}")
    if dest != src:
        buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (taken modulo 256); return ``buffer``."""
    n = _span(buffer, n)
    buffer[:n] = bytes([_byte(c)]) * n
    return buffer