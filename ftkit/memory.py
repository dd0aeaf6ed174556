"""Byte-buffer operations on ``bytearray`` and other byte sequences.

Counts that run past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(length: int, offset: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if offset < 0 or offset + n > length:
        raise ValueError(f"{n} bytes at offset {offset} exceed the {what} length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_span(len(buf), 0, n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_span(len(src), 0, n, "source")
    _check_span(len(dest), 0, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    _check_span(len(buf), src, n, "buffer")
    _check_span(len(buf), dest, n, "buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` within
    the first ``n`` bytes, or ``None``."""
    _check_span(len(data), 0, n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    unequal pair, or 0."""
    _check_span(len(a), 0, n, "first buffer")
    _check_span(len(b), 0, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a size value.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if SIZE_MAX // nmemb < size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)