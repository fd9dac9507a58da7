"""Byte-buffer operations on bytearray and memoryview objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

CALLOC_LIMIT = 65535


def _check_count(buffer: ReadableBuffer, count: int, what: str) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if count > len(buffer):
        raise ValueError(f"count {count} exceeds the size of {what} ({len(buffer)})")


def memset(buffer: Buffer, value: int, count: int) -> Buffer:
    """Fill the first ``count`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_count(buffer, count, "buffer")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: Buffer, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def memcpy(dest: Buffer, src: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(dest, count, "destination")
    _check_count(src, count, "source")
    dest[:count] = src[:count]
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes from ``src`` to ``dest``; the two may overlap."""
    _check_count(dest, count, "destination")
    _check_count(src, count, "source")
    dest[:count] = bytes(src[:count])
    return dest


def memchr(buffer: ReadableBuffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` within ``count`` bytes, or None."""
    _check_count(buffer, count, "buffer")
    index = bytes(buffer[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Difference of the first differing bytes within ``count`` bytes, or 0."""
    _check_count(first, count, "first buffer")
    _check_count(second, count, "second buffer")
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product exceeds the allocation limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > CALLOC_LIMIT // size:
        raise MemoryError(f"allocation of {count} x {size} bytes exceeds the limit")
    return bytearray(count * size)


def realloc(buffer: Optional[ReadableBuffer], new_size: int) -> Optional[bytearray]:
    """Return a new buffer of ``new_size`` bytes holding the start of ``buffer``.

    A size of 0 with an existing buffer releases it and returns None.
    """
    if new_size < 0:
        raise ValueError("new_size must not be negative")
    if buffer is None:
        return bytearray(new_size)
    if new_size == 0:
        return None
    resized = bytearray(new_size)
    kept = min(len(buffer), new_size)
    resized[:kept] = buffer[:kept]
    return resized