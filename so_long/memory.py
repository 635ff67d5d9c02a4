"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

# Largest allocation calloc agrees to make, in bytes.
CALLOC_LIMIT = 65535


def _check_span(length: int, offset: int, count: int, what: str) -> None:
    if offset < 0 or count < 0:
        raise ValueError(f"{what}: offset and count must not be negative")
    if offset + count > length:
        raise ValueError(
            f"{what}: {count} bytes at offset {offset} exceed a buffer of {length} bytes"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to the low byte of ``value``.

    A count of zero or less leaves the buffer untouched.
    """
    if count <= 0:
        return buffer
    _check_span(len(buffer), 0, count, "memset")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer``."""
    _check_span(len(buffer), 0, count, "bzero")
    buffer[:count] = bytes(count)
    return buffer


def memcpy(
    dst: Optional[bytearray], src: Optional[BytesLike], count: int
) -> Optional[bytearray]:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dst``.

    With neither buffer given, nothing is copied and ``dst`` is returned.
    """
    if dst is None and src is None:
        return dst
    if dst is None or src is None:
        raise ValueError("memcpy: both buffers are required")
    _check_span(len(src), 0, count, "memcpy")
    _check_span(len(dst), 0, count, "memcpy")
    dst[:count] = bytes(src[:count])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer``; the regions may overlap."""
    _check_span(len(buffer), src_offset, count, "memmove")
    _check_span(len(buffer), dst_offset, count, "memmove")
    buffer[dst_offset:dst_offset + count] = bytes(buffer[src_offset:src_offset + count])
    return buffer


def memchr(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` among the
    first ``count`` bytes, or None if there is none."""
    _check_span(len(data), 0, count, "memchr")
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_span(len(first), 0, count, "memcmp")
    _check_span(len(second), 0, count, "memcmp")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the request is larger than the allocator allows.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    if count != 0 and size > CALLOC_LIMIT // count:
        raise MemoryError(f"calloc: {count} x {size} bytes exceeds the allocation limit")
    return bytearray(count * size)