"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(length: int, *buffers: BytesLike) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer size {len(buffer)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to *value* (taken modulo 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first *length* bytes of *buffer*."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of *count* elements of *size* bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to *value* in the first *length* bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Compare the first *length* bytes; return the difference of the first unequal pair, else 0."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy the first *length* bytes of *src* into the start of *dst*."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move *length* bytes inside *buffer* from offset *src* to offset *dest*; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if max(dest, src) + length > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer