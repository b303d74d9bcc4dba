"""Byte-buffer primitives: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError("length exceeds buffer size")


def memalloc(size: int) -> bytearray:
    """A new zero-filled buffer of size bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size)


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first length bytes of buffer to zero."""
    _check_length(length, buffer)
    buffer[:length] = bytes(length)


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first length bytes of buffer with the low byte of value."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def memcpy(dest: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy length bytes from src to the start of dest."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memccpy(dest: bytearray, src: Buffer, stop: int, length: int) -> int | None:
    """Copy at most length bytes, stopping after the first byte equal to stop.

    Returns the position in dest just past the copied stop byte, or None when
    stop did not occur within length bytes (all length bytes are then copied).
    """
    _check_length(length, dest, src)
    stop &= 0xFF
    chunk = bytes(src[:length])
    found = chunk.find(stop)
    if found < 0:
        dest[:length] = chunk
        return None
    dest[:found + 1] = chunk[:found + 1]
    return found + 1


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, length: int) -> bytearray:
    """Move length bytes inside buffer from src_offset to dest_offset; the ranges may overlap."""
    if min(dest_offset, src_offset, length) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dest_offset, src_offset) + length > len(buffer):
        raise ValueError("range exceeds buffer size")
    buffer[dest_offset:dest_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer


def memchr(buffer: Buffer, value: int, length: int) -> int | None:
    """Position of the first byte equal to value within the first length bytes, or None."""
    _check_length(length, buffer)
    found = bytes(buffer[:length]).find(value & 0xFF)
    return None if found < 0 else found


def memcmp(left: Buffer, right: Buffer, length: int) -> int:
    """Difference of the first differing bytes among the first length bytes, or 0."""
    _check_length(length, left, right)
    for a, b in zip(bytes(left[:length]), bytes(right[:length])):
        if a != b:
            return a - b
    return 0