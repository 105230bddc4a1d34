"""Byte buffer operations on bytearrays."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError("byte count must be non-negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes with the low byte of value; return buffer."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dst; return dst."""
    _check_count(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: bytes | bytearray, stop: int, n: int) -> Optional[int]:
    """Copy bytes from src to dst until the byte stop has been copied or n bytes.

    Returns the index in dst just past the copied stop byte, or None when
    it did not occur within n bytes.
    """
    _check_count(n, dst, src)
    stop &= 0xFF
    end = src.find(stop, 0, n)
    count = n if end < 0 else end + 1
    dst[:count] = src[:count]
    return None if end < 0 else count


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move n bytes within buffer; the regions may overlap. Returns buffer."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must be non-negative")
    _check_count(n, buffer)
    if max(dst_offset, src_offset) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: bytes | bytearray, value: int, n: int) -> Optional[int]:
    """Index of the first byte within n bytes equal to value, or None.

    Bytes are compared as signed values, so bytes 0x80-0xFF match only
    the negative values -128 to -1.
    """
    _check_count(n, data)
    for index, byte in enumerate(data[:n]):
        signed = byte - 256 if byte > 127 else byte
        if signed == value:
            return index
    return None


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0