"""Raw byte-buffer helpers: zeroing, filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    """Reject negative counts and counts that run past any of ``buffers``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of length {len(buf)}")


def _check_span(buf: BytesLike, offset: int, n: int) -> None:
    """Reject a span ``[offset, offset + n)`` that does not lie inside ``buf``."""
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if offset + n > len(buf):
        raise IndexError(
            f"span of {n} bytes at offset {offset} exceeds buffer of length {len(buf)}"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero, in place."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``nmemb`` items of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf: BytesLike, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within the first ``n`` bytes."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    if dest is src:
        return dest
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``; overlap is safe."""
    _check_count(n)
    _check_span(buf, src, n)
    _check_span(buf, dest, n)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``; return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf