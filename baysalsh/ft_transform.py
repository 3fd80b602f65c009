"""String building helpers: joining, bounded copies, mapping, trimming and splitting."""

from __future__ import annotations

from typing import Callable


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Return ``s1`` followed by ``s2``; ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have had.
    When ``dst`` already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dlen, slen = len(dst), len(src)
    if dlen >= size:
        return dst, size + slen
    room = size - dlen - 1
    return dst + src[:room], dlen + slen


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``. A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strmapi(s: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: str | None, func: Callable[[int, str], object] | None) -> None:
    """Call ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        return
    for index, ch in enumerate(s):
        func(index, ch)


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or beyond the end yields an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def split(s: str | None, sep: str) -> list[str] | None:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if s is None:
        return None
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]