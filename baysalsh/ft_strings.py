"""NUL-terminated string searching and comparison on Python strings.

Every function treats an embedded ``"\\0"`` as the end of the string.
"""

from __future__ import annotations

_NUL = "\0"


def _text(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    return s.split(_NUL, 1)[0]


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_text(s))


def strdup(s: str | None) -> str | None:
    """Return a copy of ``s`` up to its terminator; ``None`` stays ``None``."""
    if s is None:
        return None
    return _text(s)


def strchr(s: str | None, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL yields the index of the terminator. ``None`` when absent.
    """
    if s is None:
        return None
    ch = _char(c)
    text = _text(s)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``; NUL yields the terminator index."""
    ch = _char(c)
    text = _text(s)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code-point difference at the first mismatch."""
    a, b = _text(s1), _text(s2)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    tail_a = ord(a[len(b)]) if len(a) > len(b) else 0
    tail_b = ord(b[len(a)]) if len(b) > len(a) else 0
    return tail_a - tail_b


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return strcmp(_text(s1)[:n], _text(s2)[:n])


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. ``None`` when there is no match.
    """
    needle = _text(little)
    if not needle:
        return 0
    if length <= 0:
        return None
    index = _text(big)[:length].find(needle)
    return None if index < 0 else index