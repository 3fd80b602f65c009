"""Checks on command arguments and token lists."""

from __future__ import annotations

from typing import Iterable, Sequence

_LLONG_MAX = (1 << 63) - 1


def _is_redirect(token: str | None) -> bool:
    """True for tokens that start with a redirection operator."""
    return bool(token) and token[0] in "<>"


def check_overflow(text: str | None) -> bool:
    """True when ``text`` is a plain signed integer that fits in 64 bits.

    One optional leading sign is allowed; everything else must be a digit.
    """
    if not text:
        return False
    negative = False
    digits = text
    if digits[0] in "+-":
        negative = digits[0] == "-"
        digits = digits[1:]
    if not digits:
        return False
    if not all("0" <= ch <= "9" for ch in digits):
        return False
    limit = _LLONG_MAX + 1 if negative else _LLONG_MAX
    return int(digits) <= limit


def check_nl(args: Iterable[str | None]) -> int:
    """Count the leading ``-n`` style flags (``-n``, ``-nnn``) in ``args``."""
    count = 0
    for arg in args:
        if not arg or arg[0] != "-":
            break
        flags = arg[1:]
        if not flags or flags.strip("n"):
            break
        count += 1
    return count


def count_redirect(tokens: Iterable[str]) -> int:
    """Count the tokens that start with ``>``."""
    return sum(1 for token in tokens if token.startswith(">"))


def check_redirect(tokens: Sequence[str | None]) -> int | None:
    """Return the index of the first redirection token, or ``None``."""
    return next(
        (index for index, token in enumerate(tokens) if _is_redirect(token)),
        None,
    )


def token_len(tokens: Iterable[str]) -> int:
    """Total length of the tokens before the first redirection, one separator each."""
    total = 0
    for token in tokens:
        if _is_redirect(token):
            break
        total += len(token) + 1
    return total