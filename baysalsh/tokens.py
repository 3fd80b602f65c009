"""Splitting command lines into tokens and expanding environment variables."""

from __future__ import annotations

import os
import re
from itertools import chain, islice, repeat
from typing import Iterable, Mapping

_QUOTES = "\"'"
_TOKEN_BREAKERS = "\"'$"
_VARIABLE = re.compile(r"\$([A-Za-z0-9_]*)")


def count_input(line: str) -> int:
    """Count the quote characters in ``line`` plus its first counted space.

    A space counts only once per line, and only when it does not sit at the
    very start nor directly after a quote character.
    """

    def at(index: int) -> str:
        return line[index] if index < len(line) else ""

    count = 0
    space_pending = True
    opened = False
    index = 0
    while index < len(line):
        if line[index] == '"':
            count += 1
            index += 1
            opened = False
        if at(index) == "'":
            count += 1
            index += 1
            opened = False
        if space_pending and opened and at(index) == " ":
            count += 1
            space_pending = False
        index += 1
        opened = True
    return count


def count_words(line: str) -> int:
    """Count the space-separated words of ``line`` for plain word splitting.

    Every run of spaces that follows a character adds a word; a trailing
    space takes one away again.
    """
    count = 1
    after_char = False
    index = 0
    while index < len(line):
        if line[index] == " " and after_char:
            count += 1
            after_char = False
            while index < len(line) and line[index] == " ":
                index += 1
        else:
            after_char = True
            index += 1
    if not line or line[-1] == " ":
        count -= 1
    return count


def split_words(line: str) -> list[str]:
    """Split ``line`` on spaces into exactly ``count_words(line)`` words.

    Missing words are filled in as empty strings.
    """
    runs = (word for word in line.split(" ") if word)
    return list(islice(chain(runs, repeat("")), count_words(line)))


def _quoted_segment(line: str, start: int) -> tuple[str, int]:
    """Read the quoted segment opening at ``start``; return its text and the next index.

    A quoted segment always ends the token it belongs to.
    """
    quote = line[start]
    close = line.find(quote, start + 1)
    if close == start + 1:
        return quote, close + 1
    if close < 0:
        return line[start:], len(line)
    segment = line[start:close + 1]
    after = line[close + 1:close + 2]
    if after != " ":
        return segment, close + 1
    following = line[close + 2:close + 3]
    if following and following not in (" ", quote):
        return segment + " ", close + 2
    return segment + "  ", close + 2


def split_input(line: str) -> list[str]:
    """Split a command line into tokens.

    Tokens are separated by spaces. A quote starts a token of its own that
    keeps its quote characters, and a plain token ends before a quote or a
    ``$``. Tokens made of a lone quote character are dropped; trailing spaces
    leave an empty token behind.
    """
    tokens: list[str] = []
    index = 0
    length = len(line)
    while index < length:
        while index < length and line[index] == " ":
            index += 1
        parts: list[str] = []
        while index < length and line[index] != " ":
            if line[index] in _QUOTES:
                segment, index = _quoted_segment(line, index)
                parts.append(segment)
                break
            parts.append(line[index])
            index += 1
            if index < length and line[index] in _TOKEN_BREAKERS:
                break
        token = "".join(parts)
        if token not in ('"', "'"):
            tokens.append(token)
    return tokens


def unclosed_quotes(line: str) -> bool:
    """True when ``line`` holds a quote that is never closed.

    Quotes of the other kind inside a quoted stretch are ignored.
    """
    index = 0
    while index < len(line):
        ch = line[index]
        if ch in _QUOTES:
            close = line.find(ch, index + 1)
            if close < 0:
                return True
            index = close
        index += 1
    return False


def expand(text: str, env: Mapping[str, str] | None = None) -> str:
    """Replace every ``$NAME`` in ``text`` with its value from ``env``.

    Names are ASCII letters, digits and underscores. Unknown or empty names
    are removed together with their ``$``.
    """
    environment = os.environ if env is None else env

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if not name:
            return ""
        return environment.get(name, "")

    return _VARIABLE.sub(substitute, text)


def expand_tokens(
    tokens: Iterable[str], env: Mapping[str, str] | None = None
) -> list[str]:
    """Expand environment variables in every token."""
    return [expand(token, env) for token in tokens]