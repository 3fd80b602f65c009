"""Input and output redirection of the shell's standard streams."""

from __future__ import annotations

import enum
import os
import sys
import tempfile
from typing import Iterable, Iterator

_STDIN = 0
_STDOUT = 1
_FILE_MODE = 0o644


class RedirectType(enum.IntEnum):
    """Kind of redirection a token introduces."""

    NONE = 0
    OUTFILE = 1
    APPEND = 2
    INFILE = 3
    HEREDOC = 4


def redirect_type(token: str | None) -> RedirectType:
    """Classify ``token`` as ``>``, ``>>``, ``<``, ``<<`` or no redirection."""
    if not token:
        return RedirectType.NONE
    if token[0] == ">":
        return RedirectType.APPEND if token[1:2] == ">" else RedirectType.OUTFILE
    if token[0] == "<":
        return RedirectType.HEREDOC if token[1:2] == "<" else RedirectType.INFILE
    return RedirectType.NONE


def read_heredoc(delimiter: str, lines: Iterable[str]) -> str:
    """Collect ``lines`` up to ``delimiter`` (or their end), each ending in a newline."""
    collected = []
    for line in lines:
        if line == delimiter:
            break
        collected.append(line + "\n")
    return "".join(collected)


def _prompted_lines() -> Iterator[str]:
    """Yield lines typed at a ``> `` prompt until end of input."""
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


class Redirector:
    """Redirects file descriptors 0 and 1 and puts them back on :meth:`close`."""

    def __init__(self) -> None:
        self._saved: dict[int, int] = {}

    def _install(self, fd: int, target: int) -> None:
        if target == _STDOUT:
            sys.stdout.flush()
        if target not in self._saved:
            self._saved[target] = os.dup(target)
        os.dup2(fd, target)
        os.close(fd)

    @staticmethod
    def _open(filename: str, flags: int) -> int | None:
        try:
            return os.open(filename, flags, _FILE_MODE)
        except OSError as exc:
            sys.stderr.write(f"{filename}: {exc.strerror}\n")
            return None

    def apply(self, kind: RedirectType, target: str | None) -> bool:
        """Perform a redirection of ``kind``; False when there is nothing to do."""
        if target is None:
            return False
        handlers = {
            RedirectType.OUTFILE: self.outfile,
            RedirectType.APPEND: self.append,
            RedirectType.INFILE: self.infile,
            RedirectType.HEREDOC: self.heredoc,
        }
        handler = handlers.get(RedirectType(kind))
        if handler is None:
            return False
        handler(target)
        return True

    def infile(self, filename: str) -> bool:
        """Read standard input from ``filename``; False if it cannot be opened."""
        fd = self._open(filename, os.O_RDONLY)
        if fd is None:
            return False
        self._install(fd, _STDIN)
        return True

    def outfile(self, filename: str) -> bool:
        """Send standard output to ``filename``, truncating it."""
        fd = self._open(filename, os.O_CREAT | os.O_WRONLY | os.O_TRUNC)
        if fd is None:
            return False
        self._install(fd, _STDOUT)
        return True

    def append(self, filename: str) -> bool:
        """Send standard output to the end of ``filename``."""
        fd = self._open(filename, os.O_CREAT | os.O_WRONLY | os.O_APPEND)
        if fd is None:
            return False
        self._install(fd, _STDOUT)
        return True

    def heredoc(self, delimiter: str) -> bool:
        """Read lines at a prompt up to ``delimiter`` and feed them as standard input."""
        text = read_heredoc(delimiter, _prompted_lines())
        with tempfile.TemporaryFile() as handle:
            handle.write(text.encode())
            handle.flush()
            handle.seek(0)
            self._install(os.dup(handle.fileno()), _STDIN)
        return True

    def close(self) -> None:
        """Restore every redirected descriptor."""
        if _STDOUT in self._saved:
            sys.stdout.flush()
        for target, saved in self._saved.items():
            os.dup2(saved, target)
            os.close(saved)
        self._saved.clear()

    def __enter__(self) -> Redirector:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()