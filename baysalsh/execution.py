"""Running commands: builtins, programs found on PATH, and redirections."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from contextlib import contextmanager
from typing import Iterator, Mapping, Sequence, TextIO

from .builtins import cd, echo, exit_shell, pwd
from .ft_transform import split
from .redirection import RedirectType, Redirector, redirect_type

_NOT_FOUND_STATUS = 127
_SHELL_NAME = "BAYSAL SHELL"


class RedirectionSyntaxError(Exception):
    """Raised when a redirection operator has no file name after it."""

    def __init__(self) -> None:
        super().__init__("Syntax error: missing filename for redirection")


def find_program(name: str, path: str | None) -> str | None:
    """Return the first ``dir/name`` in the colon-separated ``path`` that is executable."""
    directories = split(path, ":")
    if directories is None:
        return None
    return next(
        (
            candidate
            for candidate in (f"{directory}/{name}" for directory in directories)
            if os.access(candidate, os.X_OK)
        ),
        None,
    )


@contextmanager
def _sigint_ignored() -> Iterator[None]:
    """Ignore SIGINT in this process while a child runs."""
    try:
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
        installed = True
    except ValueError:
        previous, installed = None, False
    try:
        yield
    finally:
        if installed:
            signal.signal(
                signal.SIGINT,
                signal.SIG_DFL if previous is None else previous,
            )


def _restore_default_sigint() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)


def _launch(program: str, args: Sequence[str], env: Mapping[str, str]) -> None:
    """Run ``program`` with ``args`` and wait for it; a failed start is silent."""
    sys.stdout.flush()
    sys.stderr.flush()
    with _sigint_ignored():
        try:
            subprocess.run(
                list(args),
                executable=program,
                env=dict(env),
                preexec_fn=_restore_default_sigint,
                check=False,
            )
        except OSError:
            pass


def run_external(
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    err: TextIO | None = None,
) -> int:
    """Run an external program named by ``args[0]``.

    Names starting with ``/`` or ``./`` are run directly; anything else is
    looked up on ``PATH``. Returns 127 for a missing explicit path, else 0.
    """
    environment = os.environ if env is None else env
    err = sys.stderr if err is None else err
    args = list(args)
    name = args[0]
    if os.path.isdir(name):
        err.write(f"{_SHELL_NAME}: {name}: Is a directory\n")
    if name.startswith("/") or name.startswith("./"):
        if os.access(name, os.F_OK):
            _launch(name, args, environment)
            return 0
        err.write(f"{_SHELL_NAME}: {name} : no such file or directory\n")
        return _NOT_FOUND_STATUS
    program = find_program(name, environment.get("PATH"))
    if program is None:
        sys.stdout.write("command not found\n")
        return 0
    _launch(program, args, environment)
    return 0


def check_command(
    tokens: Sequence[str], env: Mapping[str, str] | None = None
) -> int:
    """Run a builtin or an external command given as a token list."""
    tokens = list(tokens)
    if not tokens:
        return 0
    command, rest = tokens[0], tokens[1:]
    if command == "echo":
        echo(rest)
    elif command == "pwd":
        pwd()
    elif command == "cd":
        cd(rest, env)
    elif command == "exit":
        exit_shell(rest)
    else:
        return run_external(tokens, env)
    return 0


def execute_redir(
    tokens: Sequence[str], env: Mapping[str, str] | None = None
) -> int:
    """Apply the redirections in ``tokens`` and run what remains of the command.

    Each redirection operator takes the following token as its target; both
    are removed from the command. Standard streams are restored afterwards.
    """
    tokens = list(tokens)
    if not tokens:
        return 0
    words: list[str] = []
    with Redirector() as redirector:
        index = 0
        while index < len(tokens):
            kind = redirect_type(tokens[index])
            if kind is RedirectType.NONE:
                words.append(tokens[index])
                index += 1
                continue
            if index + 1 >= len(tokens):
                raise RedirectionSyntaxError()
            redirector.apply(kind, tokens[index + 1])
            index += 2
        if words:
            return check_command(words, env)
    return 0