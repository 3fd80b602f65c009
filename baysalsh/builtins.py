"""Commands the shell runs itself: echo, pwd, cd and exit."""

from __future__ import annotations

import os
import sys
from typing import Mapping, Sequence, TextIO

from .checks import check_nl, check_overflow
from .ft_chars import atoi


class ShellExit(Exception):
    """Raised when the shell should terminate with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def echo(args: Sequence[str], out: TextIO | None = None) -> None:
    """Print ``args`` separated by spaces.

    A leading ``-n`` style flag suppresses the newline; only that first flag
    is consumed.
    """
    out = sys.stdout if out is None else out
    args = list(args)
    if not args:
        out.write("\n")
        return
    no_newline = check_nl(args) > 0
    if no_newline:
        args = args[1:]
    out.write(" ".join(args))
    if not no_newline:
        out.write("\n")


def pwd(out: TextIO | None = None, err: TextIO | None = None) -> None:
    """Print the current working directory."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"pwd: {exc.strerror}\n")
        return
    out.write(f"{cwd}\n")


def cd(
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Change directory to the single argument, or to ``HOME`` without one."""
    environment = os.environ if env is None else env
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    args = list(args)
    if not args:
        path = environment.get("HOME")
        if not path:
            out.write("cd: HOME not set\n")
            return
    elif len(args) == 1:
        path = args[0]
    else:
        out.write("BAYSAL SHELL: cd: too many arguments\n")
        return
    try:
        os.chdir(path)
    except OSError as exc:
        err.write(f"cd: {exc.strerror}\n")


def exit_shell(
    args: Sequence[str], out: TextIO | None = None, err: TextIO | None = None
) -> None:
    """Leave the shell by raising :class:`ShellExit`.

    ``args`` are the arguments after the command name. More than one argument
    is reported and the shell keeps running. A non-numeric argument exits
    with status 2.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    args = list(args)
    if len(args) > 1:
        out.write("BAYSAL SHELL: exit: too many arguments\n")
        return
    if args:
        arg = args[0]
        if not check_overflow(arg):
            err.write(f"bash: exit: {arg}: numeric argument required\n")
            raise ShellExit(2)
        out.write("exit\n")
        raise ShellExit(atoi(arg) & 0xFF)
    out.write("exit\n")
    raise ShellExit(0)