"""Interactive read-eval loop of the shell."""

from __future__ import annotations

import os
import signal
import sys
from typing import Mapping, Sequence

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    readline = None

from .builtins import ShellExit, exit_shell
from .execution import RedirectionSyntaxError, execute_redir
from .tokens import expand_tokens, split_input, unclosed_quotes

RED = "\033[1;31m"
CYAN = "\033[1;36m"
RESET = "\033[0m"
PROMPT = f"{RED}➜  {RESET}{CYAN}~ {RESET}"


def start_signals() -> None:
    """Make Ctrl-C interrupt the prompt and ignore SIGQUIT."""
    signal.signal(signal.SIGINT, signal.default_int_handler)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def process_line(line: str, env: Mapping[str, str] | None = None) -> None:
    """Tokenize, expand and run one command line.

    An unclosed quote ends the shell: the message is printed and
    :class:`ShellExit` is raised with status 0.
    """
    if not line:
        return
    if unclosed_quotes(line):
        sys.stdout.write("unclosed quotes\n")
        raise ShellExit(0)
    tokens = expand_tokens(split_input(line), env)
    try:
        execute_redir(tokens, env)
    except RedirectionSyntaxError as exc:
        sys.stdout.write(f"{exc}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell until it exits; return the exit status."""
    try:
        while True:
            start_signals()
            try:
                line = input(PROMPT)
            except KeyboardInterrupt:
                sys.stdout.write("\n")
                continue
            except EOFError:
                exit_shell([])
                continue
            process_line(line, os.environ)
    except ShellExit as exc:
        sys.stdout.flush()
        return exc.status