# baysalsh

A small interactive shell. It reads a line, checks that its quotes are
closed, splits it into tokens, expands `$NAME` environment variables,
applies redirections and then runs either a builtin or an external program
found on `PATH`.

## Install

    pip install .

## Run

    baysalsh

The prompt shows `➜  ~ `. Line editing and history come from Python's
`readline` module when it is available. Press Ctrl-D (end of input) to
leave: the shell prints `exit` and ends with status 0. Ctrl-C at the prompt
starts a fresh line instead of quitting; SIGQUIT is ignored.

## What it understands

- Tokens are separated by spaces. A quoted stretch (`'...'` or `"..."`)
  becomes a token of its own and keeps its quote characters; a plain token
  ends before a quote or a `$`.
- `$NAME` (letters, digits, underscores) is replaced with the value of the
  environment variable, or with nothing if it is unset. This happens in
  every token, quoted or not.
- Redirections, each followed by its target token:
  - `> file` writes standard output to `file`, truncating it;
  - `>> file` appends standard output to `file`;
  - `< file` reads standard input from `file`;
  - `<< WORD` prompts with `> ` and collects lines up to one equal to
    `WORD` (or end of input), then feeds them as standard input.

  A redirection with nothing after it prints
  `Syntax error: missing filename for redirection`. The standard streams
  are put back after the command.
- Builtins:
  - `echo [-n] words` prints the words separated by spaces. A first
    argument of the form `-n`, `-nn`, ... suppresses the trailing newline;
    only that first flag is consumed, later ones are printed.
  - `pwd` prints the working directory.
  - `cd [dir]` changes directory, to `$HOME` without an argument; more
    than one argument prints `BAYSAL SHELL: cd: too many arguments`.
  - `exit [n]` prints `exit` and leaves with status `n` modulo 256 (0 by
    default). An argument that is not a plain integer fitting in 64 bits
    leaves with status 2 after `numeric argument required`; more than one
    argument is refused and the shell keeps running.
- Anything else is run as a program: directly when it starts with `/` or
  `./` (a missing file is reported as `no such file or directory`),
  otherwise by looking it up on `PATH`. An unknown command prints
  `command not found`.

A line with an unclosed quote prints `unclosed quotes` and ends the shell.

## What it does not do

There are no pipes (`|`), no command lists (`;`, `&&`, `||`), no background
jobs, no `$?` exit status and no `env`, `export` or `unset` builtins.
Quotes are not removed from tokens, and single quotes do not stop variable
expansion.

## Using it from Python

The pieces can be used on their own:

```python
from baysalsh.tokens import split_input, expand_tokens, unclosed_quotes
from baysalsh.checks import check_overflow, check_nl
from baysalsh.shell import process_line

tokens = split_input("echo hello world")    # ['echo', 'hello', 'world']
expand_tokens(["$HOME"], {"HOME": "/home/user"})   # ['/home/user']
unclosed_quotes("echo 'open")               # True
check_overflow("9223372036854775807")       # True
check_nl(["-n", "-nn", "text"])             # 2
```

- `baysalsh.shell.process_line(line, env)` runs one command line the way
  the interactive loop does; `baysalsh.shell.main()` is the loop itself.
- `baysalsh.execution` has `execute_redir`, `check_command`,
  `run_external` and `find_program`, and raises `RedirectionSyntaxError`.
- `baysalsh.builtins` has `echo`, `pwd`, `cd` and `exit_shell`; the last
  raises `ShellExit`, whose `status` is the exit status.
- `baysalsh.redirection` has `redirect_type`, the `RedirectType` enum,
  `read_heredoc` and `Redirector`, a context manager that redirects file
  descriptors 0 and 1 and restores them on exit.
- `baysalsh.ft_chars`, `baysalsh.ft_strings`, `baysalsh.ft_transform` and
  `baysalsh.ft_memory` hold small C-library style helpers for characters,
  strings and byte buffers (`atoi`, `strcmp`, `strlcpy`, `split`,
  `memmove` and the like).

## Tests

    pip install ".[test]"
    pytest