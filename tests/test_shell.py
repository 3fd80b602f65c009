import signal

import pytest

from baysalsh.builtins import ShellExit
from baysalsh.shell import main, process_line, start_signals


@pytest.fixture(autouse=True)
def _keep_signals():
    saved_int = signal.getsignal(signal.SIGINT)
    saved_quit = signal.getsignal(signal.SIGQUIT)
    yield
    signal.signal(signal.SIGINT, saved_int)
    signal.signal(signal.SIGQUIT, saved_quit)


def _feed(monkeypatch, items):
    queue = list(items)

    def fake_input(prompt=""):
        if not queue:
            raise EOFError
        item = queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    monkeypatch.setattr("builtins.input", fake_input)


def test_start_signals_installs_handlers(capsys):
    start_signals()
    assert signal.getsignal(signal.SIGINT) is signal.default_int_handler
    assert signal.getsignal(signal.SIGQUIT) == signal.SIG_IGN
    signal.raise_signal(signal.SIGQUIT)
    with pytest.raises(KeyboardInterrupt):
        signal.raise_signal(signal.SIGINT)
    process_line("echo still here", {})
    assert capsys.readouterr().out == "still here\n"


def test_process_line_empty(capsys):
    process_line("", {})
    assert capsys.readouterr().out == ""


def test_process_line_unclosed_quotes(capsys):
    with pytest.raises(ShellExit) as info:
        process_line('echo "hi', {})
    assert info.value.status == 0
    assert capsys.readouterr().out == "unclosed quotes\n"


def test_process_line_expands_variables(capsys):
    process_line("echo $GREETING", {"GREETING": "hello"})
    assert capsys.readouterr().out == "hello\n"


def test_process_line_exit_status():
    with pytest.raises(ShellExit) as info:
        process_line("exit 5", {})
    assert info.value.status == 5


def test_process_line_missing_redirection_target(capsys):
    process_line("echo hi >", {})
    assert capsys.readouterr().out == "Syntax error: missing filename for redirection\n"


def test_main_exits_on_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, [])
    assert main() == 0
    assert capsys.readouterr().out == "exit\n"


def test_main_runs_commands_until_exit(monkeypatch, capsys):
    _feed(monkeypatch, ["echo one", "", "exit 7", "echo never"])
    assert main() == 7
    out = capsys.readouterr().out
    assert out == "one\nexit\n"


def test_main_survives_interrupt(monkeypatch, capsys):
    _feed(monkeypatch, [KeyboardInterrupt(), "echo after"])
    assert main([]) == 0
    assert capsys.readouterr().out == "\nafter\nexit\n"