import builtins
import os

import pytest

from baysalsh.redirection import (
    RedirectType,
    Redirector,
    read_heredoc,
    redirect_type,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        (">", RedirectType.OUTFILE),
        (">>", RedirectType.APPEND),
        ("<", RedirectType.INFILE),
        ("<<", RedirectType.HEREDOC),
        ("echo", RedirectType.NONE),
        ("", RedirectType.NONE),
        (None, RedirectType.NONE),
    ],
)
def test_redirect_type(token, expected):
    assert redirect_type(token) == expected


def test_redirect_type_none_is_falsy():
    assert not redirect_type("ls")
    assert redirect_type(">")


def test_read_heredoc_stops_at_delimiter():
    assert read_heredoc("EOF", ["a", "EOF", "b"]) == "a\n"


def test_read_heredoc_until_end_of_lines():
    assert read_heredoc("X", ["a", "b"]) == "a\nb\n"


def test_read_heredoc_immediate_delimiter():
    assert read_heredoc("END", ["END", "later"]) == ""


def test_outfile_captures_and_restores(tmp_path):
    target = tmp_path / "out.txt"
    before = os.fstat(1)
    with Redirector() as redirector:
        assert redirector.outfile(str(target)) is True
        os.write(1, b"hello\n")
    after = os.fstat(1)
    assert target.read_bytes() == b"hello\n"
    assert (after.st_dev, after.st_ino) == (before.st_dev, before.st_ino)


def test_outfile_truncates(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old contents\n")
    with Redirector() as redirector:
        redirector.outfile(str(target))
        os.write(1, b"new\n")
    assert target.read_bytes() == b"new\n"


def test_append_keeps_existing(tmp_path):
    target = tmp_path / "log.txt"
    target.write_bytes(b"a\n")
    with Redirector() as redirector:
        assert redirector.append(str(target)) is True
        os.write(1, b"b\n")
    assert target.read_bytes() == b"a\nb\n"


def test_infile_feeds_stdin(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"payload\n")
    with Redirector() as redirector:
        assert redirector.infile(str(source)) is True
        data = os.read(0, 100)
    assert data == b"payload\n"


def test_infile_missing_reports_error(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    with Redirector() as redirector:
        assert redirector.infile(str(missing)) is False
    err = capsys.readouterr().err
    assert err.startswith(f"{missing}: ")


def test_heredoc_feeds_collected_lines(monkeypatch):
    lines = iter(["one", "two", "EOF", "three"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))
    with Redirector() as redirector:
        assert redirector.heredoc("EOF") is True
        data = os.read(0, 100)
    assert data == b"one\ntwo\n"


def test_heredoc_ends_at_end_of_input(monkeypatch):
    lines = iter(["only"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)
    with Redirector() as redirector:
        assert redirector.heredoc("EOF") is True
        data = os.read(0, 100)
    assert data == b"only\n"


def test_apply_dispatches_outfile(tmp_path):
    target = tmp_path / "apply.txt"
    with Redirector() as redirector:
        assert redirector.apply(RedirectType.OUTFILE, str(target)) is True
        os.write(1, b"via apply\n")
    assert target.read_bytes() == b"via apply\n"


def test_apply_without_redirection_does_nothing(tmp_path):
    with Redirector() as redirector:
        assert redirector.apply(RedirectType.NONE, "file") is False
        assert redirector.apply(RedirectType.OUTFILE, None) is False
    assert not (tmp_path / "file").exists()


def test_close_twice_is_harmless(tmp_path):
    target = tmp_path / "twice.txt"
    redirector = Redirector()
    redirector.outfile(str(target))
    os.write(1, b"x\n")
    redirector.close()
    redirector.close()
    assert target.read_bytes() == b"x\n"