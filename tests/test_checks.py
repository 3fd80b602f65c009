import pytest

from baysalsh.checks import (
    check_nl,
    check_overflow,
    check_redirect,
    count_redirect,
    token_len,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", True),
        ("42", True),
        ("+7", True),
        ("-7", True),
        ("9223372036854775807", True),
        ("9223372036854775808", False),
        ("-9223372036854775808", True),
        ("-9223372036854775809", False),
        ("", False),
        (None, False),
        ("-", False),
        ("+", False),
        ("12a", False),
        (" 12", False),
        ("--1", False),
    ],
)
def test_check_overflow(text, expected):
    assert check_overflow(text) is expected


@pytest.mark.parametrize(
    "args,expected",
    [
        (["-n", "hello"], 1),
        (["-n", "-n", "bby"], 2),
        (["-nnnn", "-n", "x"], 2),
        (["-", "x"], 0),
        (["-na", "x"], 0),
        (["hello", "-n"], 0),
        ([], 0),
        (["-n", None, "-n"], 1),
    ],
)
def test_check_nl(args, expected):
    assert check_nl(args) == expected


def test_check_nl_never_exceeds_length():
    args = ["-n", "-nn", "-nnn"]
    assert check_nl(args) == len(args)


def test_count_redirect_counts_output_only():
    assert count_redirect(["echo", "a", ">", "f", ">>", "g", "<", "h"]) == 2


def test_count_redirect_none():
    assert count_redirect(["ls", "-l", ""]) == 0


def test_check_redirect_finds_first():
    tokens = ["cat", "<", "in", ">", "out"]
    index = check_redirect(tokens)
    assert index == 1
    assert tokens[index] == "<"


def test_check_redirect_absent():
    assert check_redirect(["echo", "hi", "", None]) is None


def test_token_len_stops_at_redirect():
    tokens = ["echo", "hi", ">", "out"]
    assert token_len(tokens) == len("echo") + 1 + len("hi") + 1


def test_token_len_without_redirect_counts_all():
    tokens = ["a", "bb", "ccc"]
    assert token_len(tokens) == sum(len(t) for t in tokens) + len(tokens)


def test_token_len_leading_redirect():
    assert token_len(["<<", "EOF", "cat"]) == 0