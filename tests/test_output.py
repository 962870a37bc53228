import io

import pytest

from pushswap.output import (
    putchar_fd,
    putendl_fd,
    putnbr,
    putnbr_fd,
    putstr,
    putstr_fd,
)


def test_putchar_fd_writes_character():
    stream = io.StringIO()
    putchar_fd("a", stream)
    putchar_fd("b", stream)
    assert stream.getvalue() == "ab"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_putchar_fd_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        putchar_fd(bad, io.StringIO())


def test_putstr_fd_writes_text():
    stream = io.StringIO()
    putstr_fd("hello", stream)
    assert stream.getvalue() == "hello"


def test_putstr_fd_ignores_missing_string():
    stream = io.StringIO()
    putstr_fd(None, stream)
    assert stream.getvalue() == ""


def test_putendl_fd_appends_newline():
    stream = io.StringIO()
    putendl_fd("Error", stream)
    assert stream.getvalue() == "Error\n"


def test_putendl_fd_empty_string_is_just_newline():
    stream = io.StringIO()
    putendl_fd("", stream)
    assert stream.getvalue() == "\n"


def test_putendl_fd_missing_string_raises():
    with pytest.raises(TypeError):
        putendl_fd(None, io.StringIO())


@pytest.mark.parametrize("n", [0, 7, 42, -1, -2147483648, 2147483647])
def test_putnbr_fd_round_trips(n):
    stream = io.StringIO()
    putnbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_putnbr_fd_int_min():
    stream = io.StringIO()
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_putnbr_writes_to_stdout(capsys):
    putnbr(-305)
    assert int(capsys.readouterr().out) == -305


def test_putstr_writes_to_stdout(capsys):
    putstr("pa\n")
    putstr(None)
    assert capsys.readouterr().out == "pa\n"