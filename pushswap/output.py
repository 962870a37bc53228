"""Writing characters, strings and numbers to text streams."""

import sys
from typing import Optional, TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` to ``stream``; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    if s is None:
        raise TypeError("cannot write a missing string")
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    stream.write(str(n))


def putnbr(n: int) -> None:
    """Write the decimal representation of ``n`` to standard output."""
    putnbr_fd(n, sys.stdout)


def putstr(s: Optional[str]) -> None:
    """Write ``s`` to standard output; a missing string writes nothing."""
    putstr_fd(s, sys.stdout)