"""Reading and ranking the numbers given on the command line."""

from typing import List, Sequence

from .numconv import atol

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the command-line numbers are not acceptable."""


def parse_stack(args: Sequence[str]) -> List[int]:
    """Turn the argument strings into distinct 32-bit integers.

    Raises ArgumentError for text that is not a number, values outside
    the 32-bit range, and duplicates.
    """
    values: List[int] = []
    seen = set()
    for arg in args:
        value = atol(arg)
        if value == 0 and not arg.startswith("0"):
            raise ArgumentError(f"not a number: {arg!r}")
        if not INT_MIN <= value <= INT_MAX:
            raise ArgumentError(f"out of range: {arg!r}")
        if value in seen:
            raise ArgumentError(f"duplicate value: {arg!r}")
        seen.add(value)
        values.append(value)
    return values


def normalize(values: Sequence[int]) -> List[int]:
    """Replace each value by its rank, counting from 1 for the smallest.

    Ranked entries are marked with the largest 32-bit integer, so an input
    containing that value is not always ranked faithfully.
    """
    work = list(values)
    ranks = list(values)
    for rank in range(1, len(work) + 1):
        pos = min(range(len(work)), key=work.__getitem__)
        ranks[pos] = rank
        work[pos] = INT_MAX
    return ranks