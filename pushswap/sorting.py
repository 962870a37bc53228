"""Choosing and emitting the instruction sequence that sorts stack ``a``."""

from typing import Sequence

from .stacks import Stacks


def find_min_index(values: Sequence[int]) -> int:
    """Return the index of the first smallest value; 0 for an empty sequence."""
    return min(range(len(values)), key=values.__getitem__, default=0)


def solve2(stacks: Stacks) -> None:
    """Sort two elements on ``a``."""
    stacks.sa()


def solve3(stacks: Stacks) -> None:
    """Sort three elements on ``a`` with at most two instructions."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first < second and first < third and second > third:
        stacks.sa()
        stacks.ra()
    elif second < first < third:
        stacks.sa()
    elif third < first < second:
        stacks.rra()
    elif first > second and first > third and second < third:
        stacks.ra()
    elif first > second > third:
        stacks.sa()
        stacks.rra()


def solve4(stacks: Stacks) -> None:
    """Sort four elements on ``a``, using ``b`` to hold the smallest."""
    min_index = find_min_index(stacks.a)
    if min_index == 1:
        stacks.ra()
    elif min_index == 2:
        stacks.ra()
        stacks.ra()
    elif min_index == 3:
        stacks.rra()
    stacks.pb()
    solve3(stacks)
    stacks.pa()


def solve5(stacks: Stacks) -> None:
    """Sort five elements on ``a``, using ``b`` to hold the smallest two."""
    min_index = find_min_index(stacks.a)
    while min_index != 0:
        if min_index < 3:
            stacks.ra()
        else:
            stacks.rra()
        min_index = find_min_index(stacks.a)
    stacks.pb()
    solve4(stacks)
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort non-negative values on ``a`` one bit at a time, low bit first.

    The number of passes is the bit length of the stack size minus one,
    so the values are expected to be ranks below a power of two above it.
    """
    size = len(stacks.a)
    for bit in range((size - 1).bit_length()):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size; do nothing if sorted."""
    a = stacks.a
    if all(x <= y for x, y in zip(a, list(a)[1:])):
        return
    size = len(a)
    if size == 2:
        solve2(stacks)
    elif size == 3:
        solve3(stacks)
    elif size == 4:
        solve4(stacks)
    elif size == 5:
        solve5(stacks)
    elif size > 5:
        radix_sort(stacks)