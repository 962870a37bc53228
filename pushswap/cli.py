"""Command line: print the instructions that sort the given numbers."""

import sys
from typing import Optional, Sequence

from .parsing import ArgumentError, normalize, parse_stack
from .sorting import sort_stacks
from .stacks import Stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers in ``argv`` and print one instruction per line.

    Returns 0 on success and -1 after printing ``Error`` on bad input.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 0
    try:
        values = parse_stack(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return -1
    stacks = Stacks(normalize(values), emit=lambda name: sys.stdout.write(name + "\n"))
    sort_stacks(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())