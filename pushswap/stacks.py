"""The two push_swap stacks and the instructions that act on them."""

import sys
from collections import deque
from typing import Callable, Deque, Iterable, Optional

INSTRUCTIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


def _write_line(name: str) -> None:
    sys.stdout.write(name + "\n")


def _swap(stack: Deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: Deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stack ``a`` and stack ``b``, each with its top at index 0.

    Every instruction that takes effect reports its name to ``emit``;
    by default the name is written to standard output on its own line.
    Instructions that would have nothing to act on are skipped silently.
    """

    def __init__(
        self,
        values: Iterable[int],
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self._emit = emit if emit is not None else _write_line

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, name: str) -> None:
        """Run the instruction called ``name``."""
        if name not in INSTRUCTIONS:
            raise ValueError(f"unknown instruction: {name!r}")
        getattr(self, name)()

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        if len(self.a) < 2:
            return
        self._emit("sa")
        _swap(self.a)

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        if len(self.b) < 2:
            return
        self._emit("sb")
        _swap(self.b)

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        if len(self.a) < 2 and len(self.b) < 2:
            return
        self._emit("ss")
        _swap(self.a)
        _swap(self.b)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self._emit("pa")
        self.a.appendleft(self.b.popleft())

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self._emit("pb")
        self.b.appendleft(self.a.popleft())

    def ra(self) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if len(self.a) < 2:
            return
        self._emit("ra")
        _rotate(self.a)

    def rb(self) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        if len(self.b) < 2:
            return
        self._emit("rb")
        _rotate(self.b)

    def rr(self) -> None:
        """Rotate both stacks."""
        if len(self.a) < 2 and len(self.b) < 2:
            return
        self._emit("rr")
        _rotate(self.a)
        _rotate(self.b)

    def rra(self) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if len(self.a) < 2:
            return
        self._emit("rra")
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        if len(self.b) < 2:
            return
        self._emit("rrb")
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        if len(self.a) < 2 and len(self.b) < 2:
            return
        self._emit("rrr")
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)