"""Stacks, the twelve push_swap operations and a few stack measurements."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field, fields
from typing import Deque, Iterable, TextIO

_OP_NAMES = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


@dataclass(slots=True)
class Node:
    """One element of a stack: its value and its rank among all values."""

    data: int
    index: int = 0


Stack = Deque[Node]


@dataclass
class OpCounts:
    """How many times each operation was performed, plus the overall total."""

    total: int = 0
    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    def record(self, name: str) -> None:
        """Count one performed operation called *name*."""
        if name not in _OP_NAMES:
            raise ValueError(f"unknown operation: {name!r}")
        setattr(self, name, getattr(self, name) + 1)
        self.total += 1

    def as_dict(self) -> dict[str, int]:
        """Return the counters keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def build_stack(values: Iterable[int]) -> Stack:
    """Build a stack whose top is the first of *values*."""
    return deque(Node(value) for value in values)


def is_sorted(stack: Iterable[Node]) -> bool:
    """True when the values never decrease from top to bottom."""
    previous = None
    for node in stack:
        if previous is not None and previous > node.data:
            return False
        previous = node.data
    return True


def compute_disorder(stack: Iterable[Node]) -> float:
    """Share of ordered pairs (i above j) whose values are inverted."""
    values = [node.data for node in stack]
    total_pairs = len(values) * (len(values) - 1) // 2
    if total_pairs == 0:
        return 0.0
    mistakes = sum(
        1
        for i, upper in enumerate(values)
        for lower in values[i + 1:]
        if upper > lower
    )
    return mistakes / total_pairs


def index_stack(stack: Iterable[Node]) -> None:
    """Give every node its rank: the position of its value in sorted order."""
    nodes = list(stack)
    ranks: dict[int, int] = {}
    for position, value in enumerate(sorted(node.data for node in nodes)):
        ranks.setdefault(value, position)
    for node in nodes:
        node.index = ranks[node.data]


class Machine:
    """Two stacks, a and b, driven by the push_swap operations.

    Every operation that takes effect is counted and its name is written,
    one per line, to *out* (standard output by default). An operation whose
    stacks are too small does nothing and writes nothing.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None):
        self.a: Stack = build_stack(values)
        self.b: Stack = deque()
        self.counts = OpCounts()
        self._out = out

    def _emit(self, name: str) -> bool:
        self.counts.record(name)
        (self._out if self._out is not None else sys.stdout).write(name + "\n")
        return True

    @staticmethod
    def _swap(stack: Stack) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def sa(self) -> bool:
        """Swap the two top elements of a."""
        if len(self.a) < 2:
            return False
        self._swap(self.a)
        return self._emit("sa")

    def sb(self) -> bool:
        """Swap the two top elements of b."""
        if len(self.b) < 2:
            return False
        self._swap(self.b)
        return self._emit("sb")

    def ss(self) -> bool:
        """Swap the tops of a and b at once; needs two elements in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self._swap(self.a)
        self._swap(self.b)
        return self._emit("ss")

    def pa(self) -> bool:
        """Move the top of b onto a."""
        if not self.b:
            return False
        self.a.appendleft(self.b.popleft())
        return self._emit("pa")

    def pb(self) -> bool:
        """Move the top of a onto b."""
        if not self.a:
            return False
        self.b.appendleft(self.a.popleft())
        return self._emit("pb")

    def ra(self) -> bool:
        """Rotate a: the top element goes to the bottom."""
        if len(self.a) < 2:
            return False
        self.a.rotate(-1)
        return self._emit("ra")

    def rb(self) -> bool:
        """Rotate b: the top element goes to the bottom."""
        if len(self.b) < 2:
            return False
        self.b.rotate(-1)
        return self._emit("rb")

    def rr(self) -> bool:
        """Rotate a and b at once; needs two elements in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.rotate(-1)
        self.b.rotate(-1)
        return self._emit("rr")

    def rra(self) -> bool:
        """Reverse-rotate a: the bottom element comes to the top."""
        if len(self.a) < 2:
            return False
        self.a.rotate(1)
        return self._emit("rra")

    def rrb(self) -> bool:
        """Reverse-rotate b: the bottom element comes to the top."""
        if len(self.b) < 2:
            return False
        self.b.rotate(1)
        return self._emit("rrb")

    def rrr(self) -> bool:
        """Reverse-rotate a and b at once; needs two elements in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.rotate(1)
        self.b.rotate(1)
        return self._emit("rrr")