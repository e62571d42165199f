"""Circular cursor over a sequence.

A ``Circulator`` keeps two positions: the iterator, which moves, and the
fulcrum, which marks where a walk started. ``circulate`` moves the iterator
one step and reports whether it is still away from the fulcrum, so a loop of
the form ``while circ.circulate(...)`` visits every element exactly once.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Direction(Enum):
    NONE = 0
    CLOCKWISE = 1
    ANTICLOCKWISE = -1


class Circulator(Generic[T]):
    """Position-plus-fulcrum walker that wraps around ``seq``."""

    def __init__(self, seq: Sequence[T], start: int = 0):
        self._seq = seq
        self._size = len(seq)
        self.index = start
        self.fulcrum = start

    def __len__(self) -> int:
        return self._size

    def __call__(self) -> T:
        """Element under the iterator."""
        return self._seq[self.index]

    def next_index(self) -> int:
        return 0 if self.index == self._size - 1 else self.index + 1

    def prev_index(self) -> int:
        return self.index - 1 if self.index else self._size - 1

    def next(self) -> T:
        """Element after the iterator (no movement)."""
        return self._seq[self.next_index()]

    def prev(self) -> T:
        """Element before the iterator (no movement)."""
        return self._seq[self.prev_index()]

    def forward(self) -> None:
        self.index = self.next_index()

    def backward(self) -> None:
        self.index = self.prev_index()

    def circulate(self, direction: Direction = Direction.NONE) -> bool:
        """Step in ``direction`` and return False once back on the fulcrum."""
        if direction is Direction.CLOCKWISE:
            self.forward()
        elif direction is Direction.ANTICLOCKWISE:
            self.backward()
        return self.index != self.fulcrum

    def set_fulcrum_to_iterator(self) -> None:
        self.fulcrum = self.index

    def set_iterator_to_fulcrum(self) -> None:
        self.index = self.fulcrum

    def walk(self, count: int) -> list[T]:
        """Collect ``count`` elements moving forward from the iterator."""
        out = []
        for _ in range(count):
            out.append(self())
            self.forward()
        return out
