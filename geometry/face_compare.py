"""Topological comparison of vertex-label loops."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from core.circulator import Circulator, Direction


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two faces as circular label sequences.

    Returns:
        1 if ``b`` is a rotation of ``a``, -1 if it is a rotation of ``a``
        traversed the other way, 0 otherwise.

    The labels are assumed to be circular in the same order, though not
    necessarily in the same direction or from the same starting point. When
    ``a[0]`` occurs more than once in ``b`` only its first occurrence is tried.
    """
    size_a = len(a)
    size_b = len(b)

    if size_a != size_b or size_a == 0:
        return 0
    if size_a == 1:
        return 1 if a[0] == b[0] else 0

    a_circ = Circulator(a)
    b_circ = Circulator(b)

    # Rotate b until its element matches the starting element of a.
    while True:
        if a_circ() == b_circ():
            b_circ.set_fulcrum_to_iterator()
            a_circ.forward()
            b_circ.forward()
            break
        if not b_circ.circulate(Direction.CLOCKWISE):
            break

    # Back on the fulcrum: no shared starting label.
    if not b_circ.circulate():
        return 0

    # Forwards
    while a_circ() == b_circ():
        a_circ.circulate(Direction.CLOCKWISE)
        if not b_circ.circulate(Direction.CLOCKWISE):
            break

    if not a_circ.circulate():
        return 1

    a_circ.set_iterator_to_fulcrum()
    b_circ.set_iterator_to_fulcrum()
    a_circ.forward()
    b_circ.backward()

    # Backwards
    while a_circ() == b_circ():
        a_circ.circulate(Direction.CLOCKWISE)
        if not b_circ.circulate(Direction.ANTICLOCKWISE):
            break

    if not a_circ.circulate():
        return -1

    return 0


def same_vertices(a: Sequence[int], b: Sequence[int]) -> bool:
    """True when ``a`` and ``b`` hold the same labels with the same multiplicity."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)
