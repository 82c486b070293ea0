"""Finite ordered sequences: a linear scan in index order."""

from array import array
from collections import deque
from collections.abc import Sequence, ValuesView

from containment.container import register
from containment.queries import Subsequence


def scan(sequence, value):
    """True iff some element of ``sequence`` compares equal to ``value``.
    Equality is always ``element == value``; identity alone never counts."""

    return any(item == value for item in sequence)


def occurs(sequence, run):
    """True iff the elements of ``run`` appear contiguously, in order, in
    ``sequence``. The empty run occurs in every non-empty sequence."""

    items = list(sequence)
    if not items:
        return False
    n = len(run)
    for start in range(len(items) - n + 1):
        window = items[start:start + n]
        if all(a == b for a, b in zip(window, run.items)):
            return True
    return False


@register(list, tuple, deque, array, Sequence)
def _sequence_contains(sequence, value):
    if isinstance(value, Subsequence):
        return occurs(sequence, value)
    return scan(sequence, value)


@register(ValuesView)
def _values_contains(values, value):
    return scan(values, value)
