"""An ordered-set view over a sorted sequence.

Python ships no tree-based set, but a sorted sequence answers the same
question in O(log n) with :mod:`bisect`. :class:`SortedView` records that a
sequence is sorted; it does not copy it.
"""

from collections.abc import Sequence
from itertools import islice


class SortedView(Sequence):
    """Read-only view declaring that ``items`` is sorted in ascending order
    under ``<``. Duplicates are allowed.

    Parameters
    ----------
    items : collections.abc.Sequence
        An indexable, already sorted sequence. It is referenced, not
        copied, so it must not be reordered while the view is in use.

    Raises
    ------
    ValueError
        If ``items`` is not sorted.
    """

    __slots__ = ("_items",)

    def __init__(self, items):
        for prev, item in zip(items, islice(items, 1, None)):
            if item < prev:
                raise ValueError(
                    f"SortedView needs sorted items; {item!r} follows {prev!r}"
                )
        self._items = items

    @classmethod
    def of(cls, iterable):
        """Sorts ``iterable`` into a new list and wraps it."""

        return cls(sorted(iterable))

    @property
    def items(self):
        return self._items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"SortedView({self._items!r})"
