"""Ordered sets: binary search under the elements' own ``<``."""

from bisect import bisect_left

from containment.container import register
from containment.sorted_view import SortedView


@register(SortedView)
def _sorted_contains(view, value):
    items = view.items
    index = bisect_left(items, value)
    if index == len(items):
        return False
    # bisect_left guarantees not (found < value)
    return not (value < items[index])
