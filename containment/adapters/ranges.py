"""Ranges: bound comparisons only, nothing is materialized."""

import math
import numbers

import numpy as np
import pandas as pd

from containment.container import register
from containment.errors import raise_type_mismatch
from containment.ranges import Span


def is_ordered_number(value):
    if isinstance(value, (numbers.Real, np.bool_)):
        return True
    # Decimal registers as a Number but not as Complex
    return isinstance(value, numbers.Number) and not isinstance(
        value, numbers.Complex
    )


def as_integer(value):
    """Returns ``value`` as an ``int`` if it is numerically integral, else
    None."""

    if isinstance(value, (numbers.Integral, np.bool_)):
        return int(value)
    if not math.isfinite(value):
        return None
    floor = math.floor(value)
    return floor if floor == value else None


@register(range)
def _range_contains(container, value):
    if not is_ordered_number(value):
        raise_type_mismatch(container, value, reason="range holds integers")
    integer = as_integer(value)
    if integer is None:
        return False
    # O(1) arithmetic for int, including the step
    return integer in container


@register(Span)
def _span_contains(span, value):
    # Compare before the emptiness shortcut so a mistyped query always raises
    above = span.start is None or span.start <= value
    if span.is_empty():
        return False
    if span.stop is None:
        below = True
    elif span.inclusive:
        below = value <= span.stop
    else:
        below = value < span.stop
    return above and below


@register(pd.Interval)
def _interval_contains(interval, value):
    # pandas honours the interval's own ``closed`` kind
    return value in interval
