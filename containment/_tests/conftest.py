from array import array
from collections import OrderedDict, deque

import numpy as np
import pandas as pd
import pytest

from containment import NOTHING, Err, Exactly, Ok, Some, SortedView, Span


@pytest.fixture
def containers_holding_three():
    """One container of every shape, each of which holds 3."""

    return [
        [1, 2, 3, 4, 5],
        (1, 2, 3, 4, 5),
        deque([1, 2, 3, 4, 5]),
        array("i", [1, 2, 3, 4, 5]),
        {1, 2, 3, 4, 5},
        frozenset([1, 2, 3, 4, 5]),
        SortedView([1, 2, 3, 4, 5]),
        {3: "three", 4: "four"},
        OrderedDict([(3, "three")]),
        {3: "three"}.keys(),
        {"three": 3}.values(),
        Some(3),
        Ok(3),
        range(0, 6),
        range(1, 10, 2),
        Span(0, 6),
        Span(0, 3, inclusive=True),
        Span(start=3),
        Span(stop=4),
        Span(),
        pd.Interval(0, 6),
        np.array([1, 2, 3, 4, 5]),
        np.array([[1, 2], [3, 4]]),
        pd.Index([1, 2, 3]),
        pd.Series(["a", "b"], index=[2, 3]),
        Exactly(3),
        b"\x03",
        bytearray(b"\x01\x03"),
        memoryview(b"\x03"),
    ]


@pytest.fixture
def containers_missing_three():
    return [
        [1, 2, 4, 5],
        (1, 2),
        deque([9]),
        {1, 2, 4},
        SortedView([1, 2, 4, 5]),
        {"3": 3},
        {"three": 3}.keys(),
        {3: "three"}.values(),
        NOTHING,
        Some(4),
        Ok(4),
        Err(3),
        range(0, 3),
        range(0, 10, 2),
        Span(0, 3),
        Span(start=4),
        Span(stop=3),
        Span(stop=2, inclusive=True),
        pd.Interval(0, 3, closed="left"),
        np.array([1.5, 2.5]),
        pd.Index([1, 2]),
        pd.Series([3, 3], index=[0, 1]),
        Exactly(4),
        b"\x04",
        memoryview(b"\x01\x02"),
    ]


@pytest.fixture
def empty_containers():
    return [
        [],
        (),
        deque(),
        array("i"),
        set(),
        frozenset(),
        SortedView([]),
        {},
        OrderedDict(),
        {}.keys(),
        {}.values(),
        NOTHING,
        range(0),
        range(5, 0),
        Span(0, 0),
        Span(5, 1, inclusive=True),
        np.array([]),
        np.empty((0, 3)),
        pd.Index([]),
        pd.Series([], dtype=float),
        pd.DataFrame(),
        b"",
        bytearray(),
    ]


@pytest.fixture
def equal_threes():
    """Values that all compare equal to 3 under their own equality."""

    return [3, 3.0, np.int64(3), np.float64(3.0)]
