"""Ranges over any totally ordered type.

``range`` only covers integers. :class:`Span` covers everything else that
supports ``<=`` and ``<`` (floats, fractions, dates, strings, ...) and all
six bound kinds::

    Span(0, 5)                  # 0 <= x < 5
    Span(0, 5, inclusive=True)  # 0 <= x <= 5
    Span(start=0)               # 0 <= x
    Span(stop=5)                # x < 5
    Span(stop=5, inclusive=True)  # x <= 5
    Span()                      # everything

The lower bound, when present, is always inclusive.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
    start: Optional[Any] = None
    stop: Optional[Any] = None
    inclusive: bool = False

    def __post_init__(self):
        if self.inclusive and self.stop is None:
            raise ValueError("an inclusive span needs an upper bound")

    @property
    def bounded(self):
        return self.start is not None and self.stop is not None

    def is_empty(self):
        """True if no value can satisfy both bounds."""

        if not self.bounded:
            return False
        if self.inclusive:
            return not (self.start <= self.stop)
        return not (self.start < self.stop)

    def __repr__(self):
        lo = "" if self.start is None else repr(self.start)
        hi = "" if self.stop is None else repr(self.stop)
        op = "..=" if self.inclusive else ".."
        return f"Span({lo}{op}{hi})"
