"""The In capability, the inverse of :func:`~containment.container.contains`.

There is exactly one rule: ``is_in(value, container)`` asks ``container``
whether it contains ``value``. It is written once, so every adapter
registered now or later answers ``is_in`` for every value type without any
further code.
"""

from typing import Any

from containment.container import contains


def is_in(value: Any, container: Any) -> bool:
    """Returns True iff ``container`` holds ``value``. Always equal to
    ``contains(container, value)``."""

    return contains(container, value)


class In:
    """Mix-in giving instances an ``is_in`` method.

    Example
    -------
    > class Color(In, str): ...
    > Color("red").is_in({"red", "green"})
    True
    """

    __slots__ = ()

    def is_in(self, container) -> bool:
        return is_in(self, container)


class Member(In):
    """Wraps any value, built-ins included, so that it reads as
    ``Member(3).is_in(range(5))``."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def is_in(self, container) -> bool:
        return is_in(self.value, container)

    def __repr__(self):
        return f"Member({self.value!r})"
