"""Optional and result wrappers.

Python spells "no value" as ``None``, which is itself a perfectly good value
to look for, so containment over an optional needs an explicit wrapper:
``Some(3)`` holds ``3``; ``NOTHING`` holds nothing. ``Ok``/``Err`` do the
same for results, where only the success value counts as held.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Some:
    value: Any


class _Nothing:
    """The empty optional. Use the ``NOTHING`` singleton."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOTHING"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Nothing, ())


NOTHING = _Nothing()


def option(value):
    """Wraps a possibly-``None`` value: ``None`` becomes ``NOTHING`` and
    anything else ``Some(value)``."""

    return NOTHING if value is None else Some(value)


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Err:
    error: Any
