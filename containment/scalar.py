"""Optional extension: a single value used as its own container.

Bare scalars are deliberately not containers (``contains(3, 3)`` raises
:class:`~containment.errors.UnsupportedContainerError`), since a silent
equality test would hide mistakes such as passing an element where a
collection was expected. Callers who want the "container of exactly one"
reading ask for it explicitly with :class:`Exactly`.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Exactly:
    value: Any
