"""Hash-based sets: lookup by hash, then equality."""

from collections.abc import Set

from containment.container import register


@register(set, frozenset, Set)
def _set_contains(container, value):
    # Unhashable values raise TypeError here, reported as a type mismatch
    return value in container
