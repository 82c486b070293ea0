"""Mappings answer for their keys, never their values."""

from collections.abc import Mapping

from containment.container import register


@register(dict, Mapping)
def _mapping_contains(mapping, key):
    # ``in`` never inserts, even for defaultdict
    return key in mapping
