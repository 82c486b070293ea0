"""The adapter catalogue. Importing this package registers an adapter for
every built-in collection shape; each submodule covers one shape."""

from . import (  # noqa
    sequences,
    sets,
    ordered,
    mappings,
    optional,
    ranges,
    text,
    arrays,
    frames,
    scalar,
)
