"""numpy arrays: elementwise equality over every element, any shape."""

import numbers

import numpy as np

from containment.adapters.sequences import occurs, scan
from containment.container import register
from containment.defaults import NUMERIC_DTYPE_KINDS, TEXT_DTYPE_KINDS
from containment.errors import raise_type_mismatch
from containment.queries import Subsequence


def _is_numeric_scalar(value):
    return isinstance(value, (numbers.Number, np.number, np.bool_))


def _check_query(array, value):
    """Rejects queries that could never equal an element of ``array``.
    Without this numpy would broadcast a list query or quietly compare a
    string against numbers."""

    kind = array.dtype.kind
    if kind in NUMERIC_DTYPE_KINDS and not _is_numeric_scalar(value):
        raise_type_mismatch(
            array, value, reason=f"array of dtype {array.dtype} holds numbers"
        )
    if kind in TEXT_DTYPE_KINDS:
        expected = str if kind == "U" else bytes
        if not isinstance(value, expected):
            raise_type_mismatch(
                array,
                value,
                reason=f"array of dtype {array.dtype} holds "
                f"{expected.__name__}",
            )


@register(np.ndarray)
def _array_contains(array, value):
    if isinstance(value, Subsequence):
        if array.ndim != 1:
            raise_type_mismatch(
                array, value, reason="runs need a one-dimensional array"
            )
        return occurs(array, value)
    if array.dtype.kind == "O":
        return scan(array.ravel(), value)
    _check_query(array, value)
    if array.size == 0:
        return False
    return np.any(array == value)
