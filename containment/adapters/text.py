"""Text buffers.

A ``str`` holds characters and fragments. Python has no separate character
type, so a one-character query is the character test and a longer query is
the contiguous-substring test; ``str.__contains__`` answers both. Bytes-like
buffers hold byte values (integral numbers in 0..255) and ``bytes``
fragments.
"""

from collections import UserString

from containment.adapters.ranges import as_integer, is_ordered_number
from containment.adapters.sequences import scan
from containment.container import register
from containment.defaults import BYTE_FORMATS, BYTE_VALUES
from containment.errors import raise_type_mismatch


@register(str, UserString)
def _text_contains(text, value):
    if not isinstance(value, (str, UserString)):
        raise_type_mismatch(
            text, value, reason="text holds characters and fragments (str)"
        )
    if not text:
        return False
    return str(value) in str(text)


@register(bytes, bytearray)
def _bytes_contains(buffer, value):
    if is_ordered_number(value):
        integer = as_integer(value)
        if integer is None:
            return False
        if integer not in BYTE_VALUES:
            raise_type_mismatch(
                buffer, value, reason="byte values lie in 0..255"
            )
        return bool(buffer) and integer in buffer
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bool(buffer) and value in buffer
    raise_type_mismatch(
        buffer, value, reason="bytes hold byte values (int) and fragments"
    )


@register(memoryview)
def _memoryview_contains(view, value):
    if view.format in BYTE_FORMATS:
        return _bytes_contains(view.tobytes(), value)
    return scan(view.tolist(), value)
