"""Optional and result wrappers hold at most one value."""

from containment.container import register
from containment.optional import Err, Ok, Some, _Nothing


@register(Some, Ok)
def _present_contains(wrapper, value):
    return wrapper.value == value


@register(_Nothing, Err)
def _absent_contains(wrapper, value):
    return False
