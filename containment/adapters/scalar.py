from containment.container import register
from containment.scalar import Exactly


@register(Exactly)
def _exactly_contains(one, value):
    return one.value == value
