"""Containers with a declared element type.

Python collections do not know their element type at run time, so a query
with a value of the wrong type usually just returns False. Wrapping a
container with :func:`typed` declares the element type and turns such
queries into an immediate :class:`~containment.errors.ContainmentTypeError`.
"""

from containment.container import Container, contains, supports
from containment.errors import raise_type_mismatch, raise_unsupported


class TypedContainer(Container):
    """A :class:`Container` view that checks each query against
    ``element_type`` before delegating to the wrapped container."""

    __slots__ = ("container", "element_type")

    def __init__(self, container, element_type):
        if not supports(container):
            raise_unsupported(container)
        self.container = container
        self.element_type = element_type

    def contains(self, value):
        if not isinstance(value, self.element_type):
            raise_type_mismatch(
                self.container,
                value,
                reason=f"declared element type is {self.element_type!r}",
            )
        return contains(self.container, value)

    def __repr__(self):
        return f"typed({self.container!r}, {self.element_type!r})"


def typed(container, element_type):
    """Declares the element type of ``container``.

    Parameters
    ----------
    container : object
        Any supported container.
    element_type : type or tuple of type
        Anything accepted as the second argument of ``isinstance``.

    Returns
    -------
    TypedContainer
    """

    return TypedContainer(container, element_type)
