"""The Container capability.

Any object can be asked whether it holds a value through the single
operation :func:`contains`. Two routes lead to an implementation:

- Built-in and third-party collection types cannot be modified, so an
  adapter function is attached to the type from the outside with
  :func:`register`. Lookup walks the type's MRO (including registered
  abstract base classes), so registering ``collections.abc.Mapping``
  covers every mapping.
- Types written for this package may subclass :class:`Container` and
  implement :meth:`Container.contains` themselves.

Usage::

    @register(MyBag)
    def _bag_contains(bag, value):
        return bag.count(value) > 0

    contains(MyBag([1, 2]), 2)  # True
"""

from abc import ABC, abstractmethod
from functools import singledispatch
from typing import Any, Callable, Generic, TypeVar

from containment import logger
from containment.errors import (
    ContainmentError,
    raise_type_mismatch,
    raise_unsupported,
)

V = TypeVar("V")

Adapter = Callable[[Any, Any], bool]


class Container(ABC, Generic[V]):
    """A collection of values of type ``V`` that can be queried for
    membership. Subclasses also get the ``in`` operator."""

    __slots__ = ()

    @abstractmethod
    def contains(self, value: V) -> bool:
        """Returns True iff an element equal to ``value`` is held. Must not
        mutate ``self`` or ``value``."""

    def __contains__(self, value):
        return contains(self, value)


@singledispatch
def _dispatch(container, value):
    raise_unsupported(container)


@_dispatch.register(Container)
def _container_contains(container, value):
    return container.contains(value)


def register(*types, func=None):
    """Attaches a containment adapter to one or more types.

    Parameters
    ----------
    *types : type
        The collection types the adapter handles. Abstract base classes are
        allowed and match every registered or real subclass.
    func : callable, optional
        ``func(container, value) -> bool``. If omitted, ``register`` returns
        a decorator.

    Returns
    -------
    callable
        The adapter, unchanged, so the decorator form stacks.
    """

    if not types:
        raise ValueError("register needs at least one type")

    def decorator(f):
        for cls in types:
            _dispatch.register(cls, f)
            logger.debug(
                f"Registered {f.__name__} for {cls.__module__}."
                f"{cls.__qualname__}"
            )
        return f

    if func is not None:
        return decorator(func)
    return decorator


def adapter_for(cls) -> Adapter:
    """Returns the adapter that handles instances of ``cls``."""

    return _dispatch.dispatch(cls)


def supports(obj) -> bool:
    """Whether ``obj`` (an instance or a type) has a containment adapter."""

    cls = obj if isinstance(obj, type) else type(obj)
    return adapter_for(cls) is not _dispatch.registry[object]


def contains(container: Any, value: Any) -> bool:
    """Returns True iff ``container`` holds an element (a key, for mappings)
    equal to ``value``.

    Parameters
    ----------
    container : object
        Any object with a registered adapter, or a :class:`Container`.
    value : object
        The value to look for.

    Returns
    -------
    bool

    Raises
    ------
    UnsupportedContainerError
        If no adapter is registered for ``type(container)``.
    ContainmentTypeError
        If ``value`` cannot be an element of ``container`` at all.
    """

    try:
        return bool(_dispatch(container, value))
    except ContainmentError:
        raise
    except TypeError as err:
        raise_type_mismatch(container, value, reason=str(err), cause=err)
