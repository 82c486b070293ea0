"""Exceptions raised when a containment query is malformed.

A value that is simply absent is never an error; ``contains`` returns
``False``. These exceptions cover the cases where the question itself does
not make sense, such as asking a ``str`` whether it holds an ``int``.
"""

from containment import logger


class ContainmentError(Exception):
    """Base class for every error raised by this package."""


class ContainmentTypeError(ContainmentError, TypeError):
    """The queried value's type is incompatible with the element type of
    the container."""


class UnsupportedContainerError(ContainmentTypeError):
    """No containment adapter is registered for the container's type."""


def _type_name(obj):
    return type(obj).__qualname__


def raise_type_mismatch(container, value, reason=None, cause=None):
    """Logs and raises a :class:`ContainmentTypeError`.

    Parameters
    ----------
    container : object
        The container that was queried.
    value : object
        The offending query value.
    reason : str, optional
        A short human-readable explanation appended to the message.
    cause : BaseException, optional
        The original exception, chained as ``__cause__``.

    Raises
    ------
    ContainmentTypeError
        Always.
    """

    msg = (
        f"cannot query {_type_name(container)} for a value of type "
        f"{_type_name(value)}"
    )
    if reason is not None:
        msg = f"{msg}: {reason}"
    logger.error(msg)
    raise ContainmentTypeError(msg) from cause


def raise_unsupported(container):
    """Logs and raises an :class:`UnsupportedContainerError`."""

    msg = (
        f"{_type_name(container)} has no registered containment adapter; "
        "use containment.register to add one"
    )
    logger.error(msg)
    raise UnsupportedContainerError(msg)
