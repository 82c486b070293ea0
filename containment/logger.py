"""Logging for the containment package, built on ``loguru``.

The package logs adapter registration at DEBUG level and every rejected
query (type mismatch, unsupported container) at ERROR level just before
the corresponding exception is raised.

As a library, ``containment`` never touches the sinks of the host program
and is disabled on import. Hosts opt in either with
``logger.enable("containment")`` (records then flow to the host's own
sinks) or with :func:`configure_loggers`, which adds sinks of its own that
only ever see this package's records and that :func:`reset_loggers`
removes again.
"""

from contextlib import contextmanager
import sys
from warnings import warn

from loguru import logger


PACKAGE = "containment"

ALL_LEVELS = ["DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
NO_DEBUG_LEVELS = ["INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
STDOUT_LEVELS = ["DEBUG", "INFO", "SUCCESS", "WARNING"]


format_mapping = {
    "DEBUG": "[<lvl>D</>] <fg #808080>{name}</> <lvl>{message}</>",
    "INFO": "[<lvl>I</>] <lvl>{message}</>",
    "SUCCESS": "[<lvl>S</>] <lvl>{message}</>",
    "WARNING": "[<lvl>W</>] <lvl>{message}</>",
    "ERROR": "[<lvl>E</>] <fg #808080>{name}:{function}</> <lvl>{message}</>",
    "CRITICAL": "[<lvl>C</>] <lvl>{message}</>",
}

# Handler ids added by configure_loggers; nothing else is ever removed
_handler_ids = []
_enabled = False


def _from_package(record):
    name = record["name"] or ""
    return name == PACKAGE or name.startswith(f"{PACKAGE}.")


def package_filter(levels=None):
    """Returns a loguru filter accepting this package's records, optionally
    restricted to the given level names."""

    def f(record):
        if not _from_package(record):
            return False
        return levels is None or record["level"].name in levels

    return f


def _set_enabled(enabled):
    global _enabled
    if enabled:
        logger.enable(PACKAGE)
    else:
        logger.disable(PACKAGE)
    _enabled = enabled


def reset_loggers():
    """Removes the sinks added by :func:`configure_loggers` and disables the
    package logger. Sinks added by the host are left alone."""

    while _handler_ids:
        logger.remove(_handler_ids.pop())
    _set_enabled(False)


def configure_loggers(
    levels=ALL_LEVELS,
    enable_python_standard_warnings=False,
):
    """Enables the package logger and gives it its own sinks, one per level,
    each with a compact format. DEBUG through WARNING go to stdout, ERROR and
    CRITICAL to stderr. Calling it again replaces the previous set.

    Parameters
    ----------
    levels : list, optional
        The level names to emit. Anything not listed is dropped.
    enable_python_standard_warnings : bool, optional
        Also raise a dummy ``UserWarning`` on every ``logger.warning`` and
        ``logger.error`` call from this package, so tests can assert on
        logged errors with ``pytest.warns``.
    """

    reset_loggers()

    for level in levels:
        _handler_ids.append(
            logger.add(
                sys.stdout if level in STDOUT_LEVELS else sys.stderr,
                colorize=True,
                filter=package_filter([level]),
                format=format_mapping[level],
            )
        )

    if enable_python_standard_warnings:
        _handler_ids.append(
            logger.add(
                lambda _: warn("DUMMY WARNING"),
                level="WARNING",
                filter=package_filter(),
            )
        )
        _handler_ids.append(
            logger.add(
                lambda _: warn("DUMMY ERROR"),
                level="ERROR",
                filter=package_filter(),
            )
        )

    _set_enabled(True)


def DEBUG():
    """Quick helper to log everything, DEBUG included."""

    configure_loggers()


def DISABLE_DEBUG():
    """Quick helper to log everything except DEBUG."""

    configure_loggers(levels=NO_DEBUG_LEVELS)


@contextmanager
def disable_logger():
    """Context manager silencing the package logger, restoring whatever
    state it had on exit."""

    was_enabled = _enabled
    _set_enabled(False)
    try:
        yield None
    finally:
        _set_enabled(was_enabled)


@contextmanager
def _testing_mode():
    """Loggers configured as usual, but ``logger.warning`` and
    ``logger.error`` also raise "DUMMY WARNING" and "DUMMY ERROR". Used for
    unit tests."""

    configure_loggers(enable_python_standard_warnings=True)
    try:
        yield None
    finally:
        reset_loggers()


@contextmanager
def debug():
    DEBUG()
    try:
        yield None
    finally:
        reset_loggers()
