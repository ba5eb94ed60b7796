"""Logging for vconn.

Every module logs through ``get_logger(__name__)``, a child of the ``"vconn"``
logger. As a library, vconn only installs a ``NullHandler`` at import; records
go wherever the application's logging sends them. ``configure_logging()``
attaches a console handler for scripts and interactive use, taking its level
from the argument, the ``VCONN_LOG_LEVEL`` environment variable, or WARNING.
"""

import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "vconn"
LOG_LEVEL_ENV = "VCONN_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_package_logger = logging.getLogger(PACKAGE_LOGGER)
_package_logger.addHandler(logging.NullHandler())

# Handler installed by configure_logging(), replaced on reconfiguration
_console_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``vconn`` hierarchy.

    Names outside the hierarchy are nested under it, so ``get_logger("bench")``
    returns ``vconn.bench``.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or logging.WARNING
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.WARNING)
    return level


def configure_logging(
    level: Union[int, str, None] = None,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Send vconn records to a console (or custom) handler.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level number or name. Defaults to ``$VCONN_LOG_LEVEL``, then
            WARNING. Unknown names fall back to WARNING.
        handler: Handler to install. Defaults to a stderr ``StreamHandler``.
        format_string: Record format. Defaults to ``DEFAULT_FORMAT``.

    Returns:
        The installed handler.
    """
    global _console_handler

    if _console_handler is not None:
        _package_logger.removeHandler(_console_handler)

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    _package_logger.addHandler(handler)
    _package_logger.setLevel(_resolve_level(level))

    _console_handler = handler
    return handler


def set_log_level(level: Union[int, str]) -> None:
    """Set the threshold of the ``vconn`` logger and all its children."""
    _package_logger.setLevel(_resolve_level(level))


def enable_debug_logging() -> None:
    """Emit split-digraph construction, flow queries and Even-Tarjan progress."""
    set_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Remove the handler from ``configure_logging()`` and clear the level."""
    global _console_handler

    if _console_handler is not None:
        _package_logger.removeHandler(_console_handler)
        _console_handler = None
    _package_logger.setLevel(logging.NOTSET)
