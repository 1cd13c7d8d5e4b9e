"""Logging setup shared by every steinerweb module.

All modules obtain their logger through :func:`get_logger`, which hangs it under
the single ``steinerweb`` root logger. The root logger owns the only handler,
so child loggers never print twice.
"""

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "steinerweb"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Attach one handler to the ``steinerweb`` root logger.

    Repeated calls are no-ops until :func:`reset_logging` runs.

    Args:
        level: Initial level of the root logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install. Takes precedence over ``stream``.
        stream: Stream for the default ``StreamHandler`` (stdout when None).
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog listens on the real root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the ``steinerweb`` root settings.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The logger, left at NOTSET so the root level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the root logger and of its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG (per-merge and per-round records)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return the package to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler and forget the configuration. Used by tests."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
