"""Centralized logging configuration for GraphKit.

All package modules obtain loggers through :func:`get_logger`, which attaches
them below a single ``graphkit`` root logger. The root logger is configured
once on import; its level can be preset with the ``GRAPHKIT_LOG_LEVEL``
environment variable (e.g. ``DEBUG``) and changed at runtime with
:func:`set_global_log_level`.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "graphkit"
LOG_LEVEL_ENV_VAR = "GRAPHKIT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def _level_from_env(default: int) -> int:
    """Resolve a log level from ``GRAPHKIT_LOG_LEVEL``, falling back to ``default``."""
    raw = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure the ``graphkit`` logger with exactly one handler.

    Only the first call has an effect; :func:`reset_logging` re-arms it.

    Args:
        level: Level for the ``graphkit`` logger. ``None`` reads
            ``GRAPHKIT_LOG_LEVEL`` and falls back to INFO.
        format_string: ``logging.Formatter`` pattern; ``None`` uses
            ``DEFAULT_FORMAT``.
        handler: Destination for records; ``None`` writes to stdout.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = _level_from_env(logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Records also reach the process root logger (and pytest caplog)
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``graphkit`` root configuration.

    Args:
        name: Logger name, usually ``__name__`` of the calling module.

    Returns:
        Logger instance with level NOTSET so the root level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the ``graphkit`` logger and each attached handler.

    Child loggers are NOTSET, so they pick the new level up immediately.
    """
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show DEBUG records from every graphkit module."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Drop back to INFO so per-run algorithm details are hidden."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Forget the current handler and level; the next setup starts over."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
