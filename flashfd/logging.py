"""Logging utilities for flashfd.

Every solver module obtains its logger through :func:`get_logger` so that the
whole package can be silenced or made verbose from a single call.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Quiet unless the caller asks for more
_DEFAULT_LEVEL = logging.WARNING

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the package logger for a module.

    Loggers live under the ``flashfd.`` namespace and are cached, so calling
    this twice with the same name never stacks handlers.

    Args:
        name: Module name, usually ``__name__``. ``None`` gives the package
            root logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from flashfd.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("grid adjusted")
    """
    if name is None:
        name = "flashfd"

    if name == "flashfd" or name.startswith("flashfd."):
        logger_name = name
    else:
        logger_name = f"flashfd.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every flashfd logger, including ones created later.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ``"INFO"``...).
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Reconfigure level, format and destination of all flashfd loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the package default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)
    target = sys.stderr if stream is None else stream

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(target)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
