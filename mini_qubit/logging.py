"""Logging helpers for mini_qubit.

Every module asks for its logger through :func:`get_logger` so all loggers
live under the ``mini_qubit`` namespace and share one stderr format.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict = {}


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``mini_qubit.<name>`` logger, creating it on first use.

    Args:
        name: Usually ``__name__`` of the caller. ``None`` gives the package logger.
    """
    if name is None:
        name = "mini_qubit"
    logger_name = name if name.startswith("mini_qubit") else f"mini_qubit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every mini_qubit logger, including ones created later.

    Accepts ``logging.DEBUG`` style ints or names such as ``"info"``.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(level: Union[int, str] = logging.WARNING, stream=None) -> None:
    """Replace the handlers of all mini_qubit loggers with one writing to ``stream``."""
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(_FORMAT)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    _DEFAULT_LEVEL = level
