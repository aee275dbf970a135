"""Logging helpers for calcprim.

calcprim is silent by default (NullHandler on the package logger).
Enable output explicitly:

    import calcprim
    calcprim.enable_console_logging(level="DEBUG")

or from the environment:

    CALCPRIM_LOGGING=DEBUG  ->  calcprim.configure_from_env()
"""

import logging
import os
from typing import Literal, Union

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "calcprim"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close every handler on the package logger except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: Union[LogLevel, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send calcprim log records to stderr.

    Replaces any handler installed by an earlier call.

    Returns:
        The created StreamHandler.
    """
    _clear_handlers()
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))
    logger.addHandler(handler)
    return handler


def disable_logging() -> None:
    """Drop all calcprim handlers; the library goes quiet again."""
    _clear_handlers()
    _get_logger().setLevel(logging.NOTSET)


def set_level(level: Union[LogLevel, int]) -> None:
    """Change the calcprim logger level without touching its handlers."""
    _get_logger().setLevel(_get_level(level))


def configure_from_env() -> None:
    """Enable console logging if CALCPRIM_LOGGING names a level."""
    level = os.environ.get("CALCPRIM_LOGGING")
    if level:
        enable_console_logging(level=level.upper())
