"""Logging configuration for termweight.

All package loggers are children of ``termweight``. ``setup_logging`` owns a
single named handler on that logger; calling it again retargets the handler
instead of stacking new ones, so repeated CLI invocations in one process
(tests, notebooks) always write to the current stream.
"""

import logging
import sys
from typing import IO, Final, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_FORMAT: Final = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME: Final = "termweight-console"

logger = logging.getLogger("termweight")


def _console_handler() -> logging.StreamHandler | None:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME and isinstance(handler, logging.StreamHandler):
            return handler
    return None


def setup_logging(
    level: LogLevel = "WARNING",
    verbose: bool = False,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure the termweight logger.

    Args:
        level: Base logging level
        verbose: If True, sets level to DEBUG
        stream: Destination stream (default: the current ``sys.stderr``)

    Returns:
        The configured package logger
    """
    numeric_level = logging.DEBUG if verbose else logging.getLevelName(level)
    target = stream if stream is not None else sys.stderr

    handler = _console_handler()
    if handler is None:
        handler = logging.StreamHandler(target)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    else:
        handler.setStream(target)

    handler.setLevel(numeric_level)
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger such as ``termweight.scoring.corpus``."""
    return logger.getChild(name)
