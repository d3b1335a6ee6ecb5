"""
Logging setup for the netlist packages.

Handlers are attached to the ``netcore`` and ``netgen`` package loggers
rather than the root logger, so an application embedding the netlist
keeps control of its own logging configuration.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGERS = ("netcore", "netgen")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_installed: list[logging.Handler] = []


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  stream=None) -> list[logging.Handler]:
    """Route netlist construction logs to a stream and optional file.

    Calling again replaces the handlers from the previous call.

    Args:
        level: Level applied to the package loggers.
        log_file: Optional log file path.
        stream: Stream for the console handler (defaults to stdout).

    Returns:
        The handlers that were installed.
    """
    reset_logging()
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in handlers:
            logger.addHandler(handler)

    _installed.extend(handlers)
    return handlers


def reset_logging() -> None:
    """Remove and close the handlers installed by setup_logging."""
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        for handler in _installed:
            logger.removeHandler(handler)
    for handler in _installed:
        handler.close()
    _installed.clear()
