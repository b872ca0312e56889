"""Logging setup for the orgwiki command line.

Library modules only create module-level loggers under the ``orgwiki``
namespace. Handlers are attached here, to the package logger, by entry
points such as the CLI; importing orgwiki never configures logging.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "orgwiki"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed by configure_logging so a second call replaces them
_HANDLER_MARKER = "_orgwiki_handler"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name such as ``"info"`` into its number.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach console and optional file handlers to the ``orgwiki`` logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "WARNING").
    log_file : str, optional
        Also append log records to this file.
    trace_mode : bool, default False
        Include timestamps and logger names, for following an export
        step by step.
    stream : IO[str], optional
        Console stream, defaults to standard error.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = resolve_level(log_level)
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    console_handler = _mark(logging.StreamHandler(stream or sys.stderr))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = _mark(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            logger.debug("Logging to file: %s", log_file)

    return logger
