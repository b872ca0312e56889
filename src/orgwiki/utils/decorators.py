#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/utils/decorators.py
"""Timing helpers for the export pipeline."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (doku)")

    Examples
    --------
        >>> with debug_timer(logger, "Indexing"):
        ...     tree = DocumentTree(document)

    Notes
    -----
    Nothing is measured when DEBUG logging is disabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
