"""
Process-wide logger for text filters.

Filters log through the standard ``logging`` hierarchy.  When a requested
logger has no handler anywhere on its propagation path (the host application
configured nothing for it), a stdout handler is attached to that logger so
filter messages are never lost.  This holds for filters declared outside the
``textfilter`` package too.
"""

from __future__ import annotations

import logging
import sys

from .config import get_settings

_ROOT_NAME = "textfilter"


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    return handler


def get_logger(name: str = _ROOT_NAME) -> logging.Logger:
    """Return *name*'s logger, installing the stdout fallback if it has no handler."""
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        logger.addHandler(_stdout_handler())
        if logger.level == logging.NOTSET:
            logger.setLevel(get_settings().log_level)
    return logger
