"""Logging configuration: one stderr handler on the root logger.

stdout belongs to command output, so log records never go there.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def setup_logging(level: int = logging.WARNING) -> logging.Handler:
    """Install (or replace) the stderr handler and set the root level.

    Safe to call more than once: only the handler installed here is swapped,
    handlers added by anything else stay in place.
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    _handler = handler
    return handler
