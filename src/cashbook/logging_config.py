"""Logging setup for cashbook.

Engine modules log through ``logging.getLogger(__name__)``; everything lives
under the ``cashbook`` namespace so a single handler configures the tree.
"""

import logging
import sys
import threading
from typing import Any, Optional

_LOGGER_PREFIX = "cashbook"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int = logging.WARNING,
    stream: Any = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure the cashbook logger hierarchy (idempotent)."""
    global _configured
    with _lock:
        root_logger = logging.getLogger(_LOGGER_PREFIX)
        root_logger.setLevel(level)
        if _configured:
            return
        _configured = True

    h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
    h.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(h)
    root_logger.propagate = False


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
        root_logger = logging.getLogger(_LOGGER_PREFIX)
        for h in list(root_logger.handlers):
            root_logger.removeHandler(h)
        root_logger.setLevel(logging.NOTSET)
        root_logger.propagate = True
