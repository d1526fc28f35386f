"""
Utility functions for the dokind library.
"""

import logging
import os
from typing import Any

# Environment variable to control debug mode
DEBUG_KINDS = os.environ.get("DOKIND_DEBUG", "").lower() in ("1", "true", "yes")


def type_name(target: Any) -> str:
    """Readable name for classes, instances and witnesses in messages."""
    if isinstance(target, type):
        return target.__qualname__
    return type(target).__qualname__


def report_misuse(logger: logging.Logger, error: Exception) -> None:
    """Log a programming error loudly when DOKIND_DEBUG is on."""
    if DEBUG_KINDS:
        logger.error("%s: %s", type(error).__name__, error)
