# utils/__init__.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Utility module exports

from .logger import (
    LogLevel,
    TransIterLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "TransIterLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
