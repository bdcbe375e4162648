# utils/logger.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Logging utility for traversal engines with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for traversal logging."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TransIterLogger:
    """Centralized logger for the traversal engines and their tooling."""

    def __init__(self, name: str = "transiter", level: LogLevel = LogLevel.WARNING):
        """Initialize the traversal logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TransIterFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> LogLevel:
        """Currently active level."""
        return LogLevel(self.logger.level)

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods. Positional args are formatted lazily by logging.
    def debug(self, message: str, *args, **kwargs):
        """Log debug message (per-item engine activity)."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, *args, **kwargs)

    # Specialized methods for traversal events
    def traversal_start(self, kind: str, mode: str, seeds: int):
        """Log the start of a traversal run."""
        self.info(f"=== Starting {kind} traversal ({mode}) ===")
        self.info(f"Initial items: {seeds}")

    def traversal_summary(self, produced: int, pending: int):
        """Log the state after consumption stopped."""
        self.info(f"\n>>> Produced {produced} item(s), {pending} still pending <<<")


class TransIterFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TransIterLogger] = None


def get_logger(name: str = "transiter") -> TransIterLogger:
    """Get or create the global traversal logger instance.

    Args:
        name: Logger name (default: "transiter"), only used on first call

    Returns:
        TransIterLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TransIterLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
