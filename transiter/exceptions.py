# transiter/exceptions.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Custom exceptions for traversal construction and configuration

"""Domain-specific exceptions for the traversal engines.

Running out of items is not an error: both generators follow the iterator
protocol and signal the end of the sequence with ``StopIteration``. Errors
raised by caller-supplied recursion functions are never wrapped here; they
reach the consumer unchanged.
"""


class TransIterError(RuntimeError):
    """Base class for errors raised by the traversal package."""

    pass


class UnknownModeError(TransIterError, ValueError):
    """Raised when a traversal mode name cannot be resolved.

    Used by ``Mode.from_name`` when a textual mode (for example from the
    command line) does not name one of the supported expansion disciplines.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown traversal mode: {name!r}")
