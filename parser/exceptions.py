# parser/exceptions.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Custom exceptions for tree literal parsing

"""Domain-specific exceptions for tree literal processing."""


class ParseError(RuntimeError):
    """Exception raised when a tree literal cannot be parsed.

    Covers empty input, characters outside the literal alphabet and token
    sequences that do not form a tree.
    """

    pass
