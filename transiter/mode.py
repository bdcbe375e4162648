# transiter/mode.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Expansion disciplines for the queue-backed traversal

from enum import Enum, auto

from .exceptions import UnknownModeError


class Mode(Enum):
    """Expansion discipline of a ``TransIter``.

    All modes remove pending items from the front of the queue. They differ
    in where, and in which order, the children of an expanded item are put
    back:

    Values:
        BREADTH_FIRST: children appended at the back in recursion-output
            order; items come out level by level.
        DEPTH_FIRST: children inserted at the front so that the first child
            is next; yields the pre-order of the discovery tree. The
            recursion output is materialised into a list to do this.
        DEPTH_FIRST_UNORDERED: children inserted at the front one at a time,
            without materialising. Sibling order ends up reversed; that order
            is a consequence of the insertion strategy and not a guarantee.
    """

    BREADTH_FIRST = auto()
    DEPTH_FIRST = auto()
    DEPTH_FIRST_UNORDERED = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_name(cls, name: str) -> "Mode":
        """Resolve a mode from its name.

        Case, hyphens and underscores are interchangeable, so
        ``"depth-first"``, ``"DEPTH_FIRST"`` and ``"Depth_First"`` all name
        ``Mode.DEPTH_FIRST``.

        Raises:
            UnknownModeError: ``name`` does not name a mode
        """
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise UnknownModeError(name) from None
