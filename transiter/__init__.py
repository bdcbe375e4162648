# transiter/__init__.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Public API of the traversal engines

"""Lazy transitive traversal.

Given some initial items and a recursion function returning, for any item,
the items directly reachable from it, the generators in this package yield
every transitively reachable item, one per pull, in a selectable order.

Primary Components:
    TransIter: Queue-backed generator (breadth-first, depth-first,
        depth-first without sibling order)
    TransPrioQueue: Heap-backed generator yielding the greatest pending
        item first
    Mode: Expansion discipline of a TransIter
    IntoTransIter, AutoTransIter: Mixins adding traversal entry points to
        item types
    trans_iter_with, trans_prio_queue_with: Entry points for any value

Deduplication is not performed; a recursion function over a structure with
cycles or shared children must filter on its own.

Example:
    >>> from transiter import TransIter
    >>> tree = {1: [2, 3], 2: [4], 3: [], 4: []}
    >>> list(TransIter(1, tree.__getitem__).depth_first())
    [1, 2, 4, 3]
"""

from .adapters import AutoTransIter, IntoTransIter, trans_iter_with, trans_prio_queue_with
from .exceptions import TransIterError, UnknownModeError
from .frontier import HeapFrontier, QueueFrontier
from .mode import Mode
from .prio_queue import TransPrioQueue
from .trans_iter import TransIter

__all__ = [
    "TransIter",
    "TransPrioQueue",
    "Mode",
    "IntoTransIter",
    "AutoTransIter",
    "trans_iter_with",
    "trans_prio_queue_with",
    "QueueFrontier",
    "HeapFrontier",
    "TransIterError",
    "UnknownModeError",
]

__version__ = "0.2.0"
__description__ = "Lazy transitive traversal with breadth-first, depth-first and priority order"
