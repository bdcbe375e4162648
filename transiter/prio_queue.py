# transiter/prio_queue.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Heap-backed transitive iterator yielding the greatest pending item first

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Iterable, Iterator, TypeVar

from utils.logger import get_logger
from .frontier import HeapFrontier

if TYPE_CHECKING:
    from .trans_iter import TransIter

T = TypeVar("T")

logger = get_logger()


class TransPrioQueue(Generic[T]):
    """Best-first transitive iterator.

    Works like ``TransIter`` but keeps pending items in a max-heap: every
    call to ``next`` removes the greatest pending item (by the items' own
    ``<``), expands it through the recursion function and pushes the results
    back into the heap. The produced item is therefore never smaller than
    anything still pending at that moment.

    Unlike ``TransIter`` there is no parent-before-child guarantee across the
    whole sequence beyond the fact that an item is only discovered once its
    parent was produced; a child comparing greater than an older pending
    item overtakes it.
    """

    def __init__(self, initial: T, recursion: Callable[[T], Iterable[T]]) -> None:
        self._recursion = recursion
        self._frontier: HeapFrontier[T] = HeapFrontier((initial,))
        logger.debug("TransPrioQueue started at %r", initial)

    @classmethod
    def from_iterable(
        cls,
        initials: Iterable[T],
        recursion: Callable[[T], Iterable[T]],
    ) -> TransPrioQueue[T]:
        """Create a priority generator starting from several items.

        The items are bulk-inserted and heapified once.
        """
        instance = cls.__new__(cls)
        instance._recursion = recursion
        instance._frontier = HeapFrontier(initials)
        logger.debug("TransPrioQueue started with %d initial item(s)", len(instance._frontier))
        return instance

    @classmethod
    def from_trans_iter(cls, trans_iter: TransIter[T]) -> TransPrioQueue[T]:
        """Take over the pending items and recursion of ``trans_iter``.

        Equivalent to ``trans_iter.into_prio_queue()``.
        """
        return trans_iter.into_prio_queue()

    @property
    def pending(self) -> int:
        """Number of discovered items not produced yet."""
        return len(self._frontier)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._frontier:
            raise StopIteration

        item = self._frontier.pop_max()
        added = self._frontier.push(self._recursion(item))

        logger.debug(
            "Expanded %r into %d item(s) (priority, %d pending)",
            item, added, len(self._frontier),
        )
        return item

    def __repr__(self) -> str:
        return f"TransPrioQueue(pending={len(self._frontier)})"
