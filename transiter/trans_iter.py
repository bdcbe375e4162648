# transiter/trans_iter.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Queue-backed transitive iterator with selectable expansion mode

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from utils.logger import get_logger
from .frontier import QueueFrontier
from .mode import Mode
from .prio_queue import TransPrioQueue

T = TypeVar("T")

Recursion = Callable[[T], Iterable[T]]

logger = get_logger()


class TransIter(Generic[T]):
    """Lazy iterator over everything transitively reachable from some items.

    The iterator yields the initial items and every item reachable from them
    through repeated application of the recursion function. Each call to
    ``next`` removes one pending item, calls the recursion function on it
    exactly once, queues the returned items according to the active
    ``Mode`` and returns the removed item. An item is therefore always
    produced before anything discovered by expanding it.

    No deduplication takes place: an item reachable along two paths is
    produced twice, and a recursion function describing a cycle yields an
    infinite sequence. Bounding the sequence is up to the consumer, e.g.
    with ``itertools.islice``.

    Attributes:
        mode: Expansion discipline used for the next expansion
    """

    def __init__(
        self,
        initial: T,
        recursion: Recursion[T],
        mode: Mode = Mode.BREADTH_FIRST,
    ) -> None:
        """Create an iterator starting from a single item.

        Args:
            initial: First item to produce
            recursion: Function mapping an item to the items directly
                reachable from it
            mode: Expansion discipline (breadth-first by default)
        """
        self._recursion = recursion
        self._frontier: QueueFrontier[T] = QueueFrontier((initial,))
        self.mode = mode
        logger.debug("TransIter started at %r", initial)

    @classmethod
    def from_iterable(
        cls,
        initials: Iterable[T],
        recursion: Recursion[T],
        mode: Mode = Mode.BREADTH_FIRST,
    ) -> TransIter[T]:
        """Create an iterator starting from several items.

        The initial items are queued in the order given.
        """
        instance = cls.__new__(cls)
        instance._recursion = recursion
        instance._frontier = QueueFrontier(initials)
        instance.mode = mode
        logger.debug("TransIter started with %d initial item(s)", len(instance._frontier))
        return instance

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        if not isinstance(mode, Mode):
            raise TypeError(f"Expected a Mode, got {type(mode).__name__}")
        self._mode = mode
        logger.debug("TransIter mode set to %s (%d pending)", mode, len(self._frontier))

    def breadth_first(self) -> TransIter[T]:
        """Switch to breadth-first expansion and return this iterator."""
        self.mode = Mode.BREADTH_FIRST
        return self

    def depth_first(self) -> TransIter[T]:
        """Switch to order-preserving depth-first expansion and return this iterator."""
        self.mode = Mode.DEPTH_FIRST
        return self

    def depth_first_unordered(self) -> TransIter[T]:
        """Switch to depth-first expansion without sibling order and return this iterator."""
        self.mode = Mode.DEPTH_FIRST_UNORDERED
        return self

    @property
    def pending(self) -> int:
        """Number of discovered items not produced yet."""
        return len(self._frontier)

    def into_prio_queue(self) -> TransPrioQueue[T]:
        """Continue this traversal as a priority-ordered one.

        All pending items and the recursion function move into a new
        ``TransPrioQueue``. This iterator is left empty, so it is exhausted
        afterwards. Pending items must be totally ordered among each other.

        Returns:
            Priority generator over the remaining frontier
        """
        pending = len(self._frontier)
        queue = TransPrioQueue.from_iterable(self._frontier.drain(), self._recursion)
        logger.debug("Moved %d pending item(s) from TransIter into TransPrioQueue", pending)
        return queue

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._frontier:
            raise StopIteration

        item = self._frontier.pop_front()
        children = self._recursion(item)

        if self._mode is Mode.BREADTH_FIRST:
            added = self._frontier.push_back(children)
        elif self._mode is Mode.DEPTH_FIRST:
            added = self._frontier.push_front(children)
        else:
            added = self._frontier.push_front_unordered(children)

        logger.debug(
            "Expanded %r into %d item(s) (%s, %d pending)",
            item, added, self._mode, len(self._frontier),
        )
        return item

    def __repr__(self) -> str:
        return f"TransIter(mode={self._mode}, pending={len(self._frontier)})"
