# transiter/frontier.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Frontier containers holding discovered but not yet produced items

"""Frontier containers for the traversal engines.

A frontier holds the items that were discovered by expanding some earlier
item but have not been produced yet. ``QueueFrontier`` backs the sequence
generator and supports insertion at either end; ``HeapFrontier`` backs the
priority generator and always hands out its greatest item.

Neither container is thread-safe; each one is owned by exactly one
generator.
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import Deque, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class QueueFrontier(Generic[T]):
    """Double-ended queue of pending items."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: Deque[T] = deque(items)

    def pop_front(self) -> T:
        """Remove and return the front item.

        Raises:
            IndexError: the frontier is empty
        """
        return self._items.popleft()

    def push_back(self, items: Iterable[T]) -> int:
        """Append items at the back in iteration order."""
        before = len(self._items)
        self._items.extend(items)
        return len(self._items) - before

    def push_front(self, items: Iterable[T]) -> int:
        """Insert items at the front, keeping their order.

        The iterable is materialised first so it can be inserted in reverse;
        afterwards the first item of ``items`` is at the very front.
        """
        batch = list(items)
        self._items.extendleft(reversed(batch))
        return len(batch)

    def push_front_unordered(self, items: Iterable[T]) -> int:
        """Insert items at the front one at a time.

        Each item goes in front of the one inserted before it, so the last
        item of ``items`` ends up at the very front.
        """
        before = len(self._items)
        self._items.extendleft(items)
        return len(self._items) - before

    def drain(self) -> Iterator[T]:
        """Remove and yield every pending item, front to back."""
        while self._items:
            yield self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"QueueFrontier({list(self._items)!r})"


class _MaxFirst(Generic[T]):
    """Heap entry inverting the item order, turning ``heapq`` into a max-heap."""

    __slots__ = ("item",)

    def __init__(self, item: T) -> None:
        self.item = item

    def __lt__(self, other: _MaxFirst[T]) -> bool:
        return other.item < self.item


class HeapFrontier(Generic[T]):
    """Binary max-heap of pending items, keyed by the items' own ``<``.

    Items must be totally ordered among each other. Ties are broken by the
    heap's own layout; no insertion counter is involved.
    """

    __slots__ = ("_heap",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap: List[_MaxFirst[T]] = [_MaxFirst(item) for item in items]
        heapq.heapify(self._heap)

    def pop_max(self) -> T:
        """Remove and return the greatest item.

        Raises:
            IndexError: the frontier is empty
        """
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        """Return the greatest item without removing it.

        Raises:
            IndexError: the frontier is empty
        """
        return self._heap[0].item

    def push(self, items: Iterable[T]) -> int:
        """Insert every item of ``items``."""
        count = 0
        for item in items:
            heapq.heappush(self._heap, _MaxFirst(item))
            count += 1
        return count

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        """Iterate pending items in heap layout order (not sorted)."""
        return (entry.item for entry in self._heap)

    def __repr__(self) -> str:
        return f"HeapFrontier(size={len(self._heap)})"
