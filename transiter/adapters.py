# transiter/adapters.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Entry points attaching transitive traversal to arbitrary item types

"""Entry points for starting a traversal from an item.

Three levels of convenience are offered:

* ``trans_iter_with`` / ``trans_prio_queue_with`` module functions work with
  any value, including builtins such as ``int`` or ``str``.
* ``IntoTransIter`` is a mixin giving an item type the same two entry points
  as methods. Types may override ``trans_iter_with`` to start from a
  different item (e.g. a waypoint starting a traversal over paths); the
  priority variant follows automatically.
* ``AutoTransIter`` is for item types with one natural recursion relation,
  such as "the children of a tree node". The type implements ``recursion``
  once and callers use the zero-argument ``trans_iter()``.

Example:
    >>> from transiter import trans_iter_with
    >>> from itertools import islice
    >>> words = trans_iter_with("", lambda w: [w + c for c in "ab"])
    >>> list(islice(words, 5))
    ['', 'a', 'b', 'aa', 'ab']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, TypeVar

from .mode import Mode
from .prio_queue import TransPrioQueue
from .trans_iter import TransIter

T = TypeVar("T")


def trans_iter_with(
    item: T,
    recursion: Callable[[T], Iterable[T]],
    mode: Mode = Mode.BREADTH_FIRST,
) -> TransIter[T]:
    """Start a ``TransIter`` at ``item``."""
    return TransIter(item, recursion, mode)


def trans_prio_queue_with(
    item: T,
    recursion: Callable[[T], Iterable[T]],
) -> TransPrioQueue[T]:
    """Start a ``TransPrioQueue`` at ``item``.

    Built as a default-mode ``TransIter`` converted before its first pull.
    """
    return trans_iter_with(item, recursion).into_prio_queue()


class IntoTransIter:
    """Mixin for item types that can start a traversal."""

    def trans_iter_with(
        self,
        recursion: Callable[[Any], Iterable[Any]],
        mode: Mode = Mode.BREADTH_FIRST,
    ) -> TransIter:
        """Start a ``TransIter`` at this item.

        Subclasses overriding this method may yield items of another type
        than their own, as long as ``recursion`` accepts those.
        """
        return TransIter(self, recursion, mode)

    def trans_prio_queue_with(self, recursion: Callable[[Any], Iterable[Any]]) -> TransPrioQueue:
        """Start a ``TransPrioQueue`` at this item."""
        return self.trans_iter_with(recursion).into_prio_queue()


class AutoTransIter(IntoTransIter, ABC):
    """Mixin for item types with one canonical recursion relation.

    Subclasses implement ``recursion``; the relation is thereby selected by
    the item's class when the traversal starts.
    """

    @abstractmethod
    def recursion(self) -> Iterable:
        """Items directly reachable from this one."""

    def trans_iter(self, mode: Mode = Mode.BREADTH_FIRST) -> TransIter:
        """Start a ``TransIter`` at this item using the type's own recursion."""
        return self.trans_iter_with(type(self).recursion, mode)

    def trans_prio_queue(self) -> TransPrioQueue:
        """Start a ``TransPrioQueue`` at this item using the type's own recursion."""
        return self.trans_prio_queue_with(type(self).recursion)
