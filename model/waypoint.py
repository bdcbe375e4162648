# model/waypoint.py

"""
Waypoints and paths for range-limited shortest path search.

We may hop from one waypoint to any other as long as it is "in range", i.e.
closer than some threshold. A `Path` is ordered so that a SHORTER path
compares GREATER; feeding paths to a `TransPrioQueue` therefore always
extends the shortest known path next, which is Dijkstra's strategy.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from transiter import IntoTransIter, Mode, TransIter


@dataclass(frozen=True, slots=True)
class Waypoint(IntoTransIter):
    name: str
    x: int
    y: int

    def distance(self, other: Waypoint) -> int:
        """Euclidean distance, truncated to an integer."""
        return int(math.hypot(other.x - self.x, other.y - self.y))

    def trans_iter_with(
        self,
        recursion: Callable[[Path], Iterable[Path]],
        mode: Mode = Mode.BREADTH_FIRST,
    ) -> TransIter[Path]:
        """Traverse paths starting with the single-waypoint path [self]."""
        return Path((self,)).trans_iter_with(recursion, mode)


class Path(IntoTransIter):
    """Immutable sequence of waypoints, compared by (inverted) length."""

    __slots__ = ("waypoints", "_length")

    def __init__(self, waypoints: Iterable[Waypoint]):
        self.waypoints: Tuple[Waypoint, ...] = tuple(waypoints)
        if not self.waypoints:
            raise ValueError("A path needs at least one waypoint")
        self._length = sum(a.distance(b) for a, b in zip(self.waypoints, self.waypoints[1:]))

    @property
    def last(self) -> Waypoint:
        """The current end of the path."""
        return self.waypoints[-1]

    @property
    def length(self) -> int:
        """Sum of the hop distances."""
        return self._length

    def with_waypoint(self, waypoint: Waypoint) -> Path:
        """Return a copy of this path extended by `waypoint`."""
        return Path(self.waypoints + (waypoint,))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._length > other._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._length == other._length

    def __hash__(self) -> int:
        return hash(self._length)

    def __str__(self) -> str:
        return "".join(w.name for w in self.waypoints)

    def __repr__(self) -> str:
        return f"Path({self}, length={self._length})"


class InRangeExtension:
    """
    Recursion function extending a path by every candidate in range.

    The candidate set is owned by this object and shrinks with every call:
    a waypoint reached once is never offered again, which keeps the search
    finite. Because the priority generator expands the shortest path first,
    the first path to reach a waypoint is a shortest one to it.
    """

    def __init__(self, candidates: Iterable[Waypoint], max_range: int):
        self.remaining: List[Waypoint] = list(candidates)
        self.max_range = max_range

    def __call__(self, path: Path) -> List[Path]:
        current = path.last
        reached = [w for w in self.remaining if current.distance(w) < self.max_range]
        self.remaining = [w for w in self.remaining if w not in reached]
        return [path.with_waypoint(w) for w in reached]


def shortest_path(
    start: Waypoint,
    goal_name: str,
    candidates: Iterable[Waypoint],
    max_range: int,
) -> Optional[Path]:
    """
    Find the shortest range-limited path from `start` to the waypoint called
    `goal_name`, or None if it cannot be reached.
    """
    search = start.trans_prio_queue_with(InRangeExtension(candidates, max_range))
    return next((path for path in search if path.last.name == goal_name), None)
