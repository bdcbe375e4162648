# test/model_tests/test_waypoint_scenarios.py


import pytest

from model.waypoint import InRangeExtension, Path, Waypoint, shortest_path
from transiter import TransIter, TransPrioQueue

S = Waypoint("S", 0, 0)

WAYPOINTS = [
    Waypoint("A", 45, 59),
    Waypoint("B", 68, 69),
    Waypoint("C", 32, 78),
    Waypoint("D", 15, 65),
    Waypoint("E", 45, 12),
    Waypoint("F", 98, 80),
]


class TestWaypointScenarios:
    """
    Test suite for waypoints, paths and the range-limited shortest path
    search built on the priority traversal.
    """

    def test_01_distance_is_truncated(self):
        assert S.distance(Waypoint("E", 45, 12)) == 46
        assert Waypoint("A", 45, 59).distance(Waypoint("B", 68, 69)) == 25
        assert S.distance(S) == 0

    def test_02_path_length_and_last(self):
        p = Path([S, Waypoint("X", 3, 4), Waypoint("Y", 3, 10)])
        assert p.length == 11
        assert p.last.name == "Y"
        assert str(p) == "SXY"

    def test_03_with_waypoint_returns_new_path(self):
        p = Path([S])
        q = p.with_waypoint(Waypoint("X", 3, 4))
        assert str(p) == "S"
        assert str(q) == "SX"
        assert q.length == 5

    def test_04_empty_path_rejected(self):
        with pytest.raises(ValueError):
            Path([])

    def test_05_shorter_path_is_greater(self):
        short = Path([S, Waypoint("X", 3, 4)])
        long = Path([S, Waypoint("Y", 30, 40)])
        assert long < short
        assert not (short < long)
        assert Path([S, Waypoint("Z", 4, 3)]) == short

    def test_06_in_range_extension_shrinks_candidates(self):
        extend = InRangeExtension(WAYPOINTS, 50)
        first = extend(Path([S]))
        assert [str(p) for p in first] == ["SE"]
        assert [w.name for w in extend.remaining] == ["A", "B", "C", "D", "F"]
        second = extend(first[0])
        assert [str(p) for p in second] == ["SEA"]
        assert extend(Path([S])) == []

    def test_07_waypoint_starts_traversal_over_paths(self):
        it = S.trans_iter_with(InRangeExtension(WAYPOINTS, 50))
        assert isinstance(it, TransIter)
        first = next(it)
        assert isinstance(first, Path)
        assert str(first) == "S"

    def test_08_waypoint_priority_entry_point(self):
        queue = S.trans_prio_queue_with(InRangeExtension(WAYPOINTS, 50))
        assert isinstance(queue, TransPrioQueue)
        produced = [(str(p), p.length) for p in queue]
        assert produced[:6] == [
            ("S", 0), ("SE", 46), ("SEA", 93), ("SEAC", 116), ("SEAB", 118), ("SEAD", 123),
        ]

    def test_09_shortest_path_to_f(self):
        path = shortest_path(S, "F", WAYPOINTS, 50)
        assert str(path) == "SEABF"
        assert path.length == 149

    def test_10_unreachable_goal(self):
        assert shortest_path(S, "F", WAYPOINTS, 40) is None

    def test_11_unknown_goal(self):
        assert shortest_path(S, "Q", WAYPOINTS, 50) is None

    def test_12_direct_hop_when_in_range(self):
        path = shortest_path(S, "F", WAYPOINTS, 200)
        assert str(path) == "SF"
        assert path.length == S.distance(WAYPOINTS[-1])
