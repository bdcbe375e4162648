# model/__init__.py

"""
Ready-made item types and recursion functions for the traversal engines:
trees with an intrinsic child relation, waypoints and paths for range-limited
shortest path search, and word extension over an alphabet. None of these are
needed to use the engines; they cover common shapes of traversal.
"""

from .tree_node import TreeNode, random_tree
from .waypoint import Waypoint, Path, InRangeExtension, shortest_path
from .words import append_each, append_each_up_to

__all__ = [
    "TreeNode",
    "random_tree",
    "Waypoint",
    "Path",
    "InRangeExtension",
    "shortest_path",
    "append_each",
    "append_each_up_to",
]
