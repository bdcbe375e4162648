# model/tree_node.py

"""
TreeNode
========

Plain recursive tree used as a ready-made item type. Its one natural
recursion relation ("my children") is declared through `AutoTransIter`, so
`node.trans_iter()` walks the subtree without any further arguments.

`pre_order` and `level_order` are straightforward reference walks that do not
go through the traversal engines; tests compare engine output against them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from itertools import count
from random import Random
from typing import Hashable, Iterator, List, Optional, Tuple

from transiter import AutoTransIter


@dataclass(frozen=True, eq=True)
class TreeNode(AutoTransIter):
    label: Hashable
    children: Tuple[TreeNode, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # accept any iterable of children but store an immutable tuple
        object.__setattr__(self, "children", tuple(self.children))

    def recursion(self) -> Tuple[TreeNode, ...]:
        return self.children

    def count(self) -> int:
        """Number of nodes in this subtree, this node included."""
        return 1 + sum(child.count() for child in self.children)

    def pre_order(self) -> List[Hashable]:
        """Labels in pre-order: node first, then each child's subtree in order."""
        labels = [self.label]
        for child in self.children:
            labels.extend(child.pre_order())
        return labels

    def level_order(self) -> List[Hashable]:
        """Labels level by level, each level left to right."""
        labels: List[Hashable] = []
        level: List[TreeNode] = [self]
        while level:
            labels.extend(node.label for node in level)
            level = [child for node in level for child in node.children]
        return labels

    def labels(self) -> Iterator[Hashable]:
        """Labels of the whole subtree, breadth-first, produced by the engine."""
        return (node.label for node in self.trans_iter())

    # nodes are ordered by label so they can drive a priority traversal
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.label < other.label

    def __str__(self) -> str:
        if not self.children:
            return str(self.label)
        return f"{self.label}({', '.join(str(child) for child in self.children)})"


def random_tree(rng: Random, size: int, _labels: Optional[Iterator[int]] = None) -> TreeNode:
    """
    Build an arbitrary tree. A node of size budget `size` gets between 0 and
    `size // 2` children, each with half the budget, so the tree stays finite.
    Labels are consecutive integers assigned in pre-order, starting at 0.
    """
    labels = _labels if _labels is not None else count()
    label = next(labels)
    child_size = size // 2
    n_children = rng.randint(0, child_size) if child_size > 0 else 0
    children = tuple(random_tree(rng, child_size, labels) for _ in range(n_children))
    return TreeNode(label, children)
