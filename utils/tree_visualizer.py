# utils/tree_visualizer.py

"""
Discovery tree recording and Graphviz export.

Wrap a recursion function in a `DiscoveryRecorder` before handing it to a
generator; every expansion is recorded as (parent, child) edges. Since the
generators call the recursion function exactly once per produced item, in
production order, the recorded expansions describe exactly the part of the
traversal that was consumed. `discovery_digraph` turns that record into a
`graphviz.Digraph`. Nodes are keyed by discovery index, not by item value,
so an item reached along two paths shows up twice, just as the generators
produce it twice.
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple

from graphviz import Digraph

from transiter.frontier import HeapFrontier, QueueFrontier
from transiter.mode import Mode
from utils.logger import get_logger

logger = get_logger()


class DiscoveryRecorder:
    """Recursion function wrapper recording every expansion."""

    def __init__(self, recursion: Callable[[Any], Iterable[Any]]):
        self.recursion = recursion
        self.expansions: List[Tuple[Any, List[Any]]] = []

    def __call__(self, item: Any) -> List[Any]:
        children = list(self.recursion(item))
        self.expansions.append((item, children))
        return children

    @property
    def edges(self) -> List[Tuple[Any, Any]]:
        """(parent, child) pairs in discovery order."""
        return [(parent, child) for parent, children in self.expansions for child in children]

    def __len__(self) -> int:
        return len(self.expansions)


class _PendingNode:
    """Heap entry for priority replay: a node index ordered by its item."""

    __slots__ = ("index", "item")

    def __init__(self, index: int, item: Any):
        self.index = index
        self.item = item

    def __lt__(self, other: "_PendingNode") -> bool:
        return self.item < other.item


def discovery_digraph(
    recorder: DiscoveryRecorder,
    roots: Iterable[Any],
    label: Callable[[Any], str] = str,
    produced: Optional[int] = None,
    mode: Optional[Mode] = Mode.BREADTH_FIRST,
) -> Digraph:
    """
    Build the discovery tree of a traversal.

    The expansions recorded by `recorder` are replayed against the initial
    items through the same frontier discipline the generator used, so each
    expansion lands on the node the generator actually produced even when
    the same object is pending more than once. Nodes that were produced are
    filled, nodes only discovered (still pending) are dashed.

    Args:
        recorder: Recorder that served as the generator's recursion function
        roots: The generator's initial items, in order
        label: Node label formatter
        produced: Number of expansions to draw (default: all recorded)
        mode: The generator's mode, or None for a TransPrioQueue started
            from `roots`. A mode switched mid-traversal is not replayed.

    Returns:
        Digraph of the discovery tree; nothing is rendered to disk
    """
    dot = Digraph(comment="Discovery tree")
    dot.attr(rankdir="TB")

    items: List[Any] = []
    expanded: List[bool] = []

    def add_node(item: Any) -> int:
        items.append(item)
        expanded.append(False)
        return len(items) - 1

    root_indices = [add_node(root) for root in roots]
    if mode is None:
        heap = HeapFrontier(_PendingNode(i, items[i]) for i in root_indices)

        def pop() -> int:
            return heap.pop_max().index

        def push(indices: List[int]) -> int:
            return heap.push(_PendingNode(i, items[i]) for i in indices)

        pending = heap
    else:
        queue = QueueFrontier(root_indices)
        pop = queue.pop_front
        if mode is Mode.BREADTH_FIRST:
            push = queue.push_back
        elif mode is Mode.DEPTH_FIRST:
            push = queue.push_front
        else:
            push = queue.push_front_unordered
        pending = queue

    expansions = recorder.expansions if produced is None else recorder.expansions[:produced]
    for parent_item, children in expansions:
        parent = pop() if pending else None
        if parent is None or items[parent] is not parent_item:
            logger.warning(
                f"Recorded expansion of {label(parent_item)} does not match the "
                f"{mode or 'priority'} replay; remaining expansions skipped"
            )
            break
        expanded[parent] = True
        child_indices = [add_node(child) for child in children]
        for child_index in child_indices:
            dot.edge(f"n{parent}", f"n{child_index}")
        push(child_indices)

    for index, item in enumerate(items):
        if expanded[index]:
            dot.node(f"n{index}", label(item), style="filled", fillcolor="palegreen")
        else:
            dot.node(f"n{index}", label(item), style="dashed")

    logger.debug(f"Discovery tree built with {len(items)} node(s) from {len(expansions)} expansion(s)")
    return dot
