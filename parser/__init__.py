# parser/__init__.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Tree literal parsing

"""Tree literal parsing.

Turns compact literals like ``root(a(c, d), b)`` into ``TreeNode`` trees so a
traversal can be tried out without writing a recursion function. A node is
a label, optionally followed by its children in parentheses.

Example:
    >>> from parser import parse_tree
    >>> [n.label for n in parse_tree("1(2(4), 3)").trans_iter()]
    [1, 2, 3, 4]
"""

from model.tree_node import TreeNode
from utils.logger import get_logger
from .exceptions import ParseError
from .grammar import _TreeParser


def parse_tree(source: str) -> TreeNode:
    """Parse a tree literal into its root ``TreeNode``.

    Uses a fresh parser instance for each call.

    Args:
        source: Tree literal to parse

    Returns:
        Root node of the tree

    Raises:
        ParseError: Literal is empty or malformed
    """
    get_logger().debug(f"Parsing tree: {source}")
    return _TreeParser().parse(source)


__all__ = ["parse_tree", "ParseError"]
