# tests/conftest.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the transiter tests.

The configuration handles:
- Python path setup for module imports
- Test environment verification
- Common fixtures: the small reference tree and recursion functions
"""

import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before running tests."""
    try:
        import transiter
        import model
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def small_tree():
    """Tree 1 -> [2 -> [4], 3], as a TreeNode.

    Returns:
        TreeNode: Root of the tree
    """
    from model.tree_node import TreeNode

    return TreeNode(1, [TreeNode(2, [TreeNode(4)]), TreeNode(3)])


@pytest.fixture
def small_graph():
    """Adjacency mapping of the same tree, for plain-function recursion.

    Returns:
        Dict[int, List[int]]: children per node id
    """
    return {1: [2, 3], 2: [4], 3: [], 4: []}


@pytest.fixture
def abc_extension():
    """Recursion appending each of "a", "b", "c" to a word."""
    return lambda word: [word + c for c in "abc"]
