"""Shared fixtures for the BSTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BSTree


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large degenerate-tree tests (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def empty_tree():
    """A tree with no elements."""
    return BSTree()


@pytest.fixture
def sample_tree():
    """Tree built by inserting 5, 3, 8, 1, 4 in that order.

    Shape:
            5
           / \\
          3   8
         / \\
        1   4
    """
    tree = BSTree()
    for value in (5, 3, 8, 1, 4):
        tree.add(value)
    return tree
