"""Core data structures for BSTreeLib.

This module contains the tree node, the tree itself and the traversal
iterators. Everything else in the library is built on these.
"""

from .node import BSTreeNode
from .iterator import (
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)
from .tree import BSTree

__all__ = [
    "BSTreeNode",
    "BSTree",
    "TreeIterator",
    "InorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
]
