"""BSTreeLib - Unbalanced Binary Search Tree Library.

BSTreeLib provides a generic binary search tree with ordered insertion,
exact-match search, min/max removal and three restartable depth-first
iterators, plus a word-occurrence tracker built on top of it.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstreelib import BSTree

    tree = BSTree()
    for value in (5, 3, 8, 1, 4):
        tree.add(value)
    list(tree.inorder_iterator())   # [1, 3, 4, 5, 8]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    BSTreeNode,
    BSTree,
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)
from .config import (
    TraversalOrder,
    HeightStrategy,
    ReportFormat,
    TreeConfig,
    TrackerConfig,
)
from .errors import (
    BSTreeError,
    InvalidEntryError,
    EmptyTreeError,
    IteratorExhaustedError,
    ConfigurationError,
    RepositoryError,
)
from .api import (
    build_tree,
    traverse_tree,
    collect_elements,
    get_tree_stats,
    is_valid_bst,
)

__all__ = [
    "__version__",
    # Core
    "BSTreeNode",
    "BSTree",
    "TreeIterator",
    "InorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
    # Config
    "TraversalOrder",
    "HeightStrategy",
    "ReportFormat",
    "TreeConfig",
    "TrackerConfig",
    # Errors
    "BSTreeError",
    "InvalidEntryError",
    "EmptyTreeError",
    "IteratorExhaustedError",
    "ConfigurationError",
    "RepositoryError",
    # API
    "build_tree",
    "traverse_tree",
    "collect_elements",
    "get_tree_stats",
    "is_valid_bst",
]
