"""High-level API for BSTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, TypeVar, Union

from .config import TraversalOrder, TreeConfig
from .core.node import BSTreeNode
from .core.tree import BSTree

E = TypeVar('E')


def build_tree(elements: Iterable[E], config: Optional[TreeConfig] = None) -> BSTree[E]:
    """Build a tree by adding elements in iteration order.

    Duplicates after the first occurrence are ignored. Feeding the preorder
    of an existing tree reproduces that tree's shape.

    Args:
        elements: Elements to insert
        config: Optional TreeConfig for the new tree

    Returns:
        The populated BSTree

    Raises:
        InvalidEntryError: If any element is None

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4])
        >>> tree.get_height()
        3
    """
    tree: BSTree[E] = BSTree(config=config)
    for element in elements:
        tree.add(element)
    return tree


def traverse_tree(tree: BSTree[E],
                  order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> Iterator[E]:
    """Lazily yield the elements of a tree in the given order.

    Args:
        tree: Tree to walk
        order: TraversalOrder or its string name

    Yields:
        Elements in the requested order
    """
    iterator = tree.iterator(order)
    while iterator.has_next():
        yield iterator.next()


def collect_elements(tree: BSTree[E],
                     order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[E]:
    """Return the elements of a tree in the given order as a list."""
    return list(traverse_tree(tree, order))


def get_tree_stats(tree: BSTree[Any]) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with size, height, min, max, leaf_count and
        is_degenerate (True when the tree is a single chain)

    Example:
        >>> stats = get_tree_stats(build_tree([1, 2, 3]))
        >>> stats['is_degenerate']
        True
    """
    stats: Dict[str, Any] = {
        'size': tree.size(),
        'height': tree.get_height(),
        'min': None,
        'max': None,
        'leaf_count': 0,
    }

    if not tree.is_empty():
        root = tree.get_root()
        stats['min'] = _leftmost(root).element
        stats['max'] = _rightmost(root).element

        stack: List[BSTreeNode[Any]] = [root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                stats['leaf_count'] += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

    stats['is_degenerate'] = stats['size'] > 0 and stats['height'] == stats['size']
    return stats


def is_valid_bst(tree: BSTree[Any]) -> bool:
    """Check the ordering and size invariants of a tree.

    Every element must lie strictly between the bounds inherited from its
    ancestors, and the number of reachable nodes must equal tree.size().
    """
    if tree.is_empty():
        return tree.size() == 0

    count = 0
    # Stack stores (node, lower bound, upper bound) tuples
    stack = [(tree.get_root(), None, None)]
    while stack:
        node, low, high = stack.pop()
        count += 1
        if low is not None and not node.element > low:
            return False
        if high is not None and not node.element < high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.element))
        if node.right is not None:
            stack.append((node.right, node.element, high))

    return count == tree.size()


# Helper functions

def _leftmost(node: BSTreeNode[E]) -> BSTreeNode[E]:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: BSTreeNode[E]) -> BSTreeNode[E]:
    while node.right is not None:
        node = node.right
    return node
