"""BSTree - an unbalanced binary search tree.

The tree owns its root node and keeps an element count. Shape depends only
on insertion order: nothing here rotates or rebalances. Duplicates are
rejected, and only the minimum and maximum can be removed.
"""

import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from ..config import HeightStrategy, TraversalOrder, TreeConfig
from ..errors import ConfigurationError, EmptyTreeError, InvalidEntryError
from .iterator import (
    InorderIterator,
    PostorderIterator,
    PreorderIterator,
    TreeIterator,
    create_iterator,
)
from .node import BSTreeNode

logger = logging.getLogger(__name__)

E = TypeVar('E')


class BSTree(Generic[E]):
    """Ordered container of distinct, mutually comparable elements.

    Elements must support ``<`` and ``>`` as a total order. None is never a
    valid element.

    Example:
        >>> tree = BSTree()
        >>> for value in (5, 3, 8, 1, 4):
        ...     tree.add(value)
        >>> list(tree.inorder_iterator())
        [1, 3, 4, 5, 8]
    """

    def __init__(self, element: Optional[E] = None, config: Optional[TreeConfig] = None):
        """Create an empty tree, or one seeded with a single element.

        Args:
            element: Optional seed element for the root
            config: TreeConfig (defaults to TreeConfig())

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config or TreeConfig()
        problems = self.config.validate()
        if problems:
            raise ConfigurationError(problems, context="tree configuration")

        self._root: Optional[BSTreeNode[E]] = None
        self._size = 0

        if element is not None:
            self._root = BSTreeNode(element)
            self._size = 1

    # Queries

    def is_empty(self) -> bool:
        """Check if the tree holds no elements."""
        return self._size == 0

    def size(self) -> int:
        """Return the number of elements, in O(1)."""
        return self._size

    def get_height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path.

        An empty tree has height 0 and a single node has height 1.
        """
        if self.config.height_strategy is HeightStrategy.RECURSIVE:
            return self._height_recursive(self._root)
        return self._height_iterative(self._root)

    def get_root(self) -> BSTreeNode[E]:
        """Return the live root node.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("The tree is empty.")
        return self._root

    def contains(self, entry: E) -> bool:
        """Check if an element equal to entry is stored.

        Raises:
            InvalidEntryError: If entry is None
        """
        if entry is None:
            raise InvalidEntryError("contains")
        return self._find(entry) is not None

    def search(self, entry: E) -> Optional[BSTreeNode[E]]:
        """Return the node holding an element equal to entry, or None.

        The node is part of the live tree; mutating its element in a way
        that changes its ordering corrupts the tree.

        Raises:
            InvalidEntryError: If entry is None
        """
        if entry is None:
            raise InvalidEntryError("search")
        return self._find(entry)

    # Mutations

    def add(self, entry: E) -> bool:
        """Insert entry as a new leaf.

        Returns:
            True if inserted, False if an equal element is already stored
            (the stored element is left untouched)

        Raises:
            InvalidEntryError: If entry is None
        """
        if entry is None:
            raise InvalidEntryError("add")

        if self._root is None:
            self._root = BSTreeNode(entry)
            self._size += 1
            return True

        node = self._root
        while True:
            if entry < node.element:
                if node.left is None:
                    node.left = BSTreeNode(entry)
                    self._size += 1
                    return True
                node = node.left
            elif entry > node.element:
                if node.right is None:
                    node.right = BSTreeNode(entry)
                    self._size += 1
                    return True
                node = node.right
            else:
                return False

    def remove_min(self) -> Optional[BSTreeNode[E]]:
        """Detach and return the node holding the smallest element.

        Returns:
            The detached node (with no children), or None if the tree is empty
        """
        if self._root is None:
            return None

        # Root is the minimum: its right subtree becomes the tree
        if self._root.left is None:
            removed = self._root
            self._root = removed.right
            removed.right = None
            self._size -= 1
            logger.debug("remove_min detached root %r", removed.element)
            return removed

        parent = self._root
        current = parent.left
        while current.left is not None:
            parent = current
            current = current.left

        parent.left = current.right
        current.right = None
        self._size -= 1
        logger.debug("remove_min detached %r", current.element)
        return current

    def remove_max(self) -> Optional[BSTreeNode[E]]:
        """Detach and return the node holding the largest element.

        Returns:
            The detached node (with no children), or None if the tree is empty
        """
        if self._root is None:
            return None

        # Root is the maximum: its left subtree becomes the tree
        if self._root.right is None:
            removed = self._root
            self._root = removed.left
            removed.left = None
            self._size -= 1
            logger.debug("remove_max detached root %r", removed.element)
            return removed

        parent = self._root
        current = parent.right
        while current.right is not None:
            parent = current
            current = current.right

        parent.right = current.left
        current.left = None
        self._size -= 1
        logger.debug("remove_max detached %r", current.element)
        return current

    def clear(self) -> None:
        """Drop every element."""
        logger.debug("clear dropped %d elements", self._size)
        self._root = None
        self._size = 0

    # Iterators

    def inorder_iterator(self) -> InorderIterator[E]:
        """Return a fresh iterator yielding elements in ascending order."""
        return InorderIterator(self._root)

    def preorder_iterator(self) -> PreorderIterator[E]:
        """Return a fresh iterator yielding each node before its subtrees."""
        return PreorderIterator(self._root)

    def postorder_iterator(self) -> PostorderIterator[E]:
        """Return a fresh iterator yielding each node after its subtrees."""
        return PostorderIterator(self._root)

    def iterator(self, order: Union[TraversalOrder, str, None] = None) -> TreeIterator[E]:
        """Return a fresh iterator for the given order.

        Args:
            order: TraversalOrder or its name; None uses config.default_order

        Raises:
            ValueError: If order name is not recognized
        """
        if order is None:
            order = self.config.default_order
        return create_iterator(order, self._root)

    # Helpers

    def _find(self, entry: E) -> Optional[BSTreeNode[E]]:
        node = self._root
        while node is not None:
            if entry < node.element:
                node = node.left
            elif entry > node.element:
                node = node.right
            else:
                return node
        return None

    def _height_recursive(self, node: Optional[BSTreeNode[E]]) -> int:
        if node is None:
            return 0
        return 1 + max(self._height_recursive(node.left),
                       self._height_recursive(node.right))

    def _height_iterative(self, node: Optional[BSTreeNode[E]]) -> int:
        if node is None:
            return 0

        # Stack stores (node, depth) tuples
        stack: List[Tuple[BSTreeNode[E], int]] = [(node, 1)]
        height = 0
        while stack:
            current, depth = stack.pop()
            height = max(height, depth)
            if current.left is not None:
                stack.append((current.left, depth + 1))
            if current.right is not None:
                stack.append((current.right, depth + 1))
        return height

    # Python protocol

    def __len__(self) -> int:
        return self._size

    def __contains__(self, entry: object) -> bool:
        return self.contains(entry)

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"
