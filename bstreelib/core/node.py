"""BSTreeNode - a single vertex of a binary search tree.

The node is intentionally kept simple - it's a data container holding one
element and two child slots. Ordering is never checked here; the BSTree
that owns the node is responsible for keeping elements in order.
"""

from typing import Generic, Optional, TypeVar

E = TypeVar('E')


class BSTreeNode(Generic[E]):
    """A tree vertex owning an element and up to two child subtrees.

    Assigning a child replaces whatever subtree occupied that slot; the
    previous subtree is dropped from this node.
    """

    __slots__ = ('_element', '_left', '_right')

    def __init__(self,
                 element: E,
                 left: Optional['BSTreeNode[E]'] = None,
                 right: Optional['BSTreeNode[E]'] = None):
        self._element = element
        self._left = left
        self._right = right

    @property
    def element(self) -> E:
        """The element stored at this node."""
        return self._element

    @element.setter
    def element(self, value: E) -> None:
        self._element = value

    @property
    def left(self) -> Optional['BSTreeNode[E]']:
        """Root of the left subtree, or None."""
        return self._left

    @left.setter
    def left(self, node: Optional['BSTreeNode[E]']) -> None:
        self._left = node

    @property
    def right(self) -> Optional['BSTreeNode[E]']:
        """Root of the right subtree, or None."""
        return self._right

    @right.setter
    def right(self, node: Optional['BSTreeNode[E]']) -> None:
        self._right = node

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self._element!r})"
