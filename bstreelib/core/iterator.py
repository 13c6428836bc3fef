"""Traversal iterators for BSTreeLib.

Iterators implement the three depth-first orders over a binary search tree.
Each one keeps its own explicit stack, so several iterators over the same
tree can be advanced independently. They do not guard against the tree
being mutated while they are in use.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar, Union

from ..config import TraversalOrder
from ..errors import IteratorExhaustedError
from .node import BSTreeNode

E = TypeVar('E')


class TreeIterator(ABC, Generic[E]):
    """Abstract base class for tree traversal iterators.

    Subclasses provide has_next() and next(). The base class adapts them to
    the Python iterator protocol, so an iterator can be used directly in a
    for loop or passed to list().
    """

    #: Traversal order produced by this iterator
    order: TraversalOrder

    @abstractmethod
    def has_next(self) -> bool:
        """Check if another element is available."""
        pass

    @abstractmethod
    def next(self) -> E:
        """Return the next element.

        Raises:
            IteratorExhaustedError: If no elements remain
        """
        pass

    def _exhausted(self) -> IteratorExhaustedError:
        return IteratorExhaustedError(
            f"No more elements in {self.order.value} iterator"
        )

    def __iter__(self) -> 'TreeIterator[E]':
        return self

    def __next__(self) -> E:
        if not self.has_next():
            raise StopIteration
        return self.next()


class InorderIterator(TreeIterator[E]):
    """Inorder (left, node, right) iterator.

    Yields elements in ascending order. The stack always holds the path of
    nodes whose element has not been produced yet, deepest-left on top.
    """

    order = TraversalOrder.INORDER

    def __init__(self, root: Optional[BSTreeNode[E]]):
        self._stack: List[BSTreeNode[E]] = []
        self._push_left_spine(root)

    def _push_left_spine(self, node: Optional[BSTreeNode[E]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return bool(self._stack)

    def next(self) -> E:
        if not self._stack:
            raise self._exhausted()

        node = self._stack.pop()
        if node.right is not None:
            self._push_left_spine(node.right)
        return node.element


class PreorderIterator(TreeIterator[E]):
    """Preorder (node, left, right) iterator."""

    order = TraversalOrder.PREORDER

    def __init__(self, root: Optional[BSTreeNode[E]]):
        self._stack: List[BSTreeNode[E]] = []
        if root is not None:
            self._stack.append(root)

    def has_next(self) -> bool:
        return bool(self._stack)

    def next(self) -> E:
        if not self._stack:
            raise self._exhausted()

        node = self._stack.pop()
        # Right goes in first so the left subtree is popped first
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        return node.element


class PostorderIterator(TreeIterator[E]):
    """Postorder (left, right, node) iterator.

    The whole order is computed at construction with two stacks. Popping the
    first stack visits nodes root-right-left; pushing each onto the second
    stack reverses that into left-right-root. next() then only pops.
    """

    order = TraversalOrder.POSTORDER

    def __init__(self, root: Optional[BSTreeNode[E]]):
        self._pending: List[BSTreeNode[E]] = []
        self._output: List[BSTreeNode[E]] = []

        if root is not None:
            self._pending.append(root)
        while self._pending:
            node = self._pending.pop()
            self._output.append(node)
            if node.left is not None:
                self._pending.append(node.left)
            if node.right is not None:
                self._pending.append(node.right)

    def has_next(self) -> bool:
        return bool(self._output)

    def next(self) -> E:
        if not self._output:
            raise self._exhausted()
        return self._output.pop().element


# Factory function for creating iterators by order
def create_iterator(order: Union[TraversalOrder, str],
                    root: Optional[BSTreeNode[E]]) -> TreeIterator[E]:
    """Create an iterator instance by traversal order.

    Args:
        order: TraversalOrder or its string name
        root: Root node of the tree to walk (None for an empty tree)

    Returns:
        Fresh TreeIterator positioned before the first element

    Raises:
        ValueError: If order name is not recognized
    """
    iterators = {
        TraversalOrder.INORDER: InorderIterator,
        TraversalOrder.PREORDER: PreorderIterator,
        TraversalOrder.POSTORDER: PostorderIterator,
    }
    return iterators[TraversalOrder.parse(order)](root)
