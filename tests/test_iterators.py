"""Unit tests for the inorder, preorder and postorder iterators.

Tests the has_next()/next() protocol, exhaustion, independence of
concurrent iterators, and the Python iterator protocol adapter.
"""

import pytest

from bstreelib import (
    BSTree,
    BSTreeNode,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    IteratorExhaustedError,
    TraversalOrder,
    create_iterator,
)


def drain(iterator):
    """Collect elements using only has_next()/next()."""
    result = []
    while iterator.has_next():
        result.append(iterator.next())
    return result


ITERATOR_FACTORIES = [
    pytest.param(lambda tree: tree.inorder_iterator(), id="inorder"),
    pytest.param(lambda tree: tree.preorder_iterator(), id="preorder"),
    pytest.param(lambda tree: tree.postorder_iterator(), id="postorder"),
]


class TestTraversalOrders:
    """Test the element order produced by each iterator."""

    def test_inorder(self, sample_tree):
        assert drain(sample_tree.inorder_iterator()) == [1, 3, 4, 5, 8]

    def test_preorder(self, sample_tree):
        assert drain(sample_tree.preorder_iterator()) == [5, 3, 1, 4, 8]

    def test_postorder(self, sample_tree):
        assert drain(sample_tree.postorder_iterator()) == [1, 4, 3, 8, 5]

    def test_single_node(self):
        tree = BSTree("only")
        assert drain(tree.inorder_iterator()) == ["only"]
        assert drain(tree.preorder_iterator()) == ["only"]
        assert drain(tree.postorder_iterator()) == ["only"]

    def test_right_leaning_chain(self):
        tree = BSTree()
        for value in (1, 2, 3, 4):
            tree.add(value)
        assert drain(tree.inorder_iterator()) == [1, 2, 3, 4]
        assert drain(tree.preorder_iterator()) == [1, 2, 3, 4]
        assert drain(tree.postorder_iterator()) == [4, 3, 2, 1]

    def test_left_leaning_chain(self):
        tree = BSTree()
        for value in (4, 3, 2, 1):
            tree.add(value)
        assert drain(tree.inorder_iterator()) == [1, 2, 3, 4]
        assert drain(tree.preorder_iterator()) == [4, 3, 2, 1]
        assert drain(tree.postorder_iterator()) == [1, 2, 3, 4]

    def test_full_tree(self):
        tree = BSTree()
        for value in (50, 30, 70, 20, 40, 60, 80):
            tree.add(value)
        assert drain(tree.inorder_iterator()) == [20, 30, 40, 50, 60, 70, 80]
        assert drain(tree.preorder_iterator()) == [50, 30, 20, 40, 70, 60, 80]
        assert drain(tree.postorder_iterator()) == [20, 40, 30, 60, 80, 70, 50]


class TestExhaustion:
    """Test behavior once every element has been produced."""

    @pytest.mark.parametrize("make_iterator", ITERATOR_FACTORIES)
    def test_next_after_exhaustion_raises(self, sample_tree, make_iterator):
        iterator = make_iterator(sample_tree)
        drain(iterator)
        assert not iterator.has_next()
        with pytest.raises(IteratorExhaustedError):
            iterator.next()

    @pytest.mark.parametrize("make_iterator", ITERATOR_FACTORIES)
    def test_empty_tree_iterator(self, empty_tree, make_iterator):
        iterator = make_iterator(empty_tree)
        assert not iterator.has_next()
        with pytest.raises(IteratorExhaustedError):
            iterator.next()

    @pytest.mark.parametrize("make_iterator", ITERATOR_FACTORIES)
    def test_exhausted_error_is_lookup_error(self, empty_tree, make_iterator):
        with pytest.raises(LookupError):
            make_iterator(empty_tree).next()

    def test_error_message_names_order(self, empty_tree):
        with pytest.raises(IteratorExhaustedError, match="postorder"):
            empty_tree.postorder_iterator().next()

    @pytest.mark.parametrize("make_iterator", ITERATOR_FACTORIES)
    def test_for_loop_stops_cleanly(self, sample_tree, make_iterator):
        """The Python protocol ends with StopIteration, not an error."""
        iterator = make_iterator(sample_tree)
        assert len(list(iterator)) == 5
        assert list(iterator) == []


class TestIndependence:
    """Test that iterators keep private state."""

    def test_two_inorder_iterators_advance_independently(self, sample_tree):
        first = sample_tree.inorder_iterator()
        second = sample_tree.inorder_iterator()

        assert first.next() == 1
        assert first.next() == 3
        assert second.next() == 1
        assert drain(first) == [4, 5, 8]
        assert drain(second) == [3, 4, 5, 8]

    def test_fresh_iterator_restarts(self, sample_tree):
        drain(sample_tree.preorder_iterator())
        assert drain(sample_tree.preorder_iterator()) == [5, 3, 1, 4, 8]

    def test_iteration_does_not_mutate_tree(self, sample_tree):
        drain(sample_tree.postorder_iterator())
        drain(sample_tree.inorder_iterator())
        assert sample_tree.size() == 5
        assert sample_tree.get_height() == 3

    def test_postorder_is_precomputed(self):
        """Postorder reflects the tree as it was when the iterator was built."""
        tree = BSTree()
        for value in (2, 1, 3):
            tree.add(value)
        iterator = tree.postorder_iterator()
        tree.add(4)
        assert drain(iterator) == [1, 3, 2]


class TestCreateIterator:
    """Test the factory function over raw nodes."""

    def test_create_from_root_node(self):
        root = BSTreeNode(2, BSTreeNode(1), BSTreeNode(3))
        assert drain(create_iterator("inorder", root)) == [1, 2, 3]
        assert drain(create_iterator("pre", root)) == [2, 1, 3]
        assert drain(create_iterator(TraversalOrder.POSTORDER, root)) == [1, 3, 2]

    def test_factory_returns_matching_class(self):
        assert isinstance(create_iterator("inorder", None), InorderIterator)
        assert isinstance(create_iterator("preorder", None), PreorderIterator)
        assert isinstance(create_iterator("postorder", None), PostorderIterator)

    def test_unknown_order(self):
        with pytest.raises(ValueError, match="Unknown traversal order"):
            create_iterator("level", None)
