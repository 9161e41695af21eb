"""
Unit tests for BinaryTree.
"""

from __future__ import annotations

import pytest

from src.structures import BinaryTree


@pytest.fixture
def tree() -> BinaryTree[int]:
    """
          10
        /    \\
       5      15
      / \\      \\
     3   7      20
    """
    bst = BinaryTree(parse=int, value=10)
    for value in (5, 15, 3, 7, 20):
        bst.insert(value)
    return bst


class TestQueries:
    def test_in_order_is_sorted(self, tree) -> None:
        assert [node.data for node in tree.traverse_in_order()] == [3, 5, 7, 10, 15, 20]

    def test_min_max(self, tree) -> None:
        assert tree.find_min() == 3
        assert tree.find_max() == 20

    def test_min_max_empty(self) -> None:
        empty: BinaryTree[int] = BinaryTree(parse=int)

        assert empty.find_min() is None
        assert empty.find_max() is None

    def test_contains(self, tree) -> None:
        assert tree.contains(7)
        assert not tree.contains(8)

    def test_height_and_count(self, tree) -> None:
        assert tree.height() == 2
        assert tree.count_nodes() == 6
        assert BinaryTree(parse=int).height() == -1

    def test_is_balanced(self, tree) -> None:
        assert tree.is_balanced()

        skewed = BinaryTree(parse=int, value=1)
        for value in (2, 3, 4):
            skewed.insert(value)
        assert not skewed.is_balanced()

    def test_bfs_level_order(self, tree) -> None:
        assert tree.bfs() == [10, 5, 15, 3, 7, 20]
        assert BinaryTree(parse=int).bfs() == []

    def test_insert_into_empty_tree(self) -> None:
        bst: BinaryTree[int] = BinaryTree(parse=int)
        bst.insert(4)

        assert bst.root is not None
        assert bst.root.data == 4

    def test_equal_values_go_right(self) -> None:
        bst = BinaryTree(parse=int, value=5)
        bst.insert(5)

        assert bst.root.left is None
        assert bst.root.right.data == 5


class TestDelete:
    def test_delete_leaf(self, tree) -> None:
        tree.delete(3)

        assert not tree.contains(3)
        assert tree.count_nodes() == 5

    def test_delete_one_child(self, tree) -> None:
        tree.delete(15)

        assert tree.root.right.data == 20

    def test_delete_two_children_uses_successor(self, tree) -> None:
        tree.delete(10)

        assert tree.root.data == 15
        assert [node.data for node in tree.traverse_in_order()] == [3, 5, 7, 15, 20]

    def test_delete_missing_is_noop(self, tree) -> None:
        tree.delete(99)

        assert tree.count_nodes() == 6


class TestSerialization:
    def test_serialize_pre_order(self, tree) -> None:
        assert tree.serialize() == "10,5,3,#,#,7,#,#,15,#,20,#,#"

    def test_round_trip(self, tree) -> None:
        restored: BinaryTree[int] = BinaryTree(parse=int)
        restored.deserialize(tree.serialize())

        assert restored.bfs() == tree.bfs()
        assert restored.serialize() == tree.serialize()

    def test_empty_tree(self) -> None:
        empty: BinaryTree[int] = BinaryTree(parse=int)

        assert empty.serialize() == "#"
        empty.deserialize("#")
        assert empty.root is None

    def test_deserialize_uses_parser(self) -> None:
        bst: BinaryTree[float] = BinaryTree(parse=float)
        bst.deserialize("1.5,#,2.5,#,#")

        assert bst.find_max() == 2.5

    def test_deserialize_truncated_input(self) -> None:
        """Missing trailing tokens should read as empty children."""
        bst: BinaryTree[int] = BinaryTree(parse=int)
        bst.deserialize("2,1")

        assert bst.bfs() == [2, 1]
        assert bst.serialize() == "2,1,#,#,#"


class TestDeleteStructure:
    def test_delete_root_with_one_child(self) -> None:
        bst = BinaryTree(parse=int, value=1)
        bst.insert(2)

        bst.delete(1)

        assert bst.root.data == 2
        assert bst.count_nodes() == 1

    def test_delete_only_node(self) -> None:
        bst = BinaryTree(parse=int, value=1)

        bst.delete(1)

        assert bst.root is None
        assert bst.serialize() == "#"

    def test_delete_successor_deep_in_right_subtree(self, tree) -> None:
        """The successor's right child should take the successor's place."""
        tree.insert(12)
        tree.insert(13)

        tree.delete(10)

        assert tree.root.data == 12
        assert tree.root.right.left.data == 13
        assert [node.data for node in tree.traverse_in_order()] == [3, 5, 7, 12, 13, 15, 20]


# =============================================================================
# Test: Degenerate Trees
# =============================================================================


class TestDegenerateTree:
    """Sorted inserts build one long chain; every operation must cope."""

    DEPTH = 2000

    @pytest.fixture
    def chain(self) -> BinaryTree[int]:
        bst: BinaryTree[int] = BinaryTree(parse=int)
        for value in range(self.DEPTH):
            bst.insert(value)
        return bst

    def test_height_and_balance(self, chain) -> None:
        assert chain.height() == self.DEPTH - 1
        assert not chain.is_balanced()

    def test_serialize_round_trip(self, chain) -> None:
        text = chain.serialize()
        restored: BinaryTree[int] = BinaryTree(parse=int)
        restored.deserialize(text)

        assert text.startswith("0,#,1,#,2")
        assert restored.height() == self.DEPTH - 1
        assert restored.serialize() == text

    def test_delete_at_the_bottom(self, chain) -> None:
        chain.delete(self.DEPTH - 1)
        chain.delete(self.DEPTH // 2)

        assert chain.count_nodes() == self.DEPTH - 2
        assert not chain.contains(self.DEPTH // 2)
        assert chain.find_max() == self.DEPTH - 2
