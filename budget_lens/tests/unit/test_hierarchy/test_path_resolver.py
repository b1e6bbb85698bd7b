# Path: budget_lens/tests/unit/test_hierarchy/test_path_resolver.py
"""
Tests for path resolver lookups.
"""

from budget_lens.process.hierarchy.node import BudgetNode
from budget_lens.process.hierarchy.path_resolver import (
    build_path,
    find_node,
    index_tree,
    resolve_path_nodes,
    walk_path,
)


class TestFindNode:
    """Test find_node."""

    def test_finds_root(self, sample_tree):
        """The root itself can be found."""
        assert find_node(sample_tree, "R") is sample_tree

    def test_finds_nested(self, sample_tree):
        """Nested nodes are found."""
        assert find_node(sample_tree, "A1").name == "Alpha One"

    def test_missing_id(self, sample_tree):
        """Unknown ids give None."""
        assert find_node(sample_tree, "Z") is None

    def test_no_tree(self):
        """No data gives None."""
        assert find_node(None, "A") is None

    def test_first_match_wins_for_duplicates(self):
        """A duplicated id resolves to the first node in pre-order."""
        first = BudgetNode(id="dup", name="First", parent_id="a")
        second = BudgetNode(id="dup", name="Second", parent_id="b")
        tree = BudgetNode(id="r", name="R", children=(
            BudgetNode(id="a", name="A", parent_id="r", children=(first,)),
            BudgetNode(id="b", name="B", parent_id="r", children=(second,)),
        ))
        assert find_node(tree, "dup").name == "First"
        assert build_path(tree, "dup") == ["a", "dup"]


class TestBuildPath:
    """Test build_path."""

    def test_nested_path(self, sample_tree):
        """Path runs from below the root to the target."""
        assert build_path(sample_tree, "A1") == ["A", "A1"]

    def test_direct_child(self, sample_tree):
        """A child of the root has a one-element path."""
        assert build_path(sample_tree, "B") == ["B"]

    def test_root_is_empty(self, sample_tree):
        """The root's path is empty."""
        assert build_path(sample_tree, "R") == []

    def test_missing_is_empty(self, sample_tree):
        """An unreachable id gives an empty path."""
        assert build_path(sample_tree, "Z") == []
        assert build_path(None, "A") == []

    def test_walk_reaches_every_node(self, sample_tree, deep_tree):
        """Walking a built path from the root reaches exactly that node."""
        for tree in (sample_tree, deep_tree):
            for node in tree.iter_preorder():
                assert walk_path(tree, build_path(tree, node.id)) is node


class TestWalkAndResolve:
    """Test walk_path, resolve_path_nodes and index_tree."""

    def test_walk_empty_path_is_root(self, sample_tree):
        assert walk_path(sample_tree, []) is sample_tree

    def test_walk_broken_path(self, sample_tree):
        """A step with no matching child gives None."""
        assert walk_path(sample_tree, ["B", "A1"]) is None
        assert walk_path(None, ["A"]) is None

    def test_resolve_skips_unknown(self, sample_tree):
        """Unresolvable ids are dropped from the node list."""
        nodes = resolve_path_nodes(sample_tree, ["A", "ghost", "A1"])
        assert [n.id for n in nodes] == ["A", "A1"]

    def test_index_tree(self, sample_tree):
        """Every id maps to its node."""
        index = index_tree(sample_tree)
        assert set(index) == {"R", "A", "A1", "B"}
        assert index["A1"] is find_node(sample_tree, "A1")
        assert index_tree(None) == {}
