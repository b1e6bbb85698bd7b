# Path: budget_lens/tests/unit/test_hierarchy/test_node.py
"""
Tests for hierarchy node module.
"""

import pytest

from budget_lens.process.hierarchy.node import BudgetNode


class TestBudgetNodeCreation:
    """Test BudgetNode creation."""

    def test_create_basic_node(self):
        """Can create a basic node."""
        node = BudgetNode(id="dod", name="Defense", amount=842e9)
        assert node.id == "dod"
        assert node.name == "Defense"
        assert node.amount == 842e9

    def test_default_values(self):
        """Optional attributes default to None / empty."""
        node = BudgetNode(id="x", name="X")
        assert node.amount == 0.0
        assert node.parent_id is None
        assert node.fiscal_year is None
        assert node.percent_of_parent is None
        assert node.year_over_year_change is None
        assert node.children == ()

    def test_negative_amount_rejected(self):
        """Negative amounts raise ValueError."""
        with pytest.raises(ValueError):
            BudgetNode(id="x", name="X", amount=-1)

    def test_children_list_becomes_tuple(self):
        """A list of children is stored as a tuple."""
        child = BudgetNode(id="c", name="C", parent_id="p")
        node = BudgetNode(id="p", name="P", children=[child])
        assert node.children == (child,)

    def test_node_is_immutable(self):
        """Nodes cannot be modified in place."""
        node = BudgetNode(id="x", name="X")
        with pytest.raises(AttributeError):
            node.amount = 5


class TestNodeRelationships:
    """Test relationship queries."""

    def test_has_children(self, sample_tree):
        """has_children mirrors the children tuple."""
        a, b = sample_tree.children
        assert a.has_children
        assert not b.has_children

    def test_counts(self, sample_tree):
        """Child and descendant counts."""
        assert sample_tree.child_count == 2
        assert sample_tree.descendant_count == 3

    def test_parent_link_is_an_id(self, sample_tree):
        """Children refer to their parent by id only."""
        for child in sample_tree.children:
            assert child.parent_id == sample_tree.id


class TestTreeIteration:
    """Test traversal helpers."""

    def test_preorder(self, sample_tree):
        """Pre-order visits parents before children, left to right."""
        assert [n.id for n in sample_tree.iter_preorder()] == ["R", "A", "A1", "B"]

    def test_iter_with_depth(self, sample_tree):
        """Depths are relative to the starting node."""
        pairs = [(n.id, d) for n, d in sample_tree.iter_with_depth()]
        assert pairs == [("R", 0), ("A", 1), ("A1", 2), ("B", 1)]

    def test_deep_chain_does_not_recurse(self):
        """Iteration handles chains deeper than the recursion limit."""
        node = BudgetNode(id="n0", name="n0")
        for i in range(1, 3000):
            node = BudgetNode(id=f"n{i}", name=f"n{i}", children=(node,))
        assert sum(1 for _ in node.iter_preorder()) == 3000


class TestNodeConversion:
    """Test dictionary and string output."""

    def test_to_dict_uses_camel_case(self, sample_tree):
        """to_dict produces the data-file key names."""
        data = sample_tree.children[0].to_dict()
        assert data['parentId'] == "R"
        assert 'fiscalYear' in data
        assert [c['id'] for c in data['children']] == ["A1"]

    def test_to_dict_without_children(self, sample_tree):
        """Children can be left out."""
        assert 'children' not in sample_tree.to_dict(include_children=False)

    def test_str(self, sample_tree):
        """String form shows child count."""
        assert str(sample_tree) == "Root = 100 (2 children)"
        assert str(sample_tree.children[1]) == "Beta = 40"
