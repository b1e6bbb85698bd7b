# Path: budget_lens/process/hierarchy/node.py
"""
Budget Node - Individual item in a budget hierarchy.

Each node is a department, agency, program or line item. Parents own
their children by value; the link back to the parent is kept as a plain
id (parent_id) so the structure stays a strict ownership tree with no
reference cycles.

Nodes are immutable snapshots. A refreshed dataset arrives as a whole
new tree, never as in-place edits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class BudgetNode:
    """
    A single node in the budget hierarchy tree.

    Attributes:
        id: Identifier, unique within a tree
        name: Display name (e.g., "Department of Defense")
        amount: Non-negative dollar amount
        parent_id: Id of the parent node, None only for the root
        fiscal_year: Fiscal year of the figures
        percent_of_parent: Share of the parent's amount (nullable)
        year_over_year_change: Change against the prior year (nullable)
        children: Ordered child nodes

    Example:
        root = BudgetNode(
            id="federal",
            name="Federal Budget",
            amount=6_750_000_000_000,
            children=(
                BudgetNode(id="dod", name="Defense", amount=842e9, parent_id="federal"),
            ),
        )
    """
    id: str
    name: str
    amount: float = 0.0
    parent_id: Optional[str] = None
    fiscal_year: Optional[int] = None
    percent_of_parent: Optional[float] = None
    year_over_year_change: Optional[float] = None
    children: tuple[BudgetNode, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Budget node '{self.id}' has negative amount {self.amount}")
        if not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children))

    # ===========================================================================
    # RELATIONSHIP QUERIES
    # ===========================================================================
    @property
    def has_children(self) -> bool:
        """Check if the node can be drilled into."""
        return len(self.children) > 0

    @property
    def child_count(self) -> int:
        """Number of direct children."""
        return len(self.children)

    @property
    def descendant_count(self) -> int:
        """Total number of descendants."""
        return sum(1 for _ in self.iter_preorder()) - 1

    # ===========================================================================
    # TREE ITERATION
    # ===========================================================================
    def iter_preorder(self) -> Iterator[BudgetNode]:
        """
        Iterate nodes in pre-order (parent before children).

        Uses an explicit stack so deep trees do not hit the recursion limit.

        Yields:
            Nodes in pre-order traversal
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def iter_with_depth(self, depth: int = 0) -> Iterator[tuple[BudgetNode, int]]:
        """
        Iterate (node, depth) pairs in pre-order.

        Args:
            depth: Depth assigned to this node

        Yields:
            Tuples of node and its depth relative to this node
        """
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            yield node, level
            stack.extend((child, level + 1) for child in reversed(node.children))

    # ===========================================================================
    # CONVERSION AND REPRESENTATION
    # ===========================================================================
    def to_dict(self, include_children: bool = True) -> dict[str, Any]:
        """
        Convert node to the camelCase dictionary shape used by the data files.

        Args:
            include_children: Whether to include children recursively

        Returns:
            Dictionary representation
        """
        result: dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'amount': self.amount,
            'parentId': self.parent_id,
            'fiscalYear': self.fiscal_year,
            'percentOfParent': self.percent_of_parent,
            'yearOverYearChange': self.year_over_year_change,
        }

        if include_children and self.children:
            result['children'] = [
                child.to_dict(include_children=True)
                for child in self.children
            ]

        return result

    def __str__(self) -> str:
        children_str = f" ({self.child_count} children)" if self.children else ""
        return f"{self.name} = {self.amount:,.0f}{children_str}"


__all__ = ['BudgetNode']
