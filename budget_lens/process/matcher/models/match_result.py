# Path: budget_lens/process/matcher/models/match_result.py
"""
Match Result Models

Models returned by the matching engine: the committed pairing
(MatchResult) and the candidate pairings offered next to it
(Alternative). Consumers read these for display only.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .comparison_unit import ComparisonUnit
from .spending_item import SpendingItem

T = TypeVar('T', ComparisonUnit, SpendingItem)


@dataclass(frozen=True)
class ScoredCandidate(Generic[T]):
    """
    A candidate with its impact score.

    Attributes:
        item: The unit or spending item
        score: Impact score of the pairing
    """
    item: T
    score: float


@dataclass(frozen=True)
class MatchResult:
    """
    A spending item paired with a comparison unit.

    Attributes:
        spending: Spending side
        unit: Unit side
        quantity: spending.amount / unit.cost_per_unit, unrounded
        formatted_quantity: Whole-unit count with separators
        formatted_spending: Spending amount as currency
        formatted_unit_cost: Unit cost as currency
    """
    spending: SpendingItem
    unit: ComparisonUnit
    quantity: float
    formatted_quantity: str
    formatted_spending: str
    formatted_unit_cost: str

    @property
    def unit_name(self) -> str:
        """Unit name agreeing with the quantity."""
        return self.unit.display_name(self.quantity)

    def summary(self) -> str:
        """One-line sentence for sharing."""
        return (
            f"{self.spending.name} ({self.formatted_spending}) could fund "
            f"{self.formatted_quantity} {self.unit_name}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'spending': self.spending.to_dict(),
            'unit': self.unit.to_dict(),
            'quantity': self.quantity,
            'formatted_quantity': self.formatted_quantity,
            'formatted_spending': self.formatted_spending,
            'formatted_unit_cost': self.formatted_unit_cost,
        }


@dataclass(frozen=True)
class Alternative:
    """
    A pairing offered without committing to it.

    Attributes:
        item: Candidate unit or spending item
        preview_quantity: Quantity the pairing would produce
        formatted_preview: e.g. "12,382 teacher salaries"
        score: Impact score that ranked the candidate
    """
    item: Union[ComparisonUnit, SpendingItem]
    preview_quantity: float
    formatted_preview: str
    score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'item': self.item.to_dict(),
            'preview_quantity': self.preview_quantity,
            'formatted_preview': self.formatted_preview,
            'score': self.score,
        }


__all__ = ['MatchResult', 'Alternative', 'ScoredCandidate']
