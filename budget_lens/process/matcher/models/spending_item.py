# Path: budget_lens/process/matcher/models/spending_item.py
"""
Spending Item Model

An amount-bearing budget entry (a department, a program, a one-off
event) that can be put on the spending side of a comparison.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SpendingTier(str, Enum):
    """Display grouping of spending items. Never used for scoring."""
    DEPARTMENT = "department"
    PROGRAM = "program"
    CURRENT_EVENT = "current-event"


@dataclass(frozen=True)
class SpendingItem:
    """
    A spending entry on the dollar side of a comparison.

    Attributes:
        id: Unique identifier
        name: Display name
        amount: Non-negative dollar amount
        category: Optional free-form category
        source: Optional citation
        tier: Optional display tier
    """
    id: str
    name: str
    amount: float
    category: Optional[str] = None
    source: Optional[str] = None
    tier: Optional[SpendingTier] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'amount': self.amount,
            'category': self.category,
            'source': self.source,
            'tier': self.tier.value if self.tier else None,
        }


__all__ = ['SpendingItem', 'SpendingTier']
