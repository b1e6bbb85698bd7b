# Path: budget_lens/process/matcher/engine/comparison_builder.py
"""
Comparison Builder

Holds one in-progress comparison: a spending side and a unit side.
Choosing one side while the other is empty fills the other with the
engine's best match. Once both sides are set, changing one leaves the
other alone.
"""

from typing import Iterable, Optional

from budget_lens.core.logger import get_process_logger

from ..models.comparison_unit import ComparisonUnit
from ..models.match_result import Alternative, MatchResult
from ..models.spending_item import SpendingItem
from .match_engine import MatchEngine


class ComparisonBuilder:
    """
    Two-sided comparison with auto-fill.

    Example:
        builder = ComparisonBuilder(units, spending_items)
        builder.set_spending("defense")   # unit auto-filled
        builder.result.summary()
        builder.unit_alternatives         # other units for "defense"
        builder.set_unit("teacher-salary")  # spending side unchanged
    """

    def __init__(
        self,
        units: Iterable[ComparisonUnit],
        spending_items: Iterable[SpendingItem],
        engine: Optional[MatchEngine] = None,
    ):
        self.logger = get_process_logger('matcher.builder')
        self.units = list(units)
        self.spending_items = list(spending_items)
        self.engine = engine or MatchEngine()
        self.selected_spending: Optional[SpendingItem] = None
        self.selected_unit: Optional[ComparisonUnit] = None

    # ===========================================================================
    # LOOKUP
    # ===========================================================================
    def find_unit(self, unit_id: str) -> Optional[ComparisonUnit]:
        return next((u for u in self.units if u.id == unit_id), None)

    def find_spending(self, spending_id: str) -> Optional[SpendingItem]:
        return next((s for s in self.spending_items if s.id == spending_id), None)

    # ===========================================================================
    # SELECTION
    # ===========================================================================
    def set_spending(self, spending_id: Optional[str]) -> None:
        """
        Choose the spending side by id; None clears it.

        An unknown id clears the spending side. When no unit is chosen
        yet, the best unit for the new amount is filled in.
        """
        spending = self.find_spending(spending_id) if spending_id is not None else None
        if spending_id is not None and spending is None:
            self.logger.warning(f"Unknown spending item '{spending_id}'")
        self.selected_spending = spending

        if spending is not None and self.selected_unit is None:
            self.selected_unit = self.engine.best_unit_for(spending.amount, self.units)
            self.logger.debug(
                f"Auto-filled unit {getattr(self.selected_unit, 'id', None)} "
                f"for {spending.id}"
            )

    def set_unit(self, unit_id: Optional[str]) -> None:
        """
        Choose the unit side by id; None clears it.

        When no spending item is chosen yet, the best spending item for
        the new unit is filled in.
        """
        unit = self.find_unit(unit_id) if unit_id is not None else None
        if unit_id is not None and unit is None:
            self.logger.warning(f"Unknown comparison unit '{unit_id}'")
        self.selected_unit = unit

        if unit is not None and self.selected_spending is None:
            self.selected_spending = self.engine.best_spending_for(unit, self.spending_items)
            self.logger.debug(
                f"Auto-filled spending {getattr(self.selected_spending, 'id', None)} "
                f"for {unit.id}"
            )

    def clear(self) -> None:
        """Reset both sides."""
        self.selected_spending = None
        self.selected_unit = None

    # ===========================================================================
    # DERIVED
    # ===========================================================================
    @property
    def is_complete(self) -> bool:
        return self.selected_spending is not None and self.selected_unit is not None

    @property
    def result(self) -> Optional[MatchResult]:
        """Current pairing, None until both sides hold a usable pair."""
        if not self.is_complete:
            return None
        return self.engine.build_result(self.selected_spending, self.selected_unit)

    @property
    def unit_alternatives(self) -> list[Alternative]:
        """Other units for the chosen spending amount."""
        if self.selected_spending is None:
            return []
        return self.engine.unit_alternatives(
            self.selected_spending.amount,
            self.selected_unit,
            self.units,
        )

    @property
    def spending_alternatives(self) -> list[Alternative]:
        """Other spending items for the chosen unit."""
        return self.engine.spending_alternatives(
            self.selected_unit,
            self.selected_spending,
            self.spending_items,
        )

    def __repr__(self) -> str:
        return (
            f"ComparisonBuilder(spending={getattr(self.selected_spending, 'id', None)!r}, "
            f"unit={getattr(self.selected_unit, 'id', None)!r})"
        )


__all__ = ['ComparisonBuilder']
