# Path: budget_lens/process/matcher/engine/match_engine.py
"""
Match Engine

Picks what to compare a number to, in both directions:
- amount -> best comparison unit
- unit -> best spending item
plus ranked alternatives for the side the user did not pick.

Units without a positive cost never win and never appear as an
alternative. Empty or all-invalid candidate sets give None or an empty
list; nothing here raises for missing candidates.
"""

import math
from typing import Callable, Optional, Sequence

from budget_lens.core.logger import get_process_logger
from budget_lens.output.formatters import DisplayFormatter, NumberFormatter

from ..models.comparison_unit import ComparisonUnit
from ..models.match_result import Alternative, MatchResult, ScoredCandidate
from ..models.spending_item import SpendingItem
from ..scoring.impact import impact_score

DEFAULT_MAX_ALTERNATIVES = 3

Scorer = Callable[[float, ComparisonUnit], float]


class MatchEngine:
    """
    Chooses memorable (spending, unit) pairings by impact score.

    Ties keep input order: the first of several equally scored
    candidates wins.

    Example:
        engine = MatchEngine()
        unit = engine.best_unit_for(842_000_000_000, units)
        alternatives = engine.unit_alternatives(842_000_000_000, unit, units)
        result = engine.build_result(spending, unit)
        result.summary()
        # "Defense ($842.0B) could fund 10,525 aircraft carriers"
    """

    def __init__(
        self,
        formatter: Optional[DisplayFormatter] = None,
        scorer: Scorer = impact_score,
        max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
    ):
        """
        Initialize the match engine.

        Args:
            formatter: Formatting collaborator for display strings
            scorer: Impact scoring function
            max_alternatives: Default size of alternative lists
        """
        self.logger = get_process_logger('matcher.engine')
        self.formatter = formatter or NumberFormatter()
        self.scorer = scorer
        self.max_alternatives = max_alternatives

    # ===========================================================================
    # SCORING
    # ===========================================================================
    def rank_units(
        self,
        amount: float,
        units: Sequence[ComparisonUnit],
        exclude_id: Optional[str] = None,
    ) -> list[ScoredCandidate[ComparisonUnit]]:
        """
        Score usable units against an amount, best first.

        Args:
            amount: Dollar amount
            units: Candidate units
            exclude_id: Unit id to leave out

        Returns:
            Scored units, highest score first, input order kept on ties
        """
        scored = []
        skipped = 0
        for unit in units:
            if unit.id == exclude_id:
                continue
            if not unit.is_valid:
                skipped += 1
                continue
            scored.append(ScoredCandidate(unit, self.scorer(amount, unit)))
        if skipped:
            self.logger.debug(f"Skipped {skipped} unit(s) without a positive cost")
        # sorted() is stable, also with reverse=True
        return sorted(scored, key=lambda candidate: candidate.score, reverse=True)

    def rank_spending(
        self,
        unit: ComparisonUnit,
        items: Sequence[SpendingItem],
        exclude_id: Optional[str] = None,
    ) -> list[ScoredCandidate[SpendingItem]]:
        """
        Score spending items against a fixed unit, best first.

        Args:
            unit: Comparison unit
            items: Candidate spending items
            exclude_id: Spending item id to leave out

        Returns:
            Scored items, empty when the unit has no usable cost
        """
        if not unit.is_valid:
            return []
        scored = [
            ScoredCandidate(item, self.scorer(item.amount, unit))
            for item in items
            if item.id != exclude_id
        ]
        return sorted(scored, key=lambda candidate: candidate.score, reverse=True)

    # ===========================================================================
    # BEST MATCH
    # ===========================================================================
    def best_unit_for(
        self,
        amount: float,
        units: Sequence[ComparisonUnit],
        exclude_id: Optional[str] = None,
    ) -> Optional[ComparisonUnit]:
        """
        Highest-scoring unit for an amount.

        Returns:
            The best unit, or None when no usable unit remains
        """
        ranked = self.rank_units(amount, units, exclude_id)
        if not ranked:
            return None
        best = ranked[0]
        self.logger.debug(f"Best unit for {amount}: {best.item.id} (score {best.score})")
        return best.item

    def best_spending_for(
        self,
        unit: ComparisonUnit,
        items: Sequence[SpendingItem],
        exclude_id: Optional[str] = None,
    ) -> Optional[SpendingItem]:
        """
        Highest-scoring spending item for a unit.

        Returns:
            The best item, or None when there is none or the unit is unusable
        """
        ranked = self.rank_spending(unit, items, exclude_id)
        if not ranked:
            return None
        best = ranked[0]
        self.logger.debug(f"Best spending for {unit.id}: {best.item.id} (score {best.score})")
        return best.item

    # ===========================================================================
    # ALTERNATIVES
    # ===========================================================================
    def unit_alternatives(
        self,
        amount: float,
        selected_unit: Optional[ComparisonUnit],
        units: Sequence[ComparisonUnit],
        max_alternatives: Optional[int] = None,
    ) -> list[Alternative]:
        """
        Other units worth showing for an amount, favouring new categories.

        Candidates are ordered with units outside the selected unit's
        category first, then by score. A single greedy pass takes them in
        that order and skips a repeat category while more than one slot
        is still open, so the list fills even with few categories.

        Args:
            amount: Dollar amount
            selected_unit: Unit currently shown (excluded), may be None
            units: Candidate units
            max_alternatives: List size cap (engine default if None)

        Returns:
            Up to max_alternatives alternatives
        """
        limit = self.max_alternatives if max_alternatives is None else max_alternatives
        selected_id = selected_unit.id if selected_unit else None
        selected_category = selected_unit.category if selected_unit else None

        ranked = self.rank_units(amount, units, exclude_id=selected_id)
        ordered = sorted(
            ranked,
            key=lambda candidate: candidate.item.category == selected_category,
        )

        alternatives: list[Alternative] = []
        used_categories: set[str] = set()
        for candidate in ordered:
            if len(alternatives) >= limit:
                break
            unit = candidate.item
            if unit.category in used_categories and len(alternatives) < limit - 1:
                continue
            alternatives.append(self._alternative(unit, amount, unit, candidate.score))
            used_categories.add(unit.category)

        return alternatives

    def spending_alternatives(
        self,
        unit: Optional[ComparisonUnit],
        selected_spending: Optional[SpendingItem],
        items: Sequence[SpendingItem],
        max_alternatives: Optional[int] = None,
    ) -> list[Alternative]:
        """
        Top-scoring other spending items for a unit.

        Args:
            unit: Unit currently shown; no unit means no alternatives
            selected_spending: Spending item currently shown (excluded)
            items: Candidate spending items
            max_alternatives: List size cap (engine default if None)

        Returns:
            Up to max_alternatives alternatives
        """
        if unit is None:
            return []
        limit = self.max_alternatives if max_alternatives is None else max_alternatives
        selected_id = selected_spending.id if selected_spending else None

        ranked = self.rank_spending(unit, items, exclude_id=selected_id)
        return [
            self._alternative(candidate.item, candidate.item.amount, unit, candidate.score)
            for candidate in ranked[:max(limit, 0)]
        ]

    # ===========================================================================
    # RESULTS
    # ===========================================================================
    def build_result(
        self,
        spending: SpendingItem,
        unit: ComparisonUnit,
    ) -> Optional[MatchResult]:
        """
        Pair a spending item with a unit.

        Returns:
            MatchResult with display strings, None for an unusable unit
        """
        if not unit.is_valid:
            return None
        quantity = spending.amount / unit.cost_per_unit
        return MatchResult(
            spending=spending,
            unit=unit,
            quantity=quantity,
            formatted_quantity=self.formatter.format_number(math.floor(quantity)),
            formatted_spending=self.formatter.format_currency(spending.amount),
            formatted_unit_cost=self.formatter.format_currency(unit.cost_per_unit),
        )

    def preview_text(self, quantity: float, unit: ComparisonUnit) -> str:
        """'<whole count> <unit name>' for an alternative."""
        return f"{self.formatter.format_number(math.floor(quantity))} {unit.display_name(quantity)}"

    def _alternative(
        self,
        item,
        amount: float,
        unit: ComparisonUnit,
        score: float,
    ) -> Alternative:
        quantity = amount / unit.cost_per_unit
        return Alternative(
            item=item,
            preview_quantity=quantity,
            formatted_preview=self.preview_text(quantity, unit),
            score=score,
        )


__all__ = ['MatchEngine', 'DEFAULT_MAX_ALTERNATIVES']
