# Path: budget_lens/tests/unit/test_matcher/test_impact.py
"""
Tests for impact scoring.
"""

import math

import pytest

from budget_lens.process.matcher.models import ComparisonUnit
from budget_lens.process.matcher.scoring import impact_score, score_count, unit_count


def unit(cost):
    return ComparisonUnit(id="u", name="units", name_singular="unit", cost_per_unit=cost)


class TestConcreteScenarios:
    """Reference pairings."""

    def test_defense_in_carriers(self):
        """842B / 80M = 10,525: range, whole-number and near-power-of-ten bonuses."""
        score = impact_score(842_000_000_000, unit(80_000_000))
        assert score >= 80
        assert score == 105

    def test_two_and_a_half_units(self):
        """25B / 10B = 2.5 is below the vivid floor."""
        assert impact_score(25_000_000_000, unit(10_000_000_000)) == 10


class TestUnusable:
    """Pairings that score zero."""

    @pytest.mark.parametrize("cost", [0, -5, None, math.inf, math.nan])
    def test_invalid_cost(self, cost):
        assert impact_score(1_000_000, unit(cost)) == 0

    @pytest.mark.parametrize("amount", [0, 1, 50, 99.99])
    def test_less_than_one_unit(self, amount):
        assert impact_score(amount, unit(100)) == 0

    def test_zero_for_any_sub_unit_amount(self):
        """Score is zero whenever the count is below one."""
        for amount in (0, 0.5, 10, 500, 999):
            for cost in (1_000, 5_000, 1e6):
                assert impact_score(amount, unit(cost)) == 0


class TestBands:
    """Score bands and bonuses on raw counts."""

    @pytest.mark.parametrize("count, expected", [
        (1, 10),
        (9.99, 10),
        (10, 75),             # no range bonus, whole, power of ten
        (50, 60),             # [10, 100) gap
        (100, 95),            # lower range bonus
        (150.95, 95),         # .95 counts as whole, log10 ~2.18
        (555.5, 70),
        (1_000, 105),
        (10_525, 105),
        (10_000_000, 105),
        (50_000_000, 75),     # upper range bonus
        (500_000_000, 60),    # (100M, 1B] gap
        (1_000_000_000, 75),
        (1_000_000_001, 5),   # too large to picture
    ])
    def test_score_count(self, count, expected):
        assert score_count(count) == expected

    def test_non_finite_count(self):
        assert score_count(math.inf) == 0
        assert score_count(math.nan) == 0


class TestUnitCount:
    """Test unit_count."""

    def test_division(self):
        assert unit_count(1_000, unit(10)) == 100

    def test_invalid_unit(self):
        assert unit_count(1_000, unit(0)) is None
