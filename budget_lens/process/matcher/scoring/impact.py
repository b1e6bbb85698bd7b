# Path: budget_lens/process/matcher/scoring/impact.py
"""
Impact Scorer

Rates how memorable "amount expressed as N units" reads. Higher is
better. The thresholds are the dashboard's established notion of a
memorable comparison and are part of its visible behaviour.

    count < 1                 ->  0   (buys less than one unit)
    1 <= count < 10           -> 10   (valid but not vivid)
    count > 1,000,000,000     ->  5   (too large to picture)
    otherwise                 -> 50 base, plus
        +30  1,000 <= count <= 10,000,000
        +20  100 <= count < 1,000
        +15  10,000,000 < count <= 100,000,000
        +10  fractional part < 0.1 or > 0.9
        +15  log10(count) within 0.2 of a whole number

Counts in [10, 100) and (100M, 1B] get no range bonus.
"""

import math
from typing import Final, Optional

from ..models.comparison_unit import ComparisonUnit


# ==============================================================================
# SCORE BANDS
# ==============================================================================
SCORE_UNUSABLE: Final[int] = 0
SCORE_TOO_SMALL: Final[int] = 10
SCORE_TOO_LARGE: Final[int] = 5
SCORE_BASE: Final[int] = 50

SMALL_COUNT_LIMIT: Final[int] = 10
LARGE_COUNT_LIMIT: Final[int] = 1_000_000_000

# (low, high, low_inclusive, high_inclusive, bonus), first hit wins
RANGE_BONUSES: Final[tuple[tuple[float, float, bool, bool, int], ...]] = (
    (1_000, 10_000_000, True, True, 30),
    (100, 1_000, True, False, 20),
    (10_000_000, 100_000_000, False, True, 15),
)

NEAR_INTEGER_LOW: Final[float] = 0.1
NEAR_INTEGER_HIGH: Final[float] = 0.9
NEAR_INTEGER_BONUS: Final[int] = 10

POWER_OF_TEN_TOLERANCE: Final[float] = 0.2
POWER_OF_TEN_BONUS: Final[int] = 15


def _in_band(count: float, low: float, high: float, low_inc: bool, high_inc: bool) -> bool:
    above = count >= low if low_inc else count > low
    below = count <= high if high_inc else count < high
    return above and below


def score_count(count: float) -> int:
    """
    Score a unit count.

    Args:
        count: amount / cost_per_unit

    Returns:
        Impact score
    """
    if not math.isfinite(count) or count < 1:
        return SCORE_UNUSABLE
    if count < SMALL_COUNT_LIMIT:
        return SCORE_TOO_SMALL
    if count > LARGE_COUNT_LIMIT:
        return SCORE_TOO_LARGE

    score = SCORE_BASE

    for low, high, low_inc, high_inc, bonus in RANGE_BONUSES:
        if _in_band(count, low, high, low_inc, high_inc):
            score += bonus
            break

    fraction = count - math.floor(count)
    if fraction < NEAR_INTEGER_LOW or fraction > NEAR_INTEGER_HIGH:
        score += NEAR_INTEGER_BONUS

    log = math.log10(count)
    if abs(log - round(log)) < POWER_OF_TEN_TOLERANCE:
        score += POWER_OF_TEN_BONUS

    return score


def unit_count(amount: float, unit: ComparisonUnit) -> Optional[float]:
    """
    How many units an amount buys.

    Returns:
        amount / cost_per_unit, or None for a unit without a usable cost
    """
    if not unit.is_valid:
        return None
    return amount / unit.cost_per_unit


def impact_score(amount: float, unit: ComparisonUnit) -> int:
    """
    Score expressing `amount` in `unit`.

    Args:
        amount: Non-negative dollar amount
        unit: Candidate comparison unit

    Returns:
        Impact score; 0 for a unit with zero, negative or missing cost
    """
    count = unit_count(amount, unit)
    if count is None:
        return SCORE_UNUSABLE
    return score_count(count)


__all__ = ['impact_score', 'score_count', 'unit_count']
