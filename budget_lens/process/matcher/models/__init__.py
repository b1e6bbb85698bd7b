# Path: budget_lens/process/matcher/models/__init__.py
"""
Matcher Models

Data structures for comparison matching:
- ComparisonUnit / UnitCategory / CostPeriod: what amounts are expressed in
- SpendingItem / SpendingTier: what gets expressed
- MatchResult: a committed pairing with display strings
- Alternative: a candidate pairing with a preview
- ScoredCandidate: a candidate with its impact score
"""

from .comparison_unit import ComparisonUnit, UnitCategory, CostPeriod
from .spending_item import SpendingItem, SpendingTier
from .match_result import MatchResult, Alternative, ScoredCandidate

__all__ = [
    'ComparisonUnit',
    'UnitCategory',
    'CostPeriod',
    'SpendingItem',
    'SpendingTier',
    'MatchResult',
    'Alternative',
    'ScoredCandidate',
]
