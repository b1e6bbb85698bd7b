# Path: budget_lens/process/matcher/__init__.py
"""
Comparison Matcher Package

Expresses dollar amounts as counts of real-world things and picks the
pairings that read best.

Components:
- models: ComparisonUnit, SpendingItem, MatchResult, Alternative
- scoring: impact_score and its helpers
- engine: MatchEngine and ComparisonBuilder

Example:
    from budget_lens.process.matcher import MatchEngine

    engine = MatchEngine()
    unit = engine.best_unit_for(842_000_000_000, units)
    engine.unit_alternatives(842_000_000_000, unit, units)
"""

from .models import (
    ComparisonUnit,
    UnitCategory,
    CostPeriod,
    SpendingItem,
    SpendingTier,
    MatchResult,
    Alternative,
    ScoredCandidate,
)
from .scoring import impact_score, score_count, unit_count
from .engine import MatchEngine, ComparisonBuilder, DEFAULT_MAX_ALTERNATIVES

__all__ = [
    # Models
    'ComparisonUnit',
    'UnitCategory',
    'CostPeriod',
    'SpendingItem',
    'SpendingTier',
    'MatchResult',
    'Alternative',
    'ScoredCandidate',
    # Scoring
    'impact_score',
    'score_count',
    'unit_count',
    # Engine
    'MatchEngine',
    'ComparisonBuilder',
    'DEFAULT_MAX_ALTERNATIVES',
]
