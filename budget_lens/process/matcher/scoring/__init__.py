# Path: budget_lens/process/matcher/scoring/__init__.py
"""
Scoring Module

- impact_score: memorability of an (amount, unit) pairing
- score_count: the same rating applied to a raw unit count
- unit_count: amount / cost_per_unit with invalid units filtered out
"""

from .impact import impact_score, score_count, unit_count

__all__ = [
    'impact_score',
    'score_count',
    'unit_count',
]
