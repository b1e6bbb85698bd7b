# Path: budget_lens/process/matcher/engine/__init__.py
"""
Matcher Engine

- MatchEngine: best matches, alternatives and results
- ComparisonBuilder: two-sided selection with auto-fill
"""

from .match_engine import MatchEngine, DEFAULT_MAX_ALTERNATIVES
from .comparison_builder import ComparisonBuilder

__all__ = [
    'MatchEngine',
    'ComparisonBuilder',
    'DEFAULT_MAX_ALTERNATIVES',
]
