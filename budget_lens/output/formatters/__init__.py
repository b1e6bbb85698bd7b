# Path: budget_lens/output/formatters/__init__.py
"""
Output Formatters

- DisplayFormatter: interface the matching engine formats through
- NumberFormatter: US-English currency / number / percent strings
"""

from .base_formatter import DisplayFormatter
from .number_formatter import NumberFormatter

__all__ = ['DisplayFormatter', 'NumberFormatter']
