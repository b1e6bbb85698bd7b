# Path: budget_lens/output/__init__.py
"""
Budget Lens OUTPUT layer.

Display strings for amounts and counts. The navigation and matching
core calls into these formatters and never formats numbers itself.
"""

from .formatters import DisplayFormatter, NumberFormatter

__all__ = ['DisplayFormatter', 'NumberFormatter']
