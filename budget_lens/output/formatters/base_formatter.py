# Path: budget_lens/output/formatters/base_formatter.py
"""
Base Formatter

Abstract formatting collaborator. The matching engine only needs two
strings from it: a currency amount and a plain count. Swap in another
subclass to change locale or style without touching the engine.
"""

from abc import ABC, abstractmethod


class DisplayFormatter(ABC):
    """Abstract base for display formatters."""

    @abstractmethod
    def format_currency(self, amount: float) -> str:
        """Dollar amount for display (e.g., '$842.0B')."""

    @abstractmethod
    def format_number(self, value: float) -> str:
        """Plain number with separators (e.g., '10,525')."""


__all__ = ['DisplayFormatter']
