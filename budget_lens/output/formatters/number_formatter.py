# Path: budget_lens/output/formatters/number_formatter.py
"""
Number Formatter

US-English display strings for budget figures:

    format_currency(842_000_000_000)   -> "$842.0B"
    format_number(1234567)             -> "1,234,567"
    format_compact(456_789)            -> "456.79K"
    format_percent(0.1234)             -> "12.34%"
    format_large_number(1_500_000)     -> "1.5 million"
"""

import math

from .base_formatter import DisplayFormatter

THOUSAND = 1_000
MILLION = 1_000_000
BILLION = 1_000_000_000
TRILLION = 1_000_000_000_000

CURRENCY_SUFFIXES = ((BILLION, 'B'), (MILLION, 'M'), (THOUSAND, 'K'))
WORD_SUFFIXES = (
    (TRILLION, 'trillion'),
    (BILLION, 'billion'),
    (MILLION, 'million'),
    (THOUSAND, 'thousand'),
)


class NumberFormatter(DisplayFormatter):
    """Default formatting collaborator."""

    def __init__(self, symbol: str = '$'):
        self.symbol = symbol

    def format_currency(self, amount: float) -> str:
        """Compact currency with one decimal and a B/M/K suffix."""
        for threshold, suffix in CURRENCY_SUFFIXES:
            if amount >= threshold:
                return f"{self.symbol}{amount / threshold:.1f}{suffix}"
        return f"{self.symbol}{amount:.0f}"

    def format_number(self, value: float) -> str:
        """Thousands separators, up to two decimals."""
        if float(value).is_integer():
            return f"{int(value):,}"
        return f"{value:,.2f}".rstrip('0').rstrip('.')

    def format_compact(self, value: float) -> str:
        """Two decimals (trailing .00 dropped) with a B/M/K suffix."""
        sign = '-' if value < 0 else ''
        magnitude = abs(value)
        for threshold, suffix in CURRENCY_SUFFIXES:
            if magnitude >= threshold:
                text = f"{magnitude / threshold:.2f}"
                if text.endswith('.00'):
                    text = text[:-3]
                return f"{sign}{text}{suffix}"
        return f"{sign}{magnitude:g}"

    def format_percent(self, ratio: float, decimals: int = 2) -> str:
        """Ratio as a percentage (0.1234 -> '12.34%')."""
        return f"{ratio * 100:,.{decimals}f}%"

    def format_decimal(self, value: float) -> str:
        """Integer when near-whole, else one or two decimals."""
        if abs(value - round(value)) < 0.005:
            return f"{round(value):,}"
        rounded = round(value * 10) / 10
        if abs(value - rounded) < 0.05:
            return f"{rounded:,.1f}"
        return f"{value:,.2f}"

    def format_large_number(self, value: float) -> str:
        """Scale word suffix ('1.5 million'); NaN and infinity pass through."""
        if not math.isfinite(value):
            return str(value)
        magnitude = abs(value)
        for threshold, word in WORD_SUFFIXES:
            if magnitude >= threshold:
                return f"{self.format_decimal(value / threshold)} {word}"
        return self.format_decimal(value)


__all__ = ['NumberFormatter']
