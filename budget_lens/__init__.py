# Path: budget_lens/__init__.py
"""
Budget Lens - Public Budget Visualization Core

Navigation and comparison logic behind the budget dashboard:
- process.hierarchy: drill-down tree navigation with URL-restorable breadcrumbs
- process.matcher: picks the most memorable real-world unit for a dollar amount
- loaders: reads budget trees and comparison candidates from JSON
- output.formatters: currency and number display strings
"""

__version__ = '0.4.0'

__all__ = ['__version__']
