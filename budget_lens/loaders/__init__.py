# Path: budget_lens/loaders/__init__.py
"""
Budget Lens Loaders Package

Readers for the JSON data files, plus integrity checks over their raw
records. This is the only package that touches the filesystem for
budget data; the hierarchy store and matcher receive ready objects.

Example:
    from budget_lens.loaders import BudgetDataLoader, spending_items_from_tree

    loader = BudgetDataLoader()
    tree = loader.load_tree()
    units = loader.load_units()
    items = loader.load_spending() + spending_items_from_tree(tree)
"""

from .budget_data import (
    BudgetDataError,
    BudgetDataLoader,
    read_json,
    read_records,
    node_from_dict,
    unit_from_dict,
    spending_item_from_dict,
    spending_items_from_tree,
)
from .data_validator import (
    ValidationIssue,
    ValidationResult,
    validate_spending_items,
    validate_comparison_units,
    validate_tree,
)

__all__ = [
    # Loading
    'BudgetDataError',
    'BudgetDataLoader',
    'read_json',
    'read_records',
    'node_from_dict',
    'unit_from_dict',
    'spending_item_from_dict',
    'spending_items_from_tree',
    # Validation
    'ValidationIssue',
    'ValidationResult',
    'validate_spending_items',
    'validate_comparison_units',
    'validate_tree',
]
