# Path: budget_lens/loaders/budget_data.py
"""
Budget Data Loader

Reads the JSON data files the dashboard runs on and turns them into
typed objects:
- budget tree file      -> BudgetNode (the root)
- comparison units file -> list[ComparisonUnit]
- spending items file   -> list[SpendingItem]

RESPONSIBILITY: Parse and check structure. Anything that would make
the tree ambiguous (duplicate ids, a parentId that disagrees with the
nesting, runaway depth) raises BudgetDataError. Softer problems, such
as a unit with a zero cost or an unknown category, load as-is; the
matcher ignores unusable units and data_validator reports the rest.

File shapes (camelCase keys, as exported by the budget pipeline):
    budget_tree.json        {"id": ..., "name": ..., "amount": ..., "children": [...]}
    comparison_units.json   [{"id": ..., "name": ..., "nameSingular": ..., "costPerUnit": ...}]
    spending_items.json     [{"id": ..., "name": ..., "amount": ..., "tier": ...}]

Units may carry "cost" instead of "costPerUnit"; costPerUnit wins
when both are present.
"""

import json
import math
from pathlib import Path
from typing import Any, Optional

from budget_lens.config_loader import ConfigLoader
from budget_lens.core.logger import get_input_logger
from budget_lens.process.hierarchy.constants import MAX_TREE_DEPTH
from budget_lens.process.hierarchy.node import BudgetNode
from budget_lens.process.matcher.models import (
    ComparisonUnit,
    SpendingItem,
    SpendingTier,
    UnitCategory,
)

logger = get_input_logger('budget_data')


class BudgetDataError(ValueError):
    """Raised when a data file cannot be turned into budget objects."""


# ==============================================================================
# RAW FILE ACCESS
# ==============================================================================
def read_json(path: Path) -> Any:
    """
    Read a JSON data file.

    Args:
        path: File to read

    Returns:
        Decoded JSON value

    Raises:
        BudgetDataError: If the file is missing or not valid JSON
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise BudgetDataError(f"Data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise BudgetDataError(f"Invalid JSON in {path}: {e}") from e


def read_records(path: Path) -> list[dict[str, Any]]:
    """
    Read a JSON file holding a list of objects.

    Raises:
        BudgetDataError: If the top level is not a list of objects
    """
    data = read_json(path)
    if not isinstance(data, list):
        raise BudgetDataError(f"{path}: expected a JSON list, got {type(data).__name__}")
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise BudgetDataError(f"{path}: entry {index} is not an object")
    return data


# ==============================================================================
# FIELD HELPERS
# ==============================================================================
def _require(record: dict[str, Any], field: str, where: str) -> Any:
    value = record.get(field)
    if value is None or value == '':
        raise BudgetDataError(f"{where}: missing required field '{field}'")
    return value


def _number(value: Any, field: str, where: str) -> Optional[float]:
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BudgetDataError(f"{where}: field '{field}' must be a number, got {value!r}")
    return float(value)


def _amount(record: dict[str, Any], where: str) -> float:
    amount = _number(_require(record, 'amount', where), 'amount', where)
    if not math.isfinite(amount) or amount < 0:
        raise BudgetDataError(f"{where}: amount must be a finite non-negative number")
    return amount


# ==============================================================================
# RECORD CONVERSION
# ==============================================================================
def node_from_dict(data: dict[str, Any]) -> BudgetNode:
    """
    Build a BudgetNode tree from its nested dictionary form.

    Children missing a parentId inherit their actual parent's id.

    Args:
        data: Root dictionary with nested 'children'

    Returns:
        Root BudgetNode

    Raises:
        BudgetDataError: On missing fields, duplicate ids, a parentId
                         that contradicts nesting, or excessive depth
    """
    seen: set[str] = set()

    def build(record: Any, parent_id: Optional[str], depth: int) -> BudgetNode:
        if depth > MAX_TREE_DEPTH:
            raise BudgetDataError(f"Budget tree deeper than {MAX_TREE_DEPTH} levels")
        if not isinstance(record, dict):
            raise BudgetDataError(f"Budget node under '{parent_id}' is not an object")

        node_id = str(_require(record, 'id', f"node under '{parent_id}'"))
        where = f"node '{node_id}'"
        if node_id in seen:
            raise BudgetDataError(f"Duplicate budget node id '{node_id}'")
        seen.add(node_id)

        declared_parent = record.get('parentId')
        if declared_parent is not None and declared_parent != parent_id:
            raise BudgetDataError(
                f"{where}: parentId '{declared_parent}' but nested under '{parent_id}'"
            )

        children_data = record.get('children') or []
        if not isinstance(children_data, list):
            raise BudgetDataError(f"{where}: 'children' must be a list")

        fiscal_year = _number(record.get('fiscalYear'), 'fiscalYear', where)
        return BudgetNode(
            id=node_id,
            name=str(_require(record, 'name', where)),
            amount=_amount(record, where),
            parent_id=parent_id,
            fiscal_year=int(fiscal_year) if fiscal_year is not None else None,
            percent_of_parent=_number(record.get('percentOfParent'), 'percentOfParent', where),
            year_over_year_change=_number(
                record.get('yearOverYearChange'), 'yearOverYearChange', where
            ),
            children=tuple(build(child, node_id, depth + 1) for child in children_data),
        )

    return build(data, None, 0)


def unit_from_dict(record: dict[str, Any]) -> ComparisonUnit:
    """
    Build a ComparisonUnit from its dictionary form.

    Zero or negative costs load unchanged; such units are skipped by
    the matcher.

    Raises:
        BudgetDataError: On a missing id/name or a non-numeric cost
    """
    unit_id = str(_require(record, 'id', 'comparison unit'))
    where = f"unit '{unit_id}'"
    name = str(_require(record, 'name', where))

    cost = record.get('costPerUnit')
    if cost is None:
        cost = record.get('cost')

    return ComparisonUnit(
        id=unit_id,
        name=name,
        name_singular=str(record.get('nameSingular') or name),
        category=str(record.get('category') or UnitCategory.MISC.value),
        cost_per_unit=_number(cost, 'costPerUnit', where),
        source=record.get('source'),
        source_url=record.get('sourceUrl'),
        period=record.get('period'),
        icon=record.get('icon'),
        description=record.get('description'),
    )


def spending_item_from_dict(record: dict[str, Any]) -> SpendingItem:
    """
    Build a SpendingItem from its dictionary form.

    Raises:
        BudgetDataError: On missing fields, a bad amount or an unknown tier
    """
    item_id = str(_require(record, 'id', 'spending item'))
    where = f"spending item '{item_id}'"

    tier_value = record.get('tier')
    try:
        tier = SpendingTier(tier_value) if tier_value else None
    except ValueError as e:
        raise BudgetDataError(f"{where}: unknown tier '{tier_value}'") from e

    return SpendingItem(
        id=item_id,
        name=str(_require(record, 'name', where)),
        amount=_amount(record, where),
        category=record.get('category'),
        source=record.get('source'),
        tier=tier,
    )


def _check_unique(ids: list[str], kind: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise BudgetDataError(f"Duplicate {kind} id '{item_id}'")
        seen.add(item_id)


# ==============================================================================
# TREE -> SPENDING ITEMS
# ==============================================================================
def spending_items_from_tree(tree: BudgetNode) -> list[SpendingItem]:
    """
    Offer every node below the root as a spending item.

    Direct children of the root are departments; anything deeper is a
    program. Order follows a pre-order walk.

    Args:
        tree: Root of the budget tree

    Returns:
        Spending items, root excluded
    """
    items = []
    for node, depth in tree.iter_with_depth():
        if depth == 0:
            continue
        tier = SpendingTier.DEPARTMENT if depth == 1 else SpendingTier.PROGRAM
        items.append(SpendingItem(id=node.id, name=node.name, amount=node.amount, tier=tier))
    return items


# ==============================================================================
# LOADER
# ==============================================================================
class BudgetDataLoader:
    """
    Loads the configured data files.

    Paths default to ConfigLoader's data_dir and file names; explicit
    paths override them per call.

    Example:
        loader = BudgetDataLoader()
        tree = loader.load_tree()
        units = loader.load_units()
        items = loader.load_spending(Path('my_items.json'))
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize data loader.

        Args:
            config: ConfigLoader instance (created if None)
        """
        self.config = config or ConfigLoader()
        self.logger = logger

    def load_tree(self, path: Optional[Path] = None) -> BudgetNode:
        """Load the budget tree."""
        path = Path(path) if path else self.config.data_file('tree_file')
        data = read_json(path)
        if not isinstance(data, dict):
            raise BudgetDataError(f"{path}: expected a JSON object for the tree root")
        tree = node_from_dict(data)
        self.logger.info(f"Loaded budget tree from {path} ({tree.descendant_count + 1} nodes)")
        return tree

    def load_units(self, path: Optional[Path] = None) -> list[ComparisonUnit]:
        """Load comparison units."""
        path = Path(path) if path else self.config.data_file('units_file')
        units = [unit_from_dict(record) for record in read_records(path)]
        _check_unique([unit.id for unit in units], 'comparison unit')

        unusable = [unit.id for unit in units if not unit.is_valid]
        if unusable:
            self.logger.warning(f"Units without a positive cost will never match: {unusable}")
        self.logger.info(f"Loaded {len(units)} comparison units from {path}")
        return units

    def load_spending(self, path: Optional[Path] = None) -> list[SpendingItem]:
        """Load spending items."""
        path = Path(path) if path else self.config.data_file('spending_file')
        items = [spending_item_from_dict(record) for record in read_records(path)]
        _check_unique([item.id for item in items], 'spending item')
        self.logger.info(f"Loaded {len(items)} spending items from {path}")
        return items


__all__ = [
    'BudgetDataError',
    'BudgetDataLoader',
    'read_json',
    'read_records',
    'node_from_dict',
    'unit_from_dict',
    'spending_item_from_dict',
    'spending_items_from_tree',
]
