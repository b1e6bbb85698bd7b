# Path: budget_lens/loaders/data_validator.py
"""
Data Validator

Integrity checks over raw data-file records, before they are turned
into objects. Nothing here raises: every problem becomes a
ValidationIssue, split into errors and warnings.

Errors:
    missing required field, duplicate id, non-numeric / non-positive /
    non-finite amount or cost, unknown tier, unknown cost period, an id,
    category, tier or period that is not a string, and for trees every
    structural problem the loader refuses (non-object root or child,
    parentId that contradicts the nesting, depth over MAX_TREE_DEPTH)
Warnings:
    unknown unit category, fiscal year outside 2000-2100, id that is
    not lowercase-with-hyphens

Example:
    result = validate_comparison_units(read_records(units_path))
    if not result.is_valid:
        for issue in result.errors:
            print(issue)
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from budget_lens.core.logger import get_input_logger
from budget_lens.process.hierarchy.constants import MAX_TREE_DEPTH
from budget_lens.process.matcher.models import CostPeriod, SpendingTier, UnitCategory

logger = get_input_logger('data_validator')

SEVERITY_ERROR = 'error'
SEVERITY_WARNING = 'warning'

ID_PATTERN = re.compile(r'^[a-z0-9-]+$')
MIN_FISCAL_YEAR = 2000
MAX_FISCAL_YEAR = 2100

REQUIRED_SPENDING_FIELDS = ('id', 'name', 'amount')
REQUIRED_UNIT_FIELDS = ('id', 'name', 'category')
REQUIRED_NODE_FIELDS = ('id', 'name', 'amount')


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a record."""
    item_id: str
    item_name: str
    field: str
    message: str
    severity: str = SEVERITY_ERROR

    def __str__(self) -> str:
        return f"[{self.severity}] {self.item_id} ({self.field}): {self.message}"


@dataclass
class ValidationResult:
    """
    Outcome of validating one collection.

    Attributes:
        errors: Issues that make a record unusable
        warnings: Issues worth fixing that do not block use
        total_items: Records examined
        valid_items: Records with no issue of either severity
    """
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    total_items: int = 0
    valid_items: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, issue: ValidationIssue) -> None:
        if issue.severity == SEVERITY_WARNING:
            self.warnings.append(issue)
        else:
            self.errors.append(issue)


# ==============================================================================
# SHARED CHECKS
# ==============================================================================
def _is_blank(value: Any) -> bool:
    return value is None or value == ''


def _check_string(value: Any, label: str, field_name: str, issue) -> list[ValidationIssue]:
    if value is None or isinstance(value, str):
        return []
    return [issue(field_name, f"{label} must be a string, got: {type(value).__name__}")]


def _check_required(record: dict, fields: Iterable[str], issue) -> list[ValidationIssue]:
    return [
        issue(name, f"Missing required field: {name}")
        for name in fields
        if _is_blank(record.get(name))
    ]


def _check_positive(value: Any, label: str, field_name: str, issue) -> list[ValidationIssue]:
    if value is None:
        return []
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return [issue(field_name, f"{label} must be a number, got: {type(value).__name__}")]
    if math.isnan(value) or math.isinf(value):
        return [issue(field_name, f"{label} must be a finite number, got: {value}")]
    if value <= 0:
        return [issue(field_name, f"{label} must be positive, got: {value}")]
    return []


def _check_id_format(item_id: Any, issue) -> list[ValidationIssue]:
    if isinstance(item_id, str) and item_id and not ID_PATTERN.match(item_id):
        return [issue(
            'id',
            f"ID should be lowercase with hyphens only, got: {item_id}",
            SEVERITY_WARNING,
        )]
    return []


def _check_fiscal_year(year: Any, issue) -> list[ValidationIssue]:
    if year is None:
        return []
    if isinstance(year, bool) or not isinstance(year, (int, float)):
        return [issue('fiscalYear', f"Fiscal year must be a number, got: {type(year).__name__}")]
    if math.isfinite(year):
        if year < MIN_FISCAL_YEAR or year > MAX_FISCAL_YEAR:
            return [issue(
                'fiscalYear',
                f"Fiscal year {year} seems unreasonable "
                f"(expected {MIN_FISCAL_YEAR}-{MAX_FISCAL_YEAR})",
                SEVERITY_WARNING,
            )]
    return []


def _issue_factory(record: dict, default_name: str):
    item_id = str(record.get('id') or 'unknown')
    item_name = str(record.get('name') or default_name)

    def issue(field_name: str, message: str, severity: str = SEVERITY_ERROR) -> ValidationIssue:
        return ValidationIssue(item_id, item_name, field_name, message, severity)

    return issue


def _validate_collection(
    records: list[dict],
    check_record,
    kind: str,
    extra_issues: Iterable[ValidationIssue] = (),
) -> ValidationResult:
    result = ValidationResult(total_items=len(records))
    seen: dict[str, int] = {}

    for index, record in enumerate(records):
        issues = check_record(index, record)
        if not issues:
            result.valid_items += 1
        for issue in issues:
            result.add(issue)

        item_id = record.get('id')
        # non-string ids are reported by check_record
        if item_id and isinstance(item_id, str):
            if item_id in seen:
                result.add(ValidationIssue(
                    str(item_id),
                    str(record.get('name') or 'Unknown'),
                    'id',
                    f"Duplicate ID found at indices {seen[item_id]} and {index}",
                ))
            else:
                seen[item_id] = index

    for issue in extra_issues:
        result.add(issue)

    logger.info(
        f"Validated {result.total_items} {kind}: "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    for warning in result.warnings:
        logger.warning(str(warning))
    return result


# ==============================================================================
# SPENDING ITEMS
# ==============================================================================
def _check_spending_item(index: int, record: dict) -> list[ValidationIssue]:
    issue = _issue_factory(record, 'Unknown Item')
    issues = _check_required(record, REQUIRED_SPENDING_FIELDS, issue)
    issues += _check_string(record.get('id'), 'ID', 'id', issue)
    issues += _check_positive(record.get('amount'), 'Amount', 'amount', issue)

    tier = record.get('tier')
    issues += _check_string(tier, 'Tier', 'tier', issue)
    if tier and isinstance(tier, str) and tier not in {t.value for t in SpendingTier}:
        allowed = ', '.join(t.value for t in SpendingTier)
        issues.append(issue('tier', f"Invalid tier value: {tier}. Must be one of: {allowed}"))

    issues += _check_fiscal_year(record.get('fiscalYear'), issue)
    issues += _check_id_format(record.get('id'), issue)
    return issues


def validate_spending_items(records: list[dict]) -> ValidationResult:
    """Validate raw spending item records."""
    return _validate_collection(records, _check_spending_item, 'spending items')


# ==============================================================================
# COMPARISON UNITS
# ==============================================================================
def _check_comparison_unit(index: int, record: dict) -> list[ValidationIssue]:
    issue = _issue_factory(record, 'Unknown Unit')
    issues = _check_required(record, REQUIRED_UNIT_FIELDS, issue)
    issues += _check_string(record.get('id'), 'ID', 'id', issue)

    cost: Optional[Any] = record.get('costPerUnit')
    if cost is None:
        cost = record.get('cost')
    if cost is None:
        issues.append(issue('costPerUnit/cost', "Unit must have either costPerUnit or cost defined"))
    else:
        issues += _check_positive(cost, 'Cost', 'cost', issue)

    category = record.get('category')
    issues += _check_string(category, 'Category', 'category', issue)
    if category and isinstance(category, str) and not UnitCategory.is_known(category):
        issues.append(issue('category', f"Unknown category: {category}", SEVERITY_WARNING))

    period = record.get('period')
    issues += _check_string(period, 'Period', 'period', issue)
    if period and isinstance(period, str) and period not in {p.value for p in CostPeriod}:
        allowed = ', '.join(p.value for p in CostPeriod)
        issues.append(issue('period', f"Invalid period value: {period}. Must be one of: {allowed}"))

    issues += _check_id_format(record.get('id'), issue)
    return issues


def validate_comparison_units(records: list[dict]) -> ValidationResult:
    """Validate raw comparison unit records."""
    return _validate_collection(records, _check_comparison_unit, 'comparison units')


# ==============================================================================
# BUDGET TREE
# ==============================================================================
def _check_optional_number(value: Any, label: str, field_name: str, issue) -> list[ValidationIssue]:
    if value is None:
        return []
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return [issue(field_name, f"{label} must be a number, got: {type(value).__name__}")]
    return []


def _check_tree_node(record: dict, parent_id: Optional[str]) -> list[ValidationIssue]:
    issue = _issue_factory(record, 'Unknown Node')
    issues = _check_required(record, REQUIRED_NODE_FIELDS, issue)

    amount = record.get('amount')
    if amount is not None:
        # zero is a legitimate node amount
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            issues.append(issue('amount', f"Amount must be a number, got: {type(amount).__name__}"))
        elif not math.isfinite(amount) or amount < 0:
            issues.append(issue('amount', f"Amount must be a finite non-negative number, got: {amount}"))

    declared_parent = record.get('parentId')
    if declared_parent is not None and declared_parent != parent_id:
        where = f"'{parent_id}'" if parent_id is not None else "the root position"
        issues.append(issue(
            'parentId',
            f"parentId '{declared_parent}' contradicts nesting under {where}",
        ))

    children = record.get('children')
    if children is not None and not isinstance(children, list):
        issues.append(issue('children', f"Children must be a list, got: {type(children).__name__}"))

    issues += _check_optional_number(
        record.get('percentOfParent'), 'Percent of parent', 'percentOfParent', issue
    )
    issues += _check_optional_number(
        record.get('yearOverYearChange'), 'Year-over-year change', 'yearOverYearChange', issue
    )
    issues += _check_fiscal_year(record.get('fiscalYear'), issue)
    issues += _check_id_format(record.get('id'), issue)
    return issues


def _flatten_tree(root: dict) -> tuple[list[dict], list[Optional[str]], list[ValidationIssue]]:
    """
    Walk a raw tree in pre-order.

    Returns:
        Node records, the parent id each sits under, and structural
        issues (non-object children, depth over MAX_TREE_DEPTH)
    """
    records: list[dict] = []
    parents: list[Optional[str]] = []
    structural: list[ValidationIssue] = []
    too_deep = False

    stack: list[tuple[Any, Optional[str], int]] = [(root, None, 0)]
    while stack:
        record, parent_id, depth = stack.pop()
        if depth > MAX_TREE_DEPTH:
            if not too_deep:
                structural.append(ValidationIssue(
                    str(parent_id), 'Unknown Node', 'children',
                    f"Budget tree deeper than {MAX_TREE_DEPTH} levels",
                ))
                too_deep = True
            continue
        if not isinstance(record, dict):
            structural.append(ValidationIssue(
                str(parent_id), 'Unknown Node', 'children',
                f"Child node must be an object, got: {type(record).__name__}",
            ))
            continue

        records.append(record)
        parents.append(parent_id)

        children = record.get('children') or []
        if isinstance(children, list):
            node_id = record.get('id')
            child_parent = str(node_id) if node_id is not None else None
            stack.extend((child, child_parent, depth + 1) for child in reversed(children))

    return records, parents, structural


def validate_tree(root: Any) -> ValidationResult:
    """
    Validate every node of a raw nested tree, root included.

    Reports the same structural problems BudgetDataLoader.load_tree
    refuses, so a clean result means the tree loads.
    """
    if not isinstance(root, dict):
        result = ValidationResult(total_items=1)
        result.add(ValidationIssue(
            'root', 'Budget tree', 'root',
            f"Tree root must be a JSON object, got: {type(root).__name__}",
        ))
        logger.info("Validated budget tree: root is not an object")
        return result

    records, parents, structural = _flatten_tree(root)
    return _validate_collection(
        records,
        lambda index, record: _check_tree_node(record, parents[index]),
        'budget nodes',
        extra_issues=structural,
    )


__all__ = [
    'ValidationIssue',
    'ValidationResult',
    'validate_spending_items',
    'validate_comparison_units',
    'validate_tree',
    'SEVERITY_ERROR',
    'SEVERITY_WARNING',
]
