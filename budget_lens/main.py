#!/usr/bin/env python3
# Path: budget_lens/main.py
"""
Budget Lens - Main Entry Point

Drill into the federal budget tree from the command line and express
any amount in real-world terms.

Data Flow:
    INPUT:   budget_tree.json, comparison_units.json, spending_items.json
    PROCESS: Hierarchy navigation (breadcrumb + URL), comparison matching
    OUTPUT:  Location report, comparison lines, shareable URL

Usage:
    budget-lens                              # Overview at the root
    budget-lens --select dept-defense        # Drill to a node
    budget-lens --path dept-defense,program-weapons-systems --back 1
    budget-lens --select dept-va --compare   # Best unit + alternatives
    budget-lens --unit teacher-salary        # Best spending item for a unit
    budget-lens --validate                   # Data integrity report

Exit codes:
    0  success
    1  data files unreadable or invalid
    2  --unit names an unknown comparison unit
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from budget_lens.config_loader import ConfigLoader
from budget_lens.core.logger import setup_logging, get_input_logger, get_output_logger
from budget_lens.loaders import (
    BudgetDataError,
    BudgetDataLoader,
    read_json,
    read_records,
    spending_items_from_tree,
    validate_comparison_units,
    validate_spending_items,
    validate_tree,
)
from budget_lens.output import NumberFormatter
from budget_lens.process.hierarchy import (
    HierarchyStore,
    InMemoryUrlState,
    parse_path_param,
)
from budget_lens.process.matcher import (
    Alternative,
    ComparisonBuilder,
    MatchEngine,
    MatchResult,
    SpendingItem,
)
from budget_lens.constants import (
    STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO,
    MENU_HEADER, MENU_SEPARATOR, INDENT,
    EXIT_OK, EXIT_DATA_ERROR, EXIT_UNKNOWN_UNIT,
)

BASE_URL = '/budget'

output_logger = get_output_logger('main')


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  BUDGET LENS")
    print("  Federal spending in real-world terms")
    print(MENU_HEADER)
    print()


# ==============================================================================
# NAVIGATION
# ==============================================================================
def build_store(tree, args, config: ConfigLoader) -> HierarchyStore:
    """
    Restore a breadcrumb from --path and apply --select / --back.

    Args:
        tree: Loaded budget tree
        args: Parsed arguments
        config: Configuration loader

    Returns:
        Store positioned where the arguments say
    """
    path_param = config.get('url_path_param')
    url_state = InMemoryUrlState(BASE_URL)
    if args.path:
        url_state.write_path(path_param, parse_path_param(args.path))

    store = HierarchyStore(url_state, path_param=path_param)
    store.load(tree)

    if args.select:
        store.select(args.select)
    for _ in range(args.back):
        store.go_back()

    return store


def print_location(store: HierarchyStore, formatter: NumberFormatter) -> None:
    """
    Print breadcrumb, selected node, its share and its children.

    Args:
        store: Positioned hierarchy store
        formatter: Number formatter
    """
    node = store.selected_node
    crumbs = [store.tree.name] + [n.name for n in store.breadcrumb_nodes]

    print(f"{INDENT}Path:  {' > '.join(crumbs)}")
    print(
        f"{INDENT}Node:  {node.name}  {formatter.format_currency(node.amount)}  "
        f"({formatter.format_percent(store.percentage_of_total() / 100)} of total)"
    )

    children = store.children_of_selected
    if children:
        print(f"\n{INDENT}{'Id':<32} {'Name':<36} {'Amount':>10}")
        print(f"{INDENT}{MENU_SEPARATOR}")
        for child in children:
            marker = '+' if child.has_children else ' '
            print(
                f"{INDENT}{marker}{child.id[:31]:<31} {child.name[:36]:<36} "
                f"{formatter.format_currency(child.amount):>10}"
            )
    else:
        print(f"\n{INDENT}{STATUS_INFO} No further breakdown available.")

    print(f"\n{INDENT}URL:   {store.url_state.url}")
    output_logger.debug(f"Rendered location for {node.id}")


# ==============================================================================
# COMPARISONS
# ==============================================================================
def print_comparison(result: Optional[MatchResult], alternatives: list[Alternative]) -> None:
    """Print a committed pairing and its alternatives."""
    print()
    if result is None:
        print(f"{INDENT}{STATUS_INFO} No usable comparison found.")
        return

    print(f"{INDENT}{STATUS_OK} {result.summary()}")
    print(f"{INDENT}     ({result.formatted_unit_cost} per {result.unit.name_singular})")
    if alternatives:
        print(f"\n{INDENT}Also:")
        for alternative in alternatives:
            print(f"{INDENT}  - {alternative.item.name}: {alternative.formatted_preview}")


def compare_selected(store: HierarchyStore, units, engine: MatchEngine) -> None:
    """Express the selected node in its best unit."""
    node = store.selected_node
    items = spending_items_from_tree(store.tree)
    if store.selected_id is None:
        items.insert(0, SpendingItem(id=node.id, name=node.name, amount=node.amount))

    builder = ComparisonBuilder(units, items, engine)
    builder.set_spending(node.id)
    print_comparison(builder.result, builder.unit_alternatives)


def compare_unit(unit_id: str, units, spending_items, engine: MatchEngine) -> int:
    """Find the spending item that reads best in a given unit."""
    builder = ComparisonBuilder(units, spending_items, engine)
    if builder.find_unit(unit_id) is None:
        print(f"\n{INDENT}{STATUS_FAIL} Unknown comparison unit: {unit_id}")
        return EXIT_UNKNOWN_UNIT

    builder.set_unit(unit_id)
    print_comparison(builder.result, builder.spending_alternatives)
    return EXIT_OK


# ==============================================================================
# VALIDATION
# ==============================================================================
def run_validation(tree_path: Path, units_path: Path, spending_path: Path) -> int:
    """
    Validate the raw data files and print every issue.

    Returns:
        EXIT_OK when no file has errors, EXIT_DATA_ERROR otherwise
    """
    results = [
        ('Budget tree', validate_tree(read_json(tree_path))),
        ('Comparison units', validate_comparison_units(read_records(units_path))),
        ('Spending items', validate_spending_items(read_records(spending_path))),
    ]

    all_valid = True
    for label, result in results:
        status = STATUS_OK if result.is_valid else STATUS_FAIL
        print(
            f"{INDENT}{status} {label}: {result.valid_items}/{result.total_items} clean, "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        for issue in result.errors:
            print(f"{INDENT}    {STATUS_FAIL} {issue.item_id} ({issue.field}): {issue.message}")
        for issue in result.warnings:
            print(f"{INDENT}    {STATUS_WARN} {issue.item_id} ({issue.field}): {issue.message}")
        all_valid = all_valid and result.is_valid

    return EXIT_OK if all_valid else EXIT_DATA_ERROR


# ==============================================================================
# ENTRY POINT
# ==============================================================================
def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='budget-lens',
        description='Budget Lens - federal spending in real-world terms',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  budget-lens --select dept-defense             Drill to Defense
  budget-lens --path dept-va --compare          Express VA spending in units
  budget-lens --unit teacher-salary             Best spending item for a unit
  budget-lens --validate                        Check the data files
        """
    )

    parser.add_argument('--tree', type=Path, help='Budget tree JSON file')
    parser.add_argument('--units', type=Path, help='Comparison units JSON file')
    parser.add_argument('--spending', type=Path, help='Spending items JSON file')

    parser.add_argument(
        '--path', '-p',
        type=str,
        help='Breadcrumb to restore, comma-separated node ids'
    )
    parser.add_argument('--select', '-s', type=str, help='Node id to drill to')
    parser.add_argument(
        '--back', '-b',
        type=int,
        default=0,
        help='Levels to go back after selecting'
    )

    parser.add_argument(
        '--compare', '-c',
        action='store_true',
        help='Express the selected node in its best comparison unit'
    )
    parser.add_argument('--unit', '-u', type=str, help='Comparison unit id to match spending to')
    parser.add_argument(
        '--validate',
        action='store_true',
        help='Validate the data files and exit'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner'
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for budget-lens.

    Args:
        argv: Argument list (sys.argv[1:] if None)

    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)

    config = ConfigLoader()
    setup_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level'),
        console_output=config.get('log_console'),
    )
    logger = get_input_logger('main')
    logger.debug(f"Arguments: {vars(args)}")

    if not args.quiet:
        print_banner()

    tree_path = args.tree or config.data_file('tree_file')
    units_path = args.units or config.data_file('units_file')
    spending_path = args.spending or config.data_file('spending_file')

    try:
        if args.validate:
            return run_validation(tree_path, units_path, spending_path)

        loader = BudgetDataLoader(config)
        tree = loader.load_tree(tree_path)

        formatter = NumberFormatter()
        store = build_store(tree, args, config)
        if store.error:
            print(f"{INDENT}{STATUS_WARN} {store.error}")
        print_location(store, formatter)

        if not (args.compare or args.unit):
            return EXIT_OK

        engine = MatchEngine(formatter, max_alternatives=config.get('max_alternatives'))
        units = loader.load_units(units_path)

        if args.compare:
            compare_selected(store, units, engine)
        if args.unit:
            return compare_unit(args.unit, units, loader.load_spending(spending_path), engine)
        return EXIT_OK

    except BudgetDataError as e:
        logger.error(str(e))
        print(f"\n{STATUS_FAIL} Data error: {e}")
        return EXIT_DATA_ERROR

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
