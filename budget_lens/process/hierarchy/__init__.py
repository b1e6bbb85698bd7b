# Path: budget_lens/process/hierarchy/__init__.py
"""
Budget Hierarchy Navigation Package

Drill-down navigation over a budget tree with a breadcrumb that can be
shared and restored through the page URL.

Components:
- BudgetNode: Immutable node of the budget tree
- path_resolver: find_node / build_path / walk_path over a tree
- UrlState, InMemoryUrlState: Page-URL collaborator and codec
- HierarchyStore: Selection + breadcrumb state with URL sync
- KeyboardNavigator: Key presses to focus moves and drill intents

Example:
    from budget_lens.process.hierarchy import HierarchyStore, InMemoryUrlState

    store = HierarchyStore(InMemoryUrlState("https://example.org/budget"))
    store.load(tree)
    store.select("army")
    store.breadcrumb_path  # ["dod", "army"]
"""

from budget_lens.process.hierarchy.constants import (
    NavigationState,
    NavKey,
    NavIntent,
    DEFAULT_PATH_PARAM,
)
from budget_lens.process.hierarchy.node import BudgetNode
from budget_lens.process.hierarchy.path_resolver import (
    find_node,
    build_path,
    walk_path,
    resolve_path_nodes,
    index_tree,
)
from budget_lens.process.hierarchy.url_state import (
    UrlState,
    InMemoryUrlState,
    parse_path_param,
    format_path_param,
)
from budget_lens.process.hierarchy.store import HierarchyStore, HierarchyState
from budget_lens.process.hierarchy.keyboard import (
    KeyboardNavigator,
    can_drill_into,
    keyboard_shortcuts,
)

__all__ = [
    # Tree
    'BudgetNode',
    'find_node',
    'build_path',
    'walk_path',
    'resolve_path_nodes',
    'index_tree',
    # URL state
    'UrlState',
    'InMemoryUrlState',
    'parse_path_param',
    'format_path_param',
    'DEFAULT_PATH_PARAM',
    # Store
    'HierarchyStore',
    'HierarchyState',
    'NavigationState',
    # Keyboard
    'KeyboardNavigator',
    'NavKey',
    'NavIntent',
    'can_drill_into',
    'keyboard_shortcuts',
]
