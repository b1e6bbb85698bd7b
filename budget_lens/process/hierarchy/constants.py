# Path: budget_lens/process/hierarchy/constants.py
"""
Constants for Budget Hierarchy Navigation

Defines navigation states, URL encoding constants, and the
keyboard map used by the drill-down navigator.
"""

from enum import Enum
from typing import Final


# ==============================================================================
# NAVIGATION STATE
# ==============================================================================
class NavigationState(str, Enum):
    """
    Position of the hierarchy store.

    AT_ROOT: Nothing drilled into (empty breadcrumb)
    AT_NODE: A node below the root is selected
    """
    AT_ROOT = "at_root"
    AT_NODE = "at_node"


# ==============================================================================
# URL STATE
# ==============================================================================
DEFAULT_PATH_PARAM: Final[str] = "path"
"""Query parameter carrying the breadcrumb path."""

PATH_SEPARATOR: Final[str] = ","
"""Separator between node ids inside the path parameter."""


# ==============================================================================
# TREE LIMITS
# ==============================================================================
MAX_TREE_DEPTH: Final[int] = 50
"""Deepest tree the loaders accept."""


# ==============================================================================
# KEYBOARD NAVIGATION
# ==============================================================================
class NavKey(str, Enum):
    """Key names understood by the keyboard navigator (browser key values)."""
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    HOME = "Home"
    END = "End"
    ENTER = "Enter"
    SPACE = " "
    ESCAPE = "Escape"
    BACKSPACE = "Backspace"
    TAB = "Tab"


class NavIntent(str, Enum):
    """What a key press asks the navigator to do."""
    MOVE_PREVIOUS = "move_previous"
    MOVE_NEXT = "move_next"
    MOVE_FIRST = "move_first"
    MOVE_LAST = "move_last"
    ACTIVATE = "activate"
    CANCEL = "cancel"
    BACK = "back"
    FOCUS_AWAY = "focus_away"


KEY_INTENTS: Final[dict[str, NavIntent]] = {
    NavKey.ARROW_UP.value: NavIntent.MOVE_PREVIOUS,
    NavKey.ARROW_LEFT.value: NavIntent.MOVE_PREVIOUS,
    NavKey.ARROW_DOWN.value: NavIntent.MOVE_NEXT,
    NavKey.ARROW_RIGHT.value: NavIntent.MOVE_NEXT,
    NavKey.HOME.value: NavIntent.MOVE_FIRST,
    NavKey.END.value: NavIntent.MOVE_LAST,
    NavKey.ENTER.value: NavIntent.ACTIVATE,
    NavKey.SPACE.value: NavIntent.ACTIVATE,
    NavKey.ESCAPE.value: NavIntent.CANCEL,
    NavKey.BACKSPACE.value: NavIntent.BACK,
    NavKey.TAB.value: NavIntent.FOCUS_AWAY,
}

TEXT_ENTRY_TARGETS: Final[frozenset[str]] = frozenset({"input", "textarea", "select"})
"""Focus targets (element tag names) that own the keyboard for free-text typing."""

NO_FOCUS: Final[int] = -1
"""Focused index meaning nothing is focused."""


__all__ = [
    'NavigationState',
    'NavKey',
    'NavIntent',
    'KEY_INTENTS',
    'TEXT_ENTRY_TARGETS',
    'NO_FOCUS',
    'DEFAULT_PATH_PARAM',
    'PATH_SEPARATOR',
    'MAX_TREE_DEPTH',
]
