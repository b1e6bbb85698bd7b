# Path: budget_lens/process/hierarchy/keyboard.py
"""
Keyboard Navigator - key presses to drill-down intents.

Works over whatever flat list of items the caller is showing right now
(one drill level), independent of the hierarchy store's own breadcrumb.
Items only need an ``id`` and a ``children`` sequence, so BudgetNode
works directly.

Key map:
    ArrowUp / ArrowLeft     previous item (wraps to last)
    ArrowDown / ArrowRight  next item (wraps to first)
    Home / End              first / last item
    Enter / Space           drill into focused item, or focus the first one
    Escape                  clear focus, or drill out when nothing is focused
    Backspace               drill out
    Tab                     clear focus (default focus move not prevented)

Nothing is handled while a text-entry control has focus.
"""

from typing import Any, Callable, Optional, Sequence

from budget_lens.core.logger import get_process_logger
from budget_lens.process.hierarchy.constants import (
    KEY_INTENTS,
    NO_FOCUS,
    TEXT_ENTRY_TARGETS,
    NavIntent,
)

logger = get_process_logger('hierarchy.keyboard')


def can_drill_into(item: Any) -> bool:
    """Check if an item exposes at least one child."""
    children = getattr(item, 'children', None)
    return bool(children)


def keyboard_shortcuts() -> dict[str, list[dict[str, Any]]]:
    """
    Shortcut hints for a help overlay.

    Returns:
        Dictionary with 'navigation' and 'actions' entries
    """
    return {
        'navigation': [
            {'keys': ['↑', '↓', '←', '→'], 'description': 'Navigate between items'},
            {'keys': ['Home'], 'description': 'Jump to first item'},
            {'keys': ['End'], 'description': 'Jump to last item'},
        ],
        'actions': [
            {'keys': ['Enter', 'Space'], 'description': 'Drill into selected item'},
            {'keys': ['Escape'], 'description': 'Clear selection or go back'},
            {'keys': ['Backspace'], 'description': 'Go back to parent level'},
            {'keys': ['Tab'], 'description': 'Move between panels'},
        ],
    }


class KeyboardNavigator:
    """
    Focus tracking and drill intents for one level of items.

    Example:
        nav = KeyboardNavigator(
            items=store.children_of_selected,
            on_drill_in=store.select,
            on_drill_out=store.go_back,
            can_drill_out=store.selected_id is not None,
        )
        nav.handle_key("ArrowDown")  # focus index 0
        nav.handle_key("Enter")      # store.select(<first child id>)
        nav.set_items(store.children_of_selected, can_drill_out=True)
    """

    def __init__(
        self,
        items: Sequence[Any],
        on_drill_in: Callable[[str], None],
        on_drill_out: Callable[[], None],
        can_drill_out: bool = False,
        enabled: bool = True,
    ):
        self._items: list[Any] = list(items)
        self._on_drill_in = on_drill_in
        self._on_drill_out = on_drill_out
        self.can_drill_out = can_drill_out
        self.enabled = enabled
        self._focused_index = NO_FOCUS

    # ===========================================================================
    # STATE
    # ===========================================================================
    @property
    def items(self) -> list[Any]:
        return list(self._items)

    @property
    def focused_index(self) -> int:
        """Focused position, -1 when nothing is focused."""
        return self._focused_index

    @focused_index.setter
    def focused_index(self, index: int) -> None:
        self._focused_index = index

    @property
    def focused_item(self) -> Optional[Any]:
        """Focused item, None when the index is out of range."""
        if 0 <= self._focused_index < len(self._items):
            return self._items[self._focused_index]
        return None

    def set_items(self, items: Sequence[Any], can_drill_out: Optional[bool] = None) -> None:
        """
        Supply the list shown this frame.

        Focus resets whenever the list differs from the previous one
        (compared by item ids in order).

        Args:
            items: Items at the current drill level
            can_drill_out: New drill-out permission, unchanged if None
        """
        new_items = list(items)
        if [getattr(i, 'id', None) for i in new_items] != [
            getattr(i, 'id', None) for i in self._items
        ]:
            self._focused_index = NO_FOCUS
        self._items = new_items
        if can_drill_out is not None:
            self.can_drill_out = can_drill_out

    def reset_focus(self) -> None:
        """Clear focus."""
        self._focused_index = NO_FOCUS

    # ===========================================================================
    # MOVES
    # ===========================================================================
    def move_previous(self) -> None:
        """Focus the previous item, wrapping from the first to the last."""
        if not self._items:
            return
        if self._focused_index <= 0:
            self._focused_index = len(self._items) - 1
        else:
            self._focused_index -= 1

    def move_next(self) -> None:
        """Focus the next item, wrapping from the last to the first."""
        if not self._items:
            return
        if self._focused_index >= len(self._items) - 1:
            self._focused_index = 0
        else:
            self._focused_index += 1

    def move_first(self) -> None:
        if self._items:
            self._focused_index = 0

    def move_last(self) -> None:
        if self._items:
            self._focused_index = len(self._items) - 1

    # ===========================================================================
    # DRILLING
    # ===========================================================================
    def drill_in(self) -> bool:
        """
        Drill into the focused item if it has children.

        Focus is reset later, when the caller supplies the deeper list.

        Returns:
            True if the drill-in callback was invoked
        """
        item = self.focused_item
        if item is None or not can_drill_into(item):
            return False
        logger.debug(f"Drill in: {item.id}")
        self._on_drill_in(item.id)
        return True

    def drill_out(self) -> bool:
        """
        Drill out to the parent level when permitted.

        Returns:
            True if the drill-out callback was invoked
        """
        if not self.can_drill_out:
            return False
        logger.debug("Drill out")
        self._on_drill_out()
        return True

    def activate(self) -> None:
        """Drill into the focused item, or focus the first item if none is focused."""
        if self._focused_index >= 0:
            self.drill_in()
        elif self._items:
            self._focused_index = 0

    def cancel(self) -> None:
        """Clear focus if set, otherwise drill out."""
        if self._focused_index >= 0:
            self.reset_focus()
        else:
            self.drill_out()

    # ===========================================================================
    # KEY DISPATCH
    # ===========================================================================
    def handle_key(self, key: str, focus_target: Optional[str] = None) -> bool:
        """
        Handle one key press.

        Args:
            key: Browser key value (e.g. "ArrowDown", "Enter", " ")
            focus_target: Tag name of the element holding UI focus

        Returns:
            True if the key was consumed (caller should prevent the default)
        """
        if not self.enabled:
            return False
        if focus_target is not None and focus_target.lower() in TEXT_ENTRY_TARGETS:
            return False

        intent = KEY_INTENTS.get(key)
        if intent is None:
            return False

        logger.debug(f"Key {key!r} -> {intent.value} (focus={self._focused_index})")

        if intent == NavIntent.MOVE_PREVIOUS:
            self.move_previous()
        elif intent == NavIntent.MOVE_NEXT:
            self.move_next()
        elif intent == NavIntent.MOVE_FIRST:
            self.move_first()
        elif intent == NavIntent.MOVE_LAST:
            self.move_last()
        elif intent == NavIntent.ACTIVATE:
            self.activate()
        elif intent == NavIntent.CANCEL:
            self.cancel()
        elif intent == NavIntent.BACK:
            self.drill_out()
        elif intent == NavIntent.FOCUS_AWAY:
            self.reset_focus()
            return False

        return True

    def __repr__(self) -> str:
        return (
            f"KeyboardNavigator(items={len(self._items)}, "
            f"focused={self._focused_index}, can_drill_out={self.can_drill_out})"
        )


__all__ = ['KeyboardNavigator', 'can_drill_into', 'keyboard_shortcuts']
