# Path: budget_lens/process/hierarchy/store.py
"""
Hierarchy Store - "where am I in the budget tree".

Owns the loaded tree, the selected node id and the breadcrumb path,
plus loading/error flags and a last-updated timestamp. Every command
commits one immutable HierarchyState snapshot, so selection, path and
error always change together. After each commit that moves the
position, the breadcrumb is written to the URL collaborator, then
subscribers are notified.

Failures never raise across this boundary:
- select() of an unknown id records an error and keeps the position
- a URL path that no longer resolves after load() falls back to root
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, Optional

from budget_lens.core.logger import get_process_logger
from budget_lens.process.hierarchy.constants import DEFAULT_PATH_PARAM, NavigationState
from budget_lens.process.hierarchy.node import BudgetNode
from budget_lens.process.hierarchy.path_resolver import (
    build_path,
    find_node,
    resolve_path_nodes,
)
from budget_lens.process.hierarchy.url_state import UrlState

logger = get_process_logger('hierarchy.store')

Listener = Callable[['HierarchyState'], None]


@dataclass(frozen=True)
class HierarchyState:
    """
    One committed snapshot of the store.

    Attributes:
        tree: Loaded budget tree (None before the first load)
        selected_id: Selected node id, None at root
        breadcrumb_path: Ids from below the root to the selection
        is_loading: Host-controlled loading flag
        error: Last error message, None when clear
        last_updated: Time of the last successful load
    """
    tree: Optional[BudgetNode] = None
    selected_id: Optional[str] = None
    breadcrumb_path: tuple[str, ...] = ()
    is_loading: bool = False
    error: Optional[str] = None
    last_updated: Optional[datetime] = None

    @property
    def navigation_state(self) -> NavigationState:
        """AT_ROOT when nothing is selected, AT_NODE otherwise."""
        if self.selected_id is None:
            return NavigationState.AT_ROOT
        return NavigationState.AT_NODE


class HierarchyStore:
    """
    Drill-down navigation state with a URL-restorable breadcrumb.

    Example:
        url_state = InMemoryUrlState("https://example.org/budget?path=dod")
        store = HierarchyStore(url_state)
        store.load(tree)          # restores "dod" from the URL
        store.select("army")      # path ["dod", "army"], URL rewritten
        store.go_back()           # path ["dod"]
        store.children_of_selected  # children of "dod"
    """

    def __init__(
        self,
        url_state: UrlState,
        path_param: str = DEFAULT_PATH_PARAM,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Create a store and read the breadcrumb from the URL once.

        The breadcrumb stays out of the committed state until load()
        resolves it, so the path never disagrees with the selection.

        Args:
            url_state: Page URL collaborator
            path_param: Query parameter carrying the breadcrumb
            clock: Timestamp source for last_updated (UTC now by default)
        """
        self._url_state = url_state
        self._path_param = path_param
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._listeners: list[Listener] = []
        # held back until a tree arrives to resolve it against
        self._url_path: tuple[str, ...] = tuple(url_state.read_path(path_param))
        self._state = HierarchyState()

    # ===========================================================================
    # STATE ACCESS
    # ===========================================================================
    @property
    def state(self) -> HierarchyState:
        """Current committed snapshot."""
        return self._state

    @property
    def tree(self) -> Optional[BudgetNode]:
        return self._state.tree

    @property
    def selected_id(self) -> Optional[str]:
        return self._state.selected_id

    @property
    def breadcrumb_path(self) -> list[str]:
        return list(self._state.breadcrumb_path)

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._state.last_updated

    @property
    def url_state(self) -> UrlState:
        """Page URL collaborator the breadcrumb is written to."""
        return self._url_state

    # ===========================================================================
    # SUBSCRIPTIONS
    # ===========================================================================
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with every committed snapshot.

        Args:
            listener: Callable receiving the new HierarchyState

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, sync_url: bool = False, **changes) -> None:
        """Swap in a new snapshot, then write the URL, then notify."""
        self._state = replace(self._state, **changes)
        logger.debug(
            f"Committed {self._state.navigation_state.value} "
            f"path={list(self._state.breadcrumb_path)} error={self._state.error!r}"
        )
        if sync_url:
            self._url_path = ()
            self._url_state.write_path(self._path_param, self._state.breadcrumb_path)
        for listener in list(self._listeners):
            listener(self._state)

    # ===========================================================================
    # COMMANDS
    # ===========================================================================
    def load(self, tree: BudgetNode) -> None:
        """
        Replace the held tree and re-validate the current breadcrumb.

        If the breadcrumb's last id still resolves, the selection is kept
        and the path is rebuilt from the new tree (identical for any path
        this store wrote). Otherwise the store falls back to root and the
        URL is cleared.

        Args:
            tree: Complete budget tree snapshot
        """
        old_path = list(self._state.breadcrumb_path or self._url_path)
        self._url_path = ()
        path: list[str] = []
        selected_id: Optional[str] = None
        sync_url = False

        if old_path:
            last_id = old_path[-1]
            if find_node(tree, last_id) is not None:
                path = build_path(tree, last_id)
                selected_id = last_id if path else None
                sync_url = path != old_path
            else:
                logger.warning(
                    f"Breadcrumb {old_path} does not resolve in the new tree; "
                    f"resetting to root"
                )
                sync_url = True

        logger.info(
            f"Loaded budget tree '{tree.id}' with {tree.descendant_count + 1} nodes"
        )
        self._commit(
            sync_url=sync_url,
            tree=tree,
            selected_id=selected_id,
            breadcrumb_path=tuple(path),
            last_updated=self._clock(),
            error=None,
        )

    def select(self, node_id: Optional[str]) -> None:
        """
        Drill to a node, or back to root when node_id is None or empty.

        An id missing from the current tree records an error and leaves
        the position untouched.

        Args:
            node_id: Id of the node to select
        """
        if not node_id:
            self.go_to_root()
            return

        if find_node(self._state.tree, node_id) is None:
            logger.warning(f"Select failed: id '{node_id}' not in current tree")
            self._commit(error=f'Item with id "{node_id}" not found')
            return

        path = build_path(self._state.tree, node_id)
        if not path:
            # the root itself
            self.go_to_root()
            return

        self._commit(
            sync_url=True,
            selected_id=node_id,
            breadcrumb_path=tuple(path),
            error=None,
        )

    def navigate_to(self, node_id: str) -> None:
        """Alias of select() for navigation call sites."""
        self.select(node_id)

    def go_back(self) -> None:
        """Pop one breadcrumb level; from one level deep this reaches root."""
        path = self._state.breadcrumb_path
        if len(path) <= 1:
            self.go_to_root()
            return

        new_path = path[:-1]
        self._commit(
            sync_url=True,
            selected_id=new_path[-1],
            breadcrumb_path=new_path,
            error=None,
        )

    def go_to_root(self) -> None:
        """Clear selection and path. Always succeeds."""
        self._commit(
            sync_url=True,
            selected_id=None,
            breadcrumb_path=(),
            error=None,
        )

    def set_loading(self, loading: bool) -> None:
        """Set the host-controlled loading flag."""
        self._commit(is_loading=loading)

    def set_error(self, error: Optional[str]) -> None:
        """Record (or clear) an error; also ends loading."""
        self._commit(error=error, is_loading=False)

    # ===========================================================================
    # DERIVED VALUES
    # ===========================================================================
    @property
    def selected_node(self) -> Optional[BudgetNode]:
        """Selected node, the root when nothing is selected, None without data."""
        tree = self._state.tree
        if tree is None:
            return None
        if self._state.selected_id is None:
            return tree
        return find_node(tree, self._state.selected_id)

    @property
    def children_of_selected(self) -> list[BudgetNode]:
        """Direct children of the selected node."""
        node = self.selected_node
        return list(node.children) if node is not None else []

    def percentage_of_total(self, amount: Optional[float] = None) -> float:
        """
        Express an amount as a percentage of the root's total.

        Args:
            amount: Dollar amount; defaults to the selected node's amount

        Returns:
            Percentage (0-100 scale), 0 when no data or a zero total
        """
        tree = self._state.tree
        if tree is None or tree.amount == 0:
            return 0.0
        if amount is None:
            node = self.selected_node
            amount = node.amount if node is not None else 0.0
        return amount / tree.amount * 100

    @property
    def breadcrumb_nodes(self) -> list[BudgetNode]:
        """Nodes along the breadcrumb; unresolvable ids are skipped."""
        return resolve_path_nodes(self._state.tree, self._state.breadcrumb_path)

    def __repr__(self) -> str:
        return (
            f"HierarchyStore(selected={self._state.selected_id!r}, "
            f"path={list(self._state.breadcrumb_path)})"
        )


__all__ = ['HierarchyStore', 'HierarchyState']
