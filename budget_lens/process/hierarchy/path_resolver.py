# Path: budget_lens/process/hierarchy/path_resolver.py
"""
Path Resolver - Pure lookups over an in-memory budget tree.

Depth-first, first-match semantics throughout: when an id occurs more
than once (malformed data) the node reached first in pre-order wins,
both for find_node and build_path.

Breadcrumb paths never contain the root's own id. The path of the root
itself is the empty list, which is also what an unreachable id yields.
"""

from typing import Iterable, Optional

from budget_lens.process.hierarchy.node import BudgetNode


def find_node(tree: Optional[BudgetNode], node_id: Optional[str]) -> Optional[BudgetNode]:
    """
    Find a node by id.

    Args:
        tree: Root of the tree (None means no data loaded)
        node_id: Id to look for

    Returns:
        The first matching node in pre-order, or None
    """
    if tree is None or node_id is None:
        return None
    for node in tree.iter_preorder():
        if node.id == node_id:
            return node
    return None


def build_path(tree: Optional[BudgetNode], target_id: Optional[str]) -> list[str]:
    """
    Build the ordered id chain from below the root down to a target.

    Args:
        tree: Root of the tree
        target_id: Id of the node to reach

    Returns:
        Ids from the root's child through the target inclusive;
        empty for the root itself or an unreachable target

    Example:
        # R -> A -> A1
        build_path(tree, "A1")  # ["A", "A1"]
    """
    if tree is None or target_id is None:
        return []

    stack: list[tuple[BudgetNode, list[str]]] = [(tree, [])]
    while stack:
        node, path = stack.pop()
        if node.id == target_id:
            return path
        for child in reversed(node.children):
            stack.append((child, path + [child.id]))
    return []


def walk_path(tree: Optional[BudgetNode], path: Iterable[str]) -> Optional[BudgetNode]:
    """
    Follow a breadcrumb path child-by-child from the root.

    Args:
        tree: Root of the tree
        path: Ordered ids, root excluded

    Returns:
        Node at the end of the walk, the root for an empty path,
        or None if any step has no matching child
    """
    if tree is None:
        return None
    current = tree
    for node_id in path:
        current = next(
            (child for child in current.children if child.id == node_id),
            None,
        )
        if current is None:
            return None
    return current


def resolve_path_nodes(tree: Optional[BudgetNode], path: Iterable[str]) -> list[BudgetNode]:
    """
    Map breadcrumb ids to nodes, silently skipping ids that do not resolve.

    Args:
        tree: Root of the tree
        path: Ordered ids

    Returns:
        Nodes for every resolvable id, in path order
    """
    nodes = []
    for node_id in path:
        node = find_node(tree, node_id)
        if node is not None:
            nodes.append(node)
    return nodes


def index_tree(tree: Optional[BudgetNode]) -> dict[str, BudgetNode]:
    """
    Flatten a tree into an id -> node table.

    Keeps the first node seen for a duplicated id, matching find_node.

    Args:
        tree: Root of the tree

    Returns:
        Dictionary of id to node
    """
    index: dict[str, BudgetNode] = {}
    if tree is None:
        return index
    for node in tree.iter_preorder():
        index.setdefault(node.id, node)
    return index


__all__ = [
    'find_node',
    'build_path',
    'walk_path',
    'resolve_path_nodes',
    'index_tree',
]
