"""
Helpers for walking a built product forest.
"""
from typing import Iterator, List, Optional, Set

from core.models import HierarchyNode


def iter_nodes(forest: List[HierarchyNode]) -> Iterator[HierarchyNode]:
    """Yield every node depth-first, parents before children."""
    for node in forest:
        yield node
        yield from iter_nodes(node.children)


def collect_node_ids(forest: List[HierarchyNode]) -> Set[str]:
    """Ids of every node in the forest."""
    return {node.id for node in iter_nodes(forest)}


def find_node(forest: List[HierarchyNode], node_id: str) -> Optional[HierarchyNode]:
    """Look up a node by id (None when absent)."""
    for node in iter_nodes(forest):
        if node.id == node_id:
            return node
    return None


def count_leaves(forest: List[HierarchyNode]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in iter_nodes(forest) if node.is_leaf)


def max_depth(forest: List[HierarchyNode]) -> int:
    """Depth of the deepest node (1 for a forest of bare roots, 0 if empty)."""
    if not forest:
        return 0
    return 1 + max(max_depth(node.children) for node in forest)


def tree_to_dict(forest: List[HierarchyNode]) -> List[dict]:
    """
    Convert the forest to plain nested dicts for the host UI.

    Args:
        forest: Built forest

    Returns:
        List of dicts; leaves carry no 'children' key
    """
    return [node.to_dict() for node in forest]
