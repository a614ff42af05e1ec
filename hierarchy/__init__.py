"""Hierarchy package - Product tree building, search, selection and expansion."""

from .levels import LevelSet

from .tree_builder import (
    HierarchyBuilder,
    make_node_id,
    product_display_name,
)

from .search import SearchMatcher

from .selection import SelectionResolver

from .expansion import ExpansionStateManager

from .tree_utils import (
    iter_nodes,
    collect_node_ids,
    find_node,
    count_leaves,
    max_depth,
    tree_to_dict,
)

__all__ = [
    # Levels
    'LevelSet',

    # Tree building
    'HierarchyBuilder',
    'make_node_id',
    'product_display_name',

    # Search
    'SearchMatcher',

    # Selection
    'SelectionResolver',

    # Expansion
    'ExpansionStateManager',

    # Tree helpers
    'iter_nodes',
    'collect_node_ids',
    'find_node',
    'count_leaves',
    'max_depth',
    'tree_to_dict',
]
