"""
Selection Resolution Component.

Derives the canonical selected filter from a clicked node and answers
"is this node the current selection".
"""
from dataclasses import replace
from typing import Optional

from core.constants import LEVEL_FILTER_FIELDS, LEVEL_KEY_FIELDS
from core.models import HierarchyNode, Level, SelectedFilter


class SelectionResolver:
    """
    Level-exact selection semantics.

    A node is selected only when its level equals the selection's level and
    the identity fields of that level match. Ancestors and descendants of the
    selected node are never reported as selected.
    """

    @staticmethod
    def select(node: HierarchyNode) -> SelectedFilter:
        """
        Build the selection for a node.

        Args:
            node: Clicked hierarchy node

        Returns:
            SelectedFilter populated through node.level only
        """
        cleared = {}
        for level in Level:
            if level.rank > node.level.rank:
                for field_name in LEVEL_FILTER_FIELDS[level.value]:
                    cleared[field_name] = None
        return replace(node.data, level=node.level, **cleared)

    @staticmethod
    def is_selected(node: HierarchyNode, current: Optional[SelectedFilter]) -> bool:
        """
        Check whether a node is the current selection.

        Args:
            node: Node being rendered
            current: Current selection or None

        Returns:
            True only for an exact level and key match
        """
        if current is None:
            return False
        if current.level != node.level:
            return False
        return all(
            getattr(current, field_name) == getattr(node.data, field_name)
            for field_name in LEVEL_KEY_FIELDS[node.level.value]
        )

    @staticmethod
    def clear() -> None:
        """Reset the selection. Downstream refetching is the caller's job."""
        return None
