"""
Expansion State Component.

Tracks which nodes are expanded and saves/restores that set around search
sessions.
"""
import logging
from typing import FrozenSet, Iterable, List, Optional, Set

from core.models import HierarchyNode
from .search import SearchMatcher
from .tree_utils import collect_node_ids

logger = logging.getLogger(__name__)


class ExpansionStateManager:
    """
    Expanded-node state machine: IDLE <-> SEARCHING.

    The state flips purely on whether the query is empty. Entering a search
    snapshots the expanded set once and expands every node of the new forest;
    leaving it restores the snapshot exactly, so toggles made while
    searching are dropped.
    """

    def __init__(self, expanded: Optional[Iterable[str]] = None):
        """
        Initialize expansion state.

        Args:
            expanded: Node ids expanded initially
        """
        self._expanded: Set[str] = set(expanded or ())
        self._saved: Optional[Set[str]] = None
        self._known_ids: Optional[Set[str]] = None

    @property
    def expanded(self) -> FrozenSet[str]:
        """Currently expanded node ids."""
        return frozenset(self._expanded)

    @property
    def saved_expanded(self) -> FrozenSet[str]:
        """Snapshot taken on search entry (empty while idle)."""
        return frozenset(self._saved or ())

    @property
    def is_searching(self) -> bool:
        """True between search entry and search exit."""
        return self._saved is not None

    def is_expanded(self, node_id: str) -> bool:
        """Check a single node."""
        return node_id in self._expanded

    def apply_build(self, forest: List[HierarchyNode], query: Optional[str]) -> FrozenSet[str]:
        """
        Run the transition for a freshly built forest.

        Args:
            forest: Forest produced for ``query``
            query: Query the forest was built for

        Returns:
            Expanded ids after the transition
        """
        self._known_ids = collect_node_ids(forest)

        if SearchMatcher.is_active(query):
            if self._saved is None:
                self._saved = set(self._expanded)
                logger.debug("Search started, saved %d expanded nodes", len(self._saved))
            self._expanded = set(self._known_ids)
        elif self._saved is not None:
            self._expanded = self._saved
            self._saved = None
            logger.debug("Search cleared, restored %d expanded nodes", len(self._expanded))

        return self.expanded

    def toggle(self, node_id: str) -> bool:
        """
        Flip a node between expanded and collapsed.

        Ids missing from the latest forest are ignored.

        Args:
            node_id: Node to toggle

        Returns:
            True if the state changed
        """
        if self._known_ids is not None and node_id not in self._known_ids:
            logger.debug("Ignoring toggle of unknown node %r", node_id)
            return False

        if node_id in self._expanded:
            self._expanded.discard(node_id)
        else:
            self._expanded.add(node_id)
        return True

    def expand_all(self, forest: List[HierarchyNode]) -> None:
        """Expand every node of a forest."""
        self._expanded |= collect_node_ids(forest)

    def collapse_all(self) -> None:
        """Collapse everything in the current view."""
        self._expanded.clear()
