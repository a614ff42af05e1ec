"""
Hierarchy Filter Session

Coordinates the row source, tree building, expansion and selection for one
product filter widget. Every host call site drives the same session object
instead of keeping its own copy of the tree state.
"""
import asyncio
import logging
from typing import Callable, FrozenSet, List, Optional

from config.settings import settings
from core.exceptions import SourceFetchError
from core.models import HierarchyNode, SelectedFilter
from data.row_sources import BaseRowSource
from hierarchy.expansion import ExpansionStateManager
from hierarchy.levels import LevelSet
from hierarchy.search import SearchMatcher
from hierarchy.selection import SelectionResolver
from hierarchy.tree_builder import HierarchyBuilder
from hierarchy.tree_utils import tree_to_dict

logger = logging.getLogger(__name__)

SelectionCallback = Callable[[Optional[SelectedFilter]], None]


class HierarchyFilterSession:
    """
    Async controller for the product hierarchy filter.

    Fetches are tagged with a monotonically increasing sequence number and
    only the most recently issued one may replace the forest. Typing is
    debounced through search(); refresh() rebuilds immediately.
    """

    def __init__(
        self,
        row_source: BaseRowSource,
        levels: Optional[LevelSet] = None,
        on_selection_change: Optional[SelectionCallback] = None,
        debounce_seconds: Optional[float] = None
    ):
        """
        Initialize filter session.

        Args:
            row_source: Source of flat catalog records
            levels: Levels to materialize (default: settings.product_levels)
            on_selection_change: Called with the new selection (or None)
                                 after every select()/clear()
            debounce_seconds: Idle time before a search rebuild
                              (default: settings.search_debounce_seconds)
        """
        self.row_source = row_source
        self.levels = levels or settings.get_level_set()
        self.on_selection_change = on_selection_change
        self.debounce_seconds = (
            settings.search_debounce_seconds if debounce_seconds is None else debounce_seconds
        )

        self.expansion = ExpansionStateManager()
        self._forest: List[HierarchyNode] = []
        self._query = ""
        self._selection: Optional[SelectedFilter] = None
        self._sequence = 0
        self._in_flight = 0
        self._debounce_task: Optional[asyncio.Task] = None

    @property
    def forest(self) -> List[HierarchyNode]:
        """Forest from the last applied build."""
        return self._forest

    @property
    def expanded(self) -> FrozenSet[str]:
        """Currently expanded node ids."""
        return self.expansion.expanded

    @property
    def selection(self) -> Optional[SelectedFilter]:
        """Current selection."""
        return self._selection

    @property
    def query(self) -> str:
        """Query the current forest was built for."""
        return self._query

    @property
    def loading(self) -> bool:
        """True while any fetch is outstanding."""
        return self._in_flight > 0

    async def refresh(self, query: str = "") -> bool:
        """
        Fetch, filter and rebuild the forest for a query.

        Args:
            query: Free-text query ('' for the whole catalog)

        Returns:
            True if the new forest was applied, False if the fetch failed
            or was superseded by a newer one
        """
        self._sequence += 1
        sequence = self._sequence

        self._in_flight += 1
        try:
            records = await self.row_source.fetch_records(query)
        except SourceFetchError as e:
            logger.warning("Row source failed, keeping previous tree: %s", e)
            return False
        except Exception as e:
            # Custom sources may raise their own driver errors
            logger.warning(
                "Row source raised %s, keeping previous tree: %s",
                type(e).__name__, e, exc_info=True
            )
            return False
        finally:
            self._in_flight -= 1

        if sequence != self._sequence:
            logger.debug("Discarding stale fetch #%d (latest #%d)", sequence, self._sequence)
            return False

        records = SearchMatcher.filter(records, query)
        forest = HierarchyBuilder.build(records, self.levels)

        self.expansion.apply_build(forest, query)
        self._forest = forest
        self._query = query or ""
        return True

    def search(self, query: str) -> asyncio.Task:
        """
        Schedule a debounced refresh.

        A refresh still waiting out its debounce delay is cancelled; one that
        has already started fetching is left to the sequence check.

        Args:
            query: Latest query text

        Returns:
            Task resolving to the refresh() result
        """
        self.cancel_pending()
        self._debounce_task = asyncio.get_running_loop().create_task(
            self._debounced_refresh(query)
        )
        return self._debounce_task

    async def _debounced_refresh(self, query: str) -> bool:
        await asyncio.sleep(self.debounce_seconds)
        self._debounce_task = None
        return await self.refresh(query)

    def cancel_pending(self) -> None:
        """Drop a search that has not started fetching yet."""
        if self._debounce_task is not None:
            self._debounce_task.cancel()
            self._debounce_task = None

    def toggle(self, node_id: str) -> bool:
        """Expand or collapse a node."""
        return self.expansion.toggle(node_id)

    def select(self, node: HierarchyNode) -> SelectedFilter:
        """
        Select a node and notify the host.

        Args:
            node: Clicked node

        Returns:
            The new selection
        """
        self._selection = SelectionResolver.select(node)
        self._notify()
        return self._selection

    def clear(self) -> None:
        """Clear the selection and notify the host."""
        self._selection = SelectionResolver.clear()
        self._notify()

    def is_selected(self, node: HierarchyNode) -> bool:
        """Level-exact check against the current selection."""
        return SelectionResolver.is_selected(node, self._selection)

    def to_view(self) -> dict:
        """
        Everything the host needs to render the widget.

        Returns:
            Dict with forest, expanded ids, selection and query
        """
        return {
            'forest': tree_to_dict(self._forest),
            'expanded': sorted(self.expansion.expanded),
            'selection': self._selection.to_dict() if self._selection else None,
            'selection_label': self._selection.label if self._selection else None,
            'query': self._query,
            'loading': self.loading,
        }

    def _notify(self) -> None:
        if self.on_selection_change is not None:
            self.on_selection_change(self._selection)
