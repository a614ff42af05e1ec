"""
Catalog Search Component.

Free-text filtering of flat catalog rows before the tree is built.
"""
from typing import Iterable, List, Optional

from core.constants import SEARCH_FIELDS
from core.models import FlatRecord
from utils.text_utils import contains_casefold, is_numeric_query, normalize_query


class SearchMatcher:
    """
    Case-insensitive substring search over the five catalog text fields.

    Numeric queries additionally match a product whose id equals the query
    exactly. Both conditions are OR-ed; input order is kept.
    """

    @staticmethod
    def is_active(query: Optional[str]) -> bool:
        """True when the query is non-empty (a search session is running)."""
        return bool(normalize_query(query))

    @staticmethod
    def matches(record: FlatRecord, query: Optional[str]) -> bool:
        """
        Check a single record against a query.

        Args:
            record: Catalog row
            query: Raw query text

        Returns:
            True if the record should stay visible
        """
        term = normalize_query(query)
        if not term:
            return True

        if is_numeric_query(term) and record.product_id == term:
            return True

        needle = term.casefold()
        return any(
            contains_casefold(getattr(record, field_name), needle)
            for field_name in SEARCH_FIELDS
        )

    @staticmethod
    def filter(records: Iterable[FlatRecord], query: Optional[str]) -> List[FlatRecord]:
        """
        Keep the records matching a query.

        Args:
            records: Catalog rows
            query: Raw query text; empty means no filtering

        Returns:
            Matching records in input order
        """
        records = list(records)
        if not SearchMatcher.is_active(query):
            return records
        return [record for record in records if SearchMatcher.matches(record, query)]
