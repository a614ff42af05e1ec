"""
Row sources supplying flat catalog records to the filter session.

This defines the interface every source implementation must follow, plus an
in-memory source and a SQLAlchemy-backed one.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import SourceFetchError
from core.models import FlatRecord
from hierarchy.search import SearchMatcher
from .repositories import ProductRepository


class BaseRowSource(ABC):
    """
    Abstract base class for row sources.

    Implementations return the records matching a query, or raise
    SourceFetchError when the backing store cannot be read.
    """

    @abstractmethod
    async def fetch_records(self, query: Optional[str] = None) -> List[FlatRecord]:
        """
        Fetch the catalog rows matching a query.

        Args:
            query: Free-text query (None or empty for the whole catalog)

        Returns:
            List of FlatRecord

        Raises:
            SourceFetchError: If the source cannot be read
        """
        pass


class InMemoryRowSource(BaseRowSource):
    """Row source over a fixed list of rows."""

    def __init__(self, rows: Iterable[Union[FlatRecord, Mapping]] = ()):
        """
        Initialize the source.

        Args:
            rows: FlatRecord instances or row mappings
        """
        self.records = [
            row if isinstance(row, FlatRecord) else FlatRecord.from_row(row)
            for row in rows
        ]

    async def fetch_records(self, query: Optional[str] = None) -> List[FlatRecord]:
        return SearchMatcher.filter(self.records, query)


class SqlProductRowSource(BaseRowSource):
    """Row source reading the products table."""

    def __init__(self, session: Session):
        """
        Initialize the source.

        Args:
            session: Database session used for every fetch
        """
        self.session = session
        self.repository = ProductRepository(session)

    async def fetch_records(self, query: Optional[str] = None) -> List[FlatRecord]:
        try:
            products = self.repository.search(query)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise SourceFetchError(f"Product query failed: {e}", query=query) from e
        return [FlatRecord.from_row(product.to_row()) for product in products]
