"""
Exception taxonomy for the hierarchy filter.

Only row-source failures are raised; malformed rows degrade to placeholder
buckets and superseded fetches are dropped without an error.
"""
from typing import Optional


class HierarchyFilterError(Exception):
    """Base class for hierarchy filter errors."""


class SourceFetchError(HierarchyFilterError):
    """The row source could not supply records for a query."""

    def __init__(self, message: str, query: Optional[str] = None):
        super().__init__(message)
        self.query = query

    def __str__(self) -> str:
        base = super().__str__()
        if self.query:
            return f"{base} (query={self.query!r})"
        return base
