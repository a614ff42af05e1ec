"""Core package - Domain models, constants and errors."""

from .models import Level, FlatRecord, SelectedFilter, HierarchyNode
from .constants import (
    LEVEL_ORDER,
    DEFAULT_PRODUCT_LEVELS,
    DEFAULT_LEVEL_DEPTH,
    UNCATEGORIZED_LABEL,
    LEVEL_KEY_FIELDS,
    LEVEL_FILTER_FIELDS,
    SEARCH_FIELDS,
    DEFAULT_SEARCH_PARAMS,
)
from .exceptions import HierarchyFilterError, SourceFetchError

__all__ = [
    'Level',
    'FlatRecord',
    'SelectedFilter',
    'HierarchyNode',
    'LEVEL_ORDER',
    'DEFAULT_PRODUCT_LEVELS',
    'DEFAULT_LEVEL_DEPTH',
    'UNCATEGORIZED_LABEL',
    'LEVEL_KEY_FIELDS',
    'LEVEL_FILTER_FIELDS',
    'SEARCH_FIELDS',
    'DEFAULT_SEARCH_PARAMS',
    'HierarchyFilterError',
    'SourceFetchError',
]
