"""Utilities package - Helper functions for query text handling."""

from .text_utils import (
    normalize_query,
    is_numeric_query,
    contains_casefold,
    escape_like,
)

__all__ = [
    'normalize_query',
    'is_numeric_query',
    'contains_casefold',
    'escape_like',
]
