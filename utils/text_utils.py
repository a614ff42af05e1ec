"""
Text utilities for catalog search.

Handles query normalization and matching helpers.
"""
import math
from typing import Optional


def normalize_query(query: Optional[str]) -> str:
    """
    Normalize a free-text query.

    Args:
        query: Raw text typed by the user (may be None)

    Returns:
        The query unchanged, or '' for None. Whitespace is significant.
    """
    if not query:
        return ""
    return query


def is_numeric_query(query: str) -> bool:
    """
    Check whether a query parses as a plain finite number.

    Args:
        query: Normalized query

    Returns:
        True for inputs like '123', '0042' or '1.5'
    """
    if not query:
        return False
    try:
        value = float(query)
    except ValueError:
        return False
    return math.isfinite(value)


def contains_casefold(haystack: Optional[str], needle: str) -> bool:
    """
    Case-insensitive substring test.

    Args:
        haystack: Field value (None never matches)
        needle: Already casefolded query

    Returns:
        True if needle occurs in haystack
    """
    if haystack is None:
        return False
    return needle in haystack.casefold()


def escape_like(term: str, escape_char: str = '\\') -> str:
    """
    Escape LIKE wildcards so a query is matched literally.

    Args:
        term: Raw search term
        escape_char: Escape character passed to the LIKE clause

    Returns:
        Term with %, _ and the escape character escaped
    """
    return (
        term.replace(escape_char, escape_char * 2)
        .replace('%', f'{escape_char}%')
        .replace('_', f'{escape_char}_')
    )
