"""Serving package - Session controller driven by the host UI."""

from .filter_session import HierarchyFilterSession

__all__ = [
    'HierarchyFilterSession',
]
