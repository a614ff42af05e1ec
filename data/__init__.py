"""Data access layer - Catalog models, connections and row sources."""

from .db_models import Base, Product, SystemConfig
from .database import (
    DatabaseManager,
    get_db_manager,
    session_scope,
    init_database,
)
from .repositories import ProductRepository, SystemConfigRepository, load_level_set
from .row_sources import BaseRowSource, InMemoryRowSource, SqlProductRowSource

__all__ = [
    # Models
    'Base',
    'Product',
    'SystemConfig',

    # Database
    'DatabaseManager',
    'get_db_manager',
    'session_scope',
    'init_database',

    # Repositories
    'ProductRepository',
    'SystemConfigRepository',
    'load_level_set',

    # Row sources
    'BaseRowSource',
    'InMemoryRowSource',
    'SqlProductRowSource',
]
