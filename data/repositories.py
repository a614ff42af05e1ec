"""
Repository pattern for catalog data access.

Provides clean separation between data access and hierarchy logic.
"""
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import settings
from core.constants import SEARCH_FIELDS
from hierarchy.levels import LevelSet
from utils.text_utils import escape_like, is_numeric_query, normalize_query
from .db_models import Product, SystemConfig

logger = logging.getLogger(__name__)


class ProductRepository:
    """Repository for Product operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        return self.session.query(Product).filter(
            Product.product_id == product_id
        ).first()

    def search(self, query: Optional[str] = None) -> List[Product]:
        """
        Products matching a free-text query, in hierarchy order.

        Mirrors SearchMatcher: case-insensitive substring over the five
        catalog columns, plus exact product_id equality for numeric queries.
        Case folding is left to the database; SQLite's ilike only folds
        ASCII, so non-ASCII queries may return a subset of what
        SearchMatcher keeps.

        Args:
            query: Raw query text; empty returns the whole catalog

        Returns:
            Products ordered by category, subcategory, class and name
        """
        statement = self.session.query(Product)

        term = normalize_query(query)
        if term:
            pattern = f"%{escape_like(term)}%"
            conditions = [
                getattr(Product, field_name).ilike(pattern, escape='\\')
                for field_name in SEARCH_FIELDS
            ]
            if is_numeric_query(term):
                conditions.append(Product.product_id == term)
            statement = statement.filter(or_(*conditions))

        return statement.order_by(
            Product.category_name,
            Product.subcategory_name,
            Product.class_name,
            Product.product_name,
        ).all()


class SystemConfigRepository:
    """Repository for SystemConfig operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_product_levels(self) -> Optional[int]:
        """Configured level depth, or None when no config row exists."""
        config = self.session.query(SystemConfig)\
            .order_by(SystemConfig.id)\
            .first()
        if config is None:
            return None
        return config.product_levels


def load_level_set(session: Session) -> LevelSet:
    """
    Resolve the active levels from system_config.

    Falls back to settings.product_levels when the row is missing or the
    query fails.

    Args:
        session: Database session

    Returns:
        LevelSet to build the forest with
    """
    try:
        depth = SystemConfigRepository(session).get_product_levels()
    except SQLAlchemyError as e:
        logger.warning("Could not read product levels, using defaults: %s", e)
        return settings.get_level_set()

    if depth is None:
        logger.warning("No system_config row, using default product levels")
        return settings.get_level_set()

    return LevelSet.from_depth(depth)
