"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import FlatRecord
from data.db_models import Base, Product


@pytest.fixture(scope="session")
def test_db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
        echo=False
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def test_db_session(test_db_engine):
    """Create fresh database session for each test."""
    Session = sessionmaker(bind=test_db_engine)
    session = Session()

    yield session

    # Rollback any uncommitted changes and wipe committed rows
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def scenario_records():
    """Beverages/Snacks catalog from the product filter walkthrough."""
    return [
        FlatRecord(
            product_id="P1",
            product_name="Cola",
            category_name="Beverages",
            subcategory_name="Soda",
        ),
        FlatRecord(
            product_id="P2",
            product_name="Lemon Soda",
            category_name="Beverages",
            subcategory_name="Soda",
        ),
        FlatRecord(
            product_id="P3",
            product_name="Chips",
            category_name="Snacks",
        ),
    ]


@pytest.fixture
def catalog_rows():
    """Larger catalog with classes, gaps and numeric ids."""
    return [
        {'product_id': '1001', 'product_name': 'Cola 330ml', 'category_name': 'Beverages',
         'subcategory_name': 'Soda', 'class_name': 'Cans'},
        {'product_id': '1002', 'product_name': 'Cola 1L', 'category_name': 'Beverages',
         'subcategory_name': 'Soda', 'class_name': 'Bottles'},
        {'product_id': '1003', 'product_name': 'Orange Juice', 'category_name': 'Beverages',
         'subcategory_name': 'Juice', 'class_name': 'Bottles'},
        {'product_id': '2001', 'product_name': 'Potato Chips', 'category_name': 'Snacks',
         'subcategory_name': 'Salty', 'class_name': None},
        {'product_id': '2002', 'product_name': 'Pretzels', 'category_name': 'Snacks',
         'subcategory_name': None, 'class_name': 'Baked'},
        {'product_id': '12345', 'product_name': 'Mystery Box', 'category_name': '',
         'subcategory_name': '', 'class_name': ''},
    ]


@pytest.fixture
def seeded_session(test_db_session, catalog_rows):
    """Database session with the catalog rows stored as products."""
    for row in catalog_rows:
        test_db_session.add(Product(**row))
    test_db_session.commit()
    return test_db_session
