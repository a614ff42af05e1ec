"""
Unit tests for data.db_models module.
"""
import pytest
from datetime import datetime
from data.db_models import Product, SystemConfig


class TestProduct:
    """Tests for Product model."""

    def test_create_product(self, test_db_session):
        """Test creating a product."""
        product = Product(
            product_id="P1",
            product_name="Cola",
            category_name="Beverages",
            subcategory_name="Soda"
        )

        test_db_session.add(product)
        test_db_session.commit()

        stored = test_db_session.get(Product, "P1")
        assert stored.product_name == "Cola"
        assert stored.class_name is None
        assert isinstance(stored.created_at, datetime)

    def test_to_row(self, test_db_session):
        """Test row mapping shape."""
        product = Product(
            product_id="P3",
            product_name="Chips",
            category_name="Snacks"
        )

        row = product.to_row()

        assert row == {
            'product_id': 'P3',
            'product_name': 'Chips',
            'category_name': 'Snacks',
            'subcategory_name': None,
            'class_name': None,
        }

    def test_repr(self):
        """Test string representation."""
        product = Product(product_id="P1", product_name="Cola")

        assert "P1" in repr(product)


class TestSystemConfig:
    """Tests for SystemConfig model."""

    def test_create_config(self, test_db_session):
        """Test storing the level depth."""
        config = SystemConfig(product_levels=3)

        test_db_session.add(config)
        test_db_session.commit()

        assert config.id is not None
        assert config.product_levels == 3
        assert isinstance(config.updated_at, datetime)
