"""
Database models for the product catalog read by the hierarchy filter.

Stores the denormalized product rows and the system-wide level depth.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Product(Base):
    """One catalog product with its denormalized hierarchy names."""

    __tablename__ = 'products'

    product_id = Column(String, primary_key=True)
    product_name = Column(String)
    category_name = Column(String, index=True)
    subcategory_name = Column(String)
    class_name = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_row(self) -> dict:
        """Row mapping in the shape FlatRecord.from_row expects."""
        return {
            'product_id': self.product_id,
            'product_name': self.product_name,
            'category_name': self.category_name,
            'subcategory_name': self.subcategory_name,
            'class_name': self.class_name,
        }

    def __repr__(self):
        return f"<Product(id={self.product_id}, name={self.product_name})>"


class SystemConfig(Base):
    """System-wide settings row."""

    __tablename__ = 'system_config'

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_levels = Column(Integer)  # number of intermediate hierarchy levels
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<SystemConfig(id={self.id}, product_levels={self.product_levels})>"
