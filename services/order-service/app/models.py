"""
Database models for order service.

This module defines SQLAlchemy ORM models for persisted orders and products.
Domain entities never import from here; repository adapters map between them.
"""

from typing import Any, List, Optional

from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func
from sqlalchemy.types import TypeDecorator

Base: Any = declarative_base()

# Constants
PRODUCT_IDS_SEPARATOR = ","
STATUS_MAX_LENGTH = 50


class IntegerList(TypeDecorator):
    """Stores a list of integers as a comma-delimited string."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Optional[List[int]], dialect) -> Optional[str]:
        if value is None:
            return None
        return PRODUCT_IDS_SEPARATOR.join(str(int(item)) for item in value)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[List[int]]:
        if value is None:
            return None
        if value == "":
            return []
        return [int(item) for item in value.split(PRODUCT_IDS_SEPARATOR)]


class OrderRecord(Base):
    """
    Persisted customer order.

    Attributes:
        id: Auto-assigned primary key
        product_ids: Ordered product identifiers, comma-delimited on disk
        total_price: Total amount of the order
        status: Order status name, defaults to PENDING
        created_at: Creation timestamp, set at insert time when not provided
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    product_ids = Column(IntegerList, nullable=False)
    total_price = Column(Float, nullable=False)
    status = Column(String(STATUS_MAX_LENGTH), nullable=False, default="PENDING")
    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<OrderRecord(id={self.id}, status={self.status}, total_price={self.total_price})>"


class ProductRecord(Base):
    """Persisted catalogue product."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductRecord(id={self.id}, title={self.title})>"
