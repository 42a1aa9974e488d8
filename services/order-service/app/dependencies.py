"""
Shared dependencies for the application.

Provides dependency injection functions used across routers. Each request
gets its own repository bound to its own database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from .repositories.postgres_repository import (
    PostgresOrderRepository,
    PostgresProductRepository,
)
from .use_cases.create_order import CreateOrderUseCase
from .use_cases.create_product import CreateProductUseCase


def get_create_order_use_case(db: Session = Depends(get_db)) -> CreateOrderUseCase:
    """Build the create-order use case over the request's session."""
    return CreateOrderUseCase(PostgresOrderRepository(db))


def get_create_product_use_case(db: Session = Depends(get_db)) -> CreateProductUseCase:
    """Build the create-product use case over the request's session."""
    return CreateProductUseCase(PostgresProductRepository(db))
