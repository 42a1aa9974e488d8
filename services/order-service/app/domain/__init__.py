"""
Domain layer - Core business entities and domain logic.

This layer contains the fundamental business objects and rules,
independent of any infrastructure or framework concerns.
"""

from .entities import Order, OrderStatus, Product
from .exceptions import (
    OrderServiceException,
    PersistenceException,
    StorageException,
    ValidationException,
)

__all__ = [
    "Order",
    "OrderStatus",
    "Product",
    "OrderServiceException",
    "PersistenceException",
    "StorageException",
    "ValidationException",
]
