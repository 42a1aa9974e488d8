"""
Use case layer - Application operations.

Each use case encapsulates one business transaction and its validation
rules, independent of transport and storage details.
"""

from .create_order import CreateOrderUseCase
from .create_product import CreateProductUseCase

__all__ = ["CreateOrderUseCase", "CreateProductUseCase"]
