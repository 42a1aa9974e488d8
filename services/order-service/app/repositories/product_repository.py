"""
Product repository interface (Abstract Base Class).
"""

from abc import ABC, abstractmethod

from ..domain.entities import Product


class ICreateProductRepository(ABC):
    """Abstract repository consumed by the create-product use case."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Durably store a product, possibly assigning ``product.id``.

        Raises:
            StorageException: If the product could not be stored
        """
        pass
