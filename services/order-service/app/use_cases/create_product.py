"""
Create-product use case.
"""

import math

import structlog

from ..domain.entities import Product
from ..domain.exceptions import PersistenceException, ValidationException
from ..repositories.product_repository import ICreateProductRepository

logger = structlog.get_logger(__name__)

MIN_PRICE = 0
MAX_PRICE = 10000


class CreateProductUseCase:
    """Validate a product price, build the product and store it."""

    def __init__(self, product_repository: ICreateProductRepository):
        self.product_repository = product_repository

    async def execute(self, title: str, description: str, price: float) -> Product:
        """
        Create a product.

        Raises:
            ValidationException: If the price is out of bounds
            PersistenceException: If the product could not be stored
        """
        if math.isnan(price) or price < MIN_PRICE:
            raise ValidationException("price", price, "price must be ≥ 0")

        if price > MAX_PRICE:
            raise ValidationException("price", price, "price must be ≤ 10000")

        product = Product.create(title=title, description=description, price=price)

        try:
            await self.product_repository.save(product)
        except Exception as e:
            logger.error("Failed to save product", title=title, error=str(e))
            raise PersistenceException("product") from None

        logger.info("Product created", product_id=product.id)
        return product
