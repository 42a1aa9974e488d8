"""
Create-order use case.

The only business-rule gate before an order is durably recorded.
"""

import math
from typing import Sequence

import structlog

from ..domain.entities import Order
from ..domain.exceptions import PersistenceException, ValidationException
from ..repositories.order_repository import ICreateOrderRepository

logger = structlog.get_logger(__name__)

MIN_PRODUCTS = 1
MAX_PRODUCTS = 5
MIN_TOTAL_PRICE = 2
MAX_TOTAL_PRICE = 500


class CreateOrderUseCase:
    """
    Validate a creation request, build a PENDING order and store it.

    Checks run in a fixed order and abort on the first violation,
    before any storage call.
    """

    def __init__(self, order_repository: ICreateOrderRepository):
        """
        Initialize use case.

        Args:
            order_repository: Storage capability for new orders
        """
        self.order_repository = order_repository

    async def execute(self, product_ids: Sequence[int], total_price: float) -> Order:
        """
        Create an order.

        Args:
            product_ids: Ordered product identifiers (1 to 5 entries)
            total_price: Total amount (between 2 and 500 inclusive)

        Returns:
            The stored order

        Raises:
            ValidationException: If a business rule is violated
            PersistenceException: If the order could not be stored
        """
        self._validate(product_ids, total_price)

        order = Order.create(product_ids=list(product_ids), total_price=total_price)

        try:
            await self.order_repository.save(order)
        except Exception as e:
            logger.error(
                "Failed to save order",
                product_count=len(order.product_ids),
                total_price=order.total_price,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PersistenceException("order") from None

        logger.info("Order created", order_id=order.id, product_count=len(order.product_ids))
        return order

    @staticmethod
    def _validate(product_ids: Sequence[int], total_price: float) -> None:
        if len(product_ids) < MIN_PRODUCTS:
            raise ValidationException(
                "productIds", product_ids, "order must contain at least 1 product"
            )

        if len(product_ids) > MAX_PRODUCTS:
            raise ValidationException(
                "productIds", product_ids, "order cannot contain more than 5 products"
            )

        if math.isnan(total_price) or total_price < MIN_TOTAL_PRICE:
            raise ValidationException("totalPrice", total_price, "total price must be ≥ 2")

        if total_price > MAX_TOTAL_PRICE:
            raise ValidationException("totalPrice", total_price, "total price must be ≤ 500")
