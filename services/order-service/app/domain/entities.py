"""
Domain entities for orders and products.

Core business objects for the ordering workflow.
These entities are framework-agnostic and carry no persistence metadata;
mapping to storage rows is owned by the repository adapters.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    """Lifecycle states of an order."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass
class Order:
    """
    Aggregate root for a customer order.

    Orders are built through ``Order.create`` by the create-order use case
    and handed to a repository, which may assign ``id``.
    """

    product_ids: List[int]
    total_price: float
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    id: Optional[int] = None

    @classmethod
    def create(cls, product_ids: List[int], total_price: float) -> "Order":
        """
        Build a new order in its initial state.

        Args:
            product_ids: Ordered product identifiers
            total_price: Total amount of the order

        Returns:
            PENDING order timestamped now, without identity
        """
        return cls(
            product_ids=list(product_ids),
            total_price=total_price,
            status=OrderStatus.PENDING,
            created_at=_utcnow(),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "productIds": list(self.product_ids),
            "totalPrice": self.total_price,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class Product:
    """Catalogue product offered for sale."""

    title: str
    description: str
    price: float
    created_at: datetime = field(default_factory=_utcnow)
    id: Optional[int] = None

    @classmethod
    def create(cls, title: str, description: str, price: float) -> "Product":
        return cls(title=title, description=description, price=price, created_at=_utcnow())

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "createdAt": self.created_at.isoformat(),
        }
