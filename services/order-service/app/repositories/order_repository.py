"""
Order repository interface (Abstract Base Class).

Defines the contract for order persistence independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod

from ..domain.entities import Order


class ICreateOrderRepository(ABC):
    """
    Abstract repository consumed by the create-order use case.

    Exposes only the operation the use case needs, enabling
    dependency inversion and storage-free testing.
    """

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """
        Durably store an order.

        Implementations may assign ``order.id``. Business fields
        must be stored as given.

        Args:
            order: Order entity to persist

        Returns:
            The saved order entity

        Raises:
            StorageException: If the order could not be stored
        """
        pass
