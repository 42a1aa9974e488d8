"""
PostgreSQL implementation of the order and product repositories.

Owns the mapping between domain entities and SQLAlchemy rows. The session
is synchronous, so each unit of work runs in the threadpool to keep the
event loop free for other requests.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from ..domain.entities import Order, Product
from ..domain.exceptions import StorageException
from ..models import Base, OrderRecord, ProductRecord
from .order_repository import ICreateOrderRepository
from .product_repository import ICreateProductRepository

logger = logging.getLogger(__name__)


def _insert(db: Session, record: Base) -> Base:
    """Insert one row and reload it; rolls back on failure."""
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
        return record
    except SQLAlchemyError:
        db.rollback()
        raise


class PostgresOrderRepository(ICreateOrderRepository):
    """PostgreSQL implementation for order persistence."""

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    async def save(self, order: Order) -> Order:
        """Insert the order and write the generated id back onto the entity."""
        try:
            record = await run_in_threadpool(_insert, self.db, self._map_to_record(order))
        except SQLAlchemyError as e:
            logger.error(f"Error saving order to PostgreSQL: {e}")
            raise StorageException("save", str(e))

        order.id = record.id
        logger.debug(f"Saved order {order.id} to PostgreSQL")
        return order

    def _map_to_record(self, order: Order) -> OrderRecord:
        """Map domain entity to database row."""
        return OrderRecord(
            product_ids=list(order.product_ids),
            total_price=float(order.total_price),
            status=order.status.value,
            created_at=order.created_at,
        )


class PostgresProductRepository(ICreateProductRepository):
    """PostgreSQL implementation for product persistence."""

    def __init__(self, db: Session):
        self.db = db

    async def save(self, product: Product) -> Product:
        """Insert the product and write the generated id back onto the entity."""
        record = ProductRecord(
            title=product.title,
            description=product.description,
            price=float(product.price),
            created_at=product.created_at,
        )
        try:
            record = await run_in_threadpool(_insert, self.db, record)
        except SQLAlchemyError as e:
            logger.error(f"Error saving product to PostgreSQL: {e}")
            raise StorageException("save", str(e))

        product.id = record.id
        logger.debug(f"Saved product {product.id} to PostgreSQL")
        return product
