"""
Unit tests for domain entities.

Tests for Order, OrderStatus and Product.
"""

from datetime import datetime, timezone

from app.domain.entities import Order, OrderStatus, Product


class TestOrderStatus:
    """Tests for OrderStatus enum."""

    def test_values(self):
        """Test every status is its own name."""
        assert [status.value for status in OrderStatus] == [
            "PENDING",
            "CONFIRMED",
            "SHIPPED",
            "DELIVERED",
            "CANCELLED",
        ]

    def test_is_string(self):
        """Test status compares equal to its string value."""
        assert OrderStatus.PENDING == "PENDING"


class TestOrder:
    """Tests for Order entity."""

    def test_create_is_pending(self):
        """Test new orders start PENDING without identity."""
        order = Order.create(product_ids=[1, 2, 3], total_price=120)

        assert order.product_ids == [1, 2, 3]
        assert order.total_price == 120
        assert order.status == OrderStatus.PENDING
        assert order.id is None

    def test_create_sets_timestamp(self):
        """Test created_at is set to construction time."""
        before = datetime.now(timezone.utc)
        order = Order.create(product_ids=[1], total_price=2)
        after = datetime.now(timezone.utc)

        assert before <= order.created_at <= after

    def test_create_copies_product_ids(self):
        """Test the caller's list is not shared with the entity."""
        product_ids = [4, 5]
        order = Order.create(product_ids=product_ids, total_price=10)
        product_ids.append(6)

        assert order.product_ids == [4, 5]

    def test_to_dict(self):
        """Test serialization uses wire field names."""
        order = Order.create(product_ids=[7], total_price=9.5)
        order.id = 42

        data = order.to_dict()

        assert data["id"] == 42
        assert data["productIds"] == [7]
        assert data["totalPrice"] == 9.5
        assert data["status"] == "PENDING"
        assert data["createdAt"] == order.created_at.isoformat()


class TestProduct:
    """Tests for Product entity."""

    def test_create(self):
        product = Product.create(title="Mug", description="Ceramic mug", price=12.5)

        assert product.title == "Mug"
        assert product.description == "Ceramic mug"
        assert product.price == 12.5
        assert product.id is None

    def test_to_dict(self):
        product = Product.create(title="Mug", description="", price=0)

        assert product.to_dict()["price"] == 0
        assert product.to_dict()["title"] == "Mug"
