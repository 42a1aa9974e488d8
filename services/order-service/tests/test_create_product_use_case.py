"""
Tests for the create-product use case.
"""

from unittest.mock import AsyncMock

import pytest

from app.domain.exceptions import PersistenceException, ValidationException
from app.use_cases.create_product import CreateProductUseCase


class TestCreateProduct:
    """Test create-product use case."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [0, 19.99, 10000])
    async def test_valid_price_saved(self, mock_product_repository, price):
        use_case = CreateProductUseCase(mock_product_repository)

        product = await use_case.execute(title="Mug", description="Ceramic", price=price)

        mock_product_repository.save.assert_awaited_once_with(product)
        assert product.price == price

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "price,message",
        [
            (-0.01, "price must be ≥ 0"),
            (float("nan"), "price must be ≥ 0"),
            (10000.5, "price must be ≤ 10000"),
        ],
    )
    async def test_invalid_price_rejected(self, mock_product_repository, price, message):
        use_case = CreateProductUseCase(mock_product_repository)

        with pytest.raises(ValidationException) as exc_info:
            await use_case.execute(title="Mug", description="", price=price)

        assert exc_info.value.message == message
        mock_product_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_failure_sanitized(self):
        repository = AsyncMock()
        repository.save.side_effect = RuntimeError("disk full")
        use_case = CreateProductUseCase(repository)

        with pytest.raises(PersistenceException) as exc_info:
            await use_case.execute(title="Mug", description="", price=5)

        assert str(exc_info.value) == "error while creating the product"
