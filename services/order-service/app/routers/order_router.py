"""
Order API router.

Parses order creation requests, invokes the create-order use case and
translates domain errors into HTTP status codes.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..dependencies import get_create_order_use_case
from ..domain.exceptions import PersistenceException, ValidationException
from ..metrics import (
    order_persistence_failures_total,
    order_validation_failures_total,
    orders_created_total,
)
from ..use_cases.create_order import CreateOrderUseCase

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["orders"])

INTERNAL_ERROR_MESSAGE = "Internal server error"


class CreateOrderRequest(BaseModel):
    """Order creation request model."""

    model_config = ConfigDict(populate_by_name=True)

    product_ids: List[int] = Field(
        ...,
        alias="productIds",
        description="Identifiers of the ordered products",
        json_schema_extra={"example": [1, 2, 3]},
    )
    total_price: float = Field(
        ...,
        alias="totalPrice",
        allow_inf_nan=False,
        description="Total amount of the order",
        json_schema_extra={"example": 120},
    )


class MessageResponse(BaseModel):
    """Error response model."""

    message: str


@router.post(
    "/order",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        201: {"description": "Order created"},
        400: {"description": "Business rule violated", "model": MessageResponse},
        500: {"description": "Unexpected error", "model": MessageResponse},
    },
    summary="Create an order",
)
async def create_order(
    body: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    """
    Create a PENDING order.

    An order holds between 1 and 5 products and a total price
    between 2 and 500 inclusive.
    """
    try:
        await use_case.execute(product_ids=body.product_ids, total_price=body.total_price)

    except ValidationException as e:
        order_validation_failures_total.labels(field=e.field).inc()
        logger.info("Order rejected", reason=e.message, field=e.field)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": e.message}
        )

    except PersistenceException as e:
        order_persistence_failures_total.inc()
        logger.error("Order could not be stored", error=e.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )

    except Exception as e:
        logger.error(f"Unexpected error during order creation: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )

    orders_created_total.inc()
    return Response(status_code=status.HTTP_201_CREATED)
