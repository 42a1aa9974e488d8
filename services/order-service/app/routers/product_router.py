"""
Product API router.
"""

import structlog
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..dependencies import get_create_product_use_case
from ..domain.exceptions import PersistenceException, ValidationException
from ..metrics import (
    product_persistence_failures_total,
    product_validation_failures_total,
    products_created_total,
)
from ..use_cases.create_product import CreateProductUseCase
from .order_router import INTERNAL_ERROR_MESSAGE, MessageResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["products"])


class CreateProductRequest(BaseModel):
    """Product creation request model."""

    title: str
    description: str = ""
    price: float = Field(..., allow_inf_nan=False)


@router.post(
    "/product",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        400: {"description": "Business rule violated", "model": MessageResponse},
        500: {"description": "Unexpected error", "model": MessageResponse},
    },
    summary="Create a product",
)
async def create_product(
    body: CreateProductRequest,
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
):
    """Create a product priced between 0 and 10000 inclusive."""
    try:
        await use_case.execute(title=body.title, description=body.description, price=body.price)

    except ValidationException as e:
        product_validation_failures_total.labels(field=e.field).inc()
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": e.message}
        )

    except PersistenceException:
        product_persistence_failures_total.inc()
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )

    except Exception as e:
        logger.error(f"Unexpected error during product creation: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )

    products_created_total.inc()
    return Response(status_code=status.HTTP_201_CREATED)
