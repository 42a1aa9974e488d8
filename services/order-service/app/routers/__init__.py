"""
API routers for order service endpoints.
"""

from . import health_router, order_router, product_router

__all__ = ["order_router", "product_router", "health_router"]
