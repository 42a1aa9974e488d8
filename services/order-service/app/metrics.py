"""
Prometheus metrics for Order Service.

Tracks HTTP traffic and the outcome of order and product creation.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "order_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "order_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Order metrics
orders_created_total = Counter("orders_created_total", "Total orders created")

order_validation_failures_total = Counter(
    "order_validation_failures_total",
    "Order requests rejected by business rules",
    ["field"],
)

order_persistence_failures_total = Counter(
    "order_persistence_failures_total", "Orders that could not be stored"
)

# Product metrics
products_created_total = Counter("products_created_total", "Total products created")

product_validation_failures_total = Counter(
    "product_validation_failures_total",
    "Product requests rejected by business rules",
    ["field"],
)

product_persistence_failures_total = Counter(
    "product_persistence_failures_total", "Products that could not be stored"
)


def track_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record a finished HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def metrics_endpoint() -> Response:
    """Return Prometheus exposition for all registered metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
