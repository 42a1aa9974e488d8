"""
Custom exceptions for the order service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.).
"""

from typing import Any, Optional


class OrderServiceException(Exception):
    """Base exception for all order service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(OrderServiceException):
    """
    Raised when input violates a business rule.

    The reason is user-facing and becomes the exception message verbatim.
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        super().__init__(
            message=reason,
            details={"field": field, "value": str(value), "reason": reason},
        )


class PersistenceException(OrderServiceException):
    """Raised when an entity could not be stored. The underlying cause is not exposed."""

    def __init__(self, entity: str):
        super().__init__(
            message=f"error while creating the {entity}", details={"entity": entity}
        )


class StorageException(OrderServiceException):
    """Raised by repository adapters when a storage operation fails."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Storage {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
