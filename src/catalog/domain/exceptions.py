"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each exception class carries an ``ErrorCode`` that a request boundary can
map to a status and a stable machine-readable code.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    INVALID_INPUT_VALUE = ("C001", 400, "Invalid input value")
    RESOURCE_NOT_FOUND = ("C002", 404, "Resource not found")
    INTERNAL_SERVER_ERROR = ("C003", 500, "Internal server error")

    PRODUCT_NOT_FOUND = ("P001", 404, "Product not found")
    PRODUCT_INVALID_PRICE = ("P002", 400, "Product price is invalid")
    PRODUCT_OUT_OF_STOCK = ("P003", 400, "Product is out of stock")

    def __init__(self, code: str, http_status: int, message: str) -> None:
        self.code = code
        self.http_status = http_status
        self.message = message


class DomainException(Exception):
    """Base class for all domain errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.error_code.message
        super().__init__(self.message)


class ValidationError(DomainException):
    """A business rule or invariant was violated by caller input."""

    error_code = ErrorCode.INVALID_INPUT_VALUE


class InvalidAmountError(ValidationError):
    """A Money operation was given, or would produce, a negative amount."""

    error_code = ErrorCode.PRODUCT_INVALID_PRICE


class InvalidQuantityError(ValidationError):
    """A stock adjustment was requested with a non-positive quantity."""


class InsufficientStockError(DomainException):
    """Removing stock would drive the stock count below zero."""

    error_code = ErrorCode.PRODUCT_OUT_OF_STOCK

    def __init__(self, current_stock: int) -> None:
        super().__init__(f"Insufficient stock (current stock: {current_stock})")
        self.current_stock = current_stock


class OutOfStockError(DomainException):
    """A reservation was refused.

    ``available`` is reported as 0 when the product itself is not
    sellable, regardless of its actual stock count.
    """

    error_code = ErrorCode.PRODUCT_OUT_OF_STOCK

    def __init__(self, product_id: int | None, requested: int, available: int) -> None:
        super().__init__(
            f"Product #{product_id} is out of stock "
            f"(requested {requested}, available {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    error_code = ErrorCode.RESOURCE_NOT_FOUND


class ProductNotFoundError(EntityNotFoundError):

    error_code = ErrorCode.PRODUCT_NOT_FOUND

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} not found")
        self.product_id = product_id
