"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class InsufficientStockError(DomainError):
    """Sale or adjustment would drive a product's stock below zero."""


class StorageError(RuntimeError):
    """The underlying storage failed (I/O, constraint violation, ...).

    Kept outside the DomainError hierarchy so callers can tell an expected,
    user-facing condition apart from a storage failure.
    """


def product_not_found(product_id: int) -> str:
    """Return message for missing product."""
    return f"Product {product_id} not found"


def insufficient_stock(product_id: int, available: int, requested: int) -> str:
    """Return message for a stock shortfall."""
    return (
        f"Insufficient stock for product {product_id}: "
        f"{available} available, {requested} requested"
    )


def negative_value(field: str, value: int | Decimal) -> str:
    """Return message for a negative numeric field."""
    return f"{field} must not be negative (got {value})"


def non_positive_quantity(value: int) -> str:
    """Return message for a recording quantity that is zero or negative."""
    return f"Quantity must be greater than zero (got {value})"


def too_large(field: str, value: int | Decimal, limit: int | Decimal) -> str:
    """Return message for a numeric field beyond what storage can hold."""
    return f"{field} must not exceed {limit} (got {value})"


def stock_overflow(product_id: int, available: int, requested: int) -> str:
    """Return message for an increment that would overflow stored stock."""
    return (
        f"Stock for product {product_id} cannot grow by {requested}: "
        f"{available} on hand is already near the limit"
    )
