"""Input validation shared by the domain services."""

from decimal import Decimal, InvalidOperation
from typing import Any

from stockit.domain.errors import (
    ValidationError,
    negative_value,
    non_positive_quantity,
    too_large,
)

# Money is stored with two decimal places; anything finer would not round-trip.
AMOUNT_EXPONENT = -2
# Numeric(12, 2) leaves ten integer digits.
MAX_AMOUNT = Decimal("9999999999.99")
# Largest value a SQLite INTEGER column holds.
MAX_COUNT = 2**63 - 1


def require_name(name: Any) -> str:
    """Return the stripped product name, rejecting empty values."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name must not be empty")
    return name.strip()


def require_category(category: Any) -> str:
    if category is None:
        return ""
    if not isinstance(category, str):
        raise ValidationError("Category must be text")
    return category.strip()


def require_count(value: Any, field: str) -> int:
    """Return a non-negative integer count (stock, reorder level)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be a whole number (got {value!r})")
    if value < 0:
        raise ValidationError(negative_value(field, value))
    if value > MAX_COUNT:
        raise ValidationError(too_large(field, value, MAX_COUNT))
    return value


def require_positive_quantity(value: Any) -> int:
    """Return a recording quantity, which must be strictly positive."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Quantity must be a whole number (got {value!r})")
    if value <= 0:
        raise ValidationError(non_positive_quantity(value))
    if value > MAX_COUNT:
        raise ValidationError(too_large("Quantity", value, MAX_COUNT))
    return value


def require_delta(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Adjustment must be a whole number (got {value!r})")
    if abs(value) > MAX_COUNT:
        raise ValidationError(too_large("Adjustment", abs(value), MAX_COUNT))
    return value


def require_amount(value: Any, field: str) -> Decimal:
    """Return a non-negative money amount as a Decimal.

    Accepts Decimal, int, float and numeric strings. Floats are converted via
    their shortest repr so 5.0 becomes Decimal("5.0") rather than a binary
    expansion.

    Raises:
        ValidationError: If the value is not numeric, negative, not finite,
            larger than MAX_AMOUNT, or has more than two decimal places
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number (got {value!r})")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"{field} must be a number (got {value!r})") from e

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number (got {value!r})")
    if amount < 0:
        raise ValidationError(negative_value(field, amount))
    if amount > MAX_AMOUNT:
        raise ValidationError(too_large(field, amount, MAX_AMOUNT))
    if amount.normalize().as_tuple().exponent < AMOUNT_EXPONENT:
        raise ValidationError(f"{field} must have at most two decimal places (got {amount})")
    return amount
