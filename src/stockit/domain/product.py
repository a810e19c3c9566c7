"""Product domain service."""

import logging
from decimal import Decimal
from typing import Optional

from stockit.database.base import Database
from stockit.domain.entities import Product as ProductEntity
from stockit.domain.errors import NotFoundError, product_not_found
from stockit.domain.validation import (
    require_amount,
    require_category,
    require_count,
    require_delta,
    require_name,
)

logger = logging.getLogger(__name__)

DEFAULT_REORDER_LEVEL = 10


class ProductService:
    """Service for managing the product catalog and its stock levels."""

    def __init__(self, db: Database):
        """Initialize product service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_product(
        self,
        name: str,
        category: Optional[str] = "",
        price: Decimal | int | str = 0,
        reorder_level: int = DEFAULT_REORDER_LEVEL,
        quantity: int = 0,
    ) -> ProductEntity:
        """Create a new product.

        Args:
            name: Product name (must not be empty; duplicates are allowed)
            category: Category text, may be empty
            price: Default unit price used to prefill purchases and sales
            reorder_level: Stock level below which the product is low stock
            quantity: Initial on-hand stock

        Returns:
            The created product

        Raises:
            ValidationError: If the name is empty or a numeric field is negative
        """
        name = require_name(name)
        category = require_category(category)
        price = require_amount(price, "Price")
        reorder_level = require_count(reorder_level, "Reorder level")
        quantity = require_count(quantity, "Quantity")

        product_id = self.db.create_product(
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            reorder_level=reorder_level,
        )
        logger.info("Created product %d '%s' with %d in stock", product_id, name, quantity)
        return self.require_product(product_id)

    def get_product(self, product_id: int) -> Optional[ProductEntity]:
        """Get product by ID.

        Returns:
            Product entity or None if not found
        """
        return self.db.get_product(product_id)

    def require_product(self, product_id: int) -> ProductEntity:
        """Get product by ID or raise NotFoundError."""
        product = self.db.get_product(product_id)
        if product is None:
            raise NotFoundError(product_not_found(product_id))
        return product

    def list_products(self, search: Optional[str] = None) -> list[ProductEntity]:
        """List products in insertion order.

        Args:
            search: Optional case-insensitive substring of name or category

        Returns:
            List of product entities
        """
        if search is not None:
            search = search.strip() or None
        return self.db.list_products(search=search)

    def update_product(
        self,
        product_id: int,
        *,
        name: Optional[str] = None,
        category: Optional[str] = None,
        price: Optional[Decimal | int | str] = None,
        reorder_level: Optional[int] = None,
        quantity: Optional[int] = None,
    ) -> ProductEntity:
        """Overwrite the given fields of a product.

        Fields left as None are unchanged. Passing quantity is a manual stock
        correction and bypasses the purchase/sale history.

        Raises:
            NotFoundError: If the product does not exist
            ValidationError: If any given value is invalid
        """
        # Validate everything before writing anything.
        if name is not None:
            name = require_name(name)
        if category is not None:
            category = require_category(category)
        if price is not None:
            price = require_amount(price, "Price")
        if reorder_level is not None:
            reorder_level = require_count(reorder_level, "Reorder level")
        if quantity is not None:
            quantity = require_count(quantity, "Quantity")

        self.db.update_product(
            product_id,
            name=name,
            category=category,
            price=price,
            reorder_level=reorder_level,
            quantity=quantity,
        )
        logger.info("Updated product %d", product_id)
        return self.require_product(product_id)

    def set_quantity(self, product_id: int, quantity: int) -> ProductEntity:
        """Overwrite a product's stock (manual correction).

        Raises:
            NotFoundError: If the product does not exist
            ValidationError: If quantity is negative
        """
        quantity = require_count(quantity, "Quantity")
        self.db.set_product_quantity(product_id, quantity)
        logger.debug("Set product %d stock to %d", product_id, quantity)
        return self.require_product(product_id)

    def adjust_quantity(self, product_id: int, delta: int) -> ProductEntity:
        """Add delta (possibly negative) to a product's stock atomically.

        Raises:
            NotFoundError: If the product does not exist
            InsufficientStockError: If stock would become negative
            ValidationError: If stock would exceed the storable maximum
        """
        delta = require_delta(delta)
        new_quantity = self.db.adjust_product_quantity(product_id, delta)
        logger.debug("Adjusted product %d stock by %+d to %d", product_id, delta, new_quantity)
        return self.require_product(product_id)

    def delete_product(self, product_id: int) -> None:
        """Delete a product. Its purchase and sale history is kept.

        Raises:
            NotFoundError: If the product does not exist
        """
        self.db.delete_product(product_id)
        logger.info("Deleted product %d", product_id)
