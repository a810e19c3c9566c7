"""Ledger domain service: recording purchases and sales."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from stockit.database.base import Database
from stockit.domain.entities import (
    Purchase as PurchaseEntity,
    Sale as SaleEntity,
    PurchaseListing,
    SaleListing,
)
from stockit.domain.errors import (
    InsufficientStockError,
    NotFoundError,
    StorageError,
    ValidationError,
    product_not_found,
)
from stockit.domain.validation import require_amount, require_positive_quantity

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for the append-only purchase and sale ledger.

    Each recording is one storage transaction that appends the ledger entry
    and adjusts the product's stock together.
    """

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def _resolve_unit_price(
        self, product_id: int, unit_price: Optional[Decimal | int | str], field: str
    ) -> Decimal:
        # No explicit price: prefill from the product's current price.
        if unit_price is not None:
            return require_amount(unit_price, field)
        product = self.db.get_product(product_id)
        if product is None:
            raise NotFoundError(product_not_found(product_id))
        return product.price

    def record_purchase(
        self,
        product_id: int,
        quantity: int,
        unit_price: Optional[Decimal | int | str] = None,
    ) -> PurchaseEntity:
        """Record stock received for a product.

        Args:
            product_id: Product ID
            quantity: Units received (must be > 0)
            unit_price: Purchase price per unit; defaults to the product's price

        Returns:
            The recorded purchase

        Raises:
            ValidationError: If quantity or price is invalid, or stock would
                exceed the storable maximum
            NotFoundError: If the product does not exist
        """
        quantity = require_positive_quantity(quantity)
        price = self._resolve_unit_price(product_id, unit_price, "Purchase price")

        purchase_id = self.db.record_purchase(
            product_id=product_id, quantity=quantity, purchase_price=price
        )
        logger.info(
            "Recorded purchase %d: product %d +%d @ %s", purchase_id, product_id, quantity, price
        )
        return self._require_purchase(purchase_id)

    def record_sale(
        self,
        product_id: int,
        quantity: int,
        unit_price: Optional[Decimal | int | str] = None,
    ) -> SaleEntity:
        """Record stock sold from a product.

        Args:
            product_id: Product ID
            quantity: Units sold (must be > 0 and no more than current stock)
            unit_price: Selling price per unit; defaults to the product's price

        Returns:
            The recorded sale

        Raises:
            ValidationError: If quantity is not positive or the price is invalid
            NotFoundError: If the product does not exist
            InsufficientStockError: If current stock is lower than quantity
        """
        quantity = require_positive_quantity(quantity)
        price = self._resolve_unit_price(product_id, unit_price, "Selling price")

        try:
            sale_id = self.db.record_sale(
                product_id=product_id, quantity=quantity, selling_price=price
            )
        except InsufficientStockError as e:
            logger.warning("Rejected sale of %d from product %d: %s", quantity, product_id, e)
            raise

        logger.info("Recorded sale %d: product %d -%d @ %s", sale_id, product_id, quantity, price)
        return self._require_sale(sale_id)

    def _require_purchase(self, purchase_id: int) -> PurchaseEntity:
        purchase = self.db.get_purchase(purchase_id)
        if purchase is None:
            raise StorageError(f"Purchase {purchase_id} missing after commit")
        return purchase

    def _require_sale(self, sale_id: int) -> SaleEntity:
        sale = self.db.get_sale(sale_id)
        if sale is None:
            raise StorageError(f"Sale {sale_id} missing after commit")
        return sale

    def list_purchases(
        self,
        search: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[PurchaseListing]:
        """List purchases, newest first, with product names resolved.

        Purchases whose product was deleted are listed under the
        "Unknown product" placeholder.

        Raises:
            ValidationError: If start_date is after end_date
        """
        _check_range(start_date, end_date)
        if search is not None:
            search = search.strip() or None
        return self.db.list_purchases(search=search, start_date=start_date, end_date=end_date)

    def list_sales(
        self,
        search: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[SaleListing]:
        """List sales, newest first, with product names resolved."""
        _check_range(start_date, end_date)
        if search is not None:
            search = search.strip() or None
        return self.db.list_sales(search=search, start_date=start_date, end_date=end_date)


def _check_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationError(f"Start date {start_date} is after end date {end_date}")
