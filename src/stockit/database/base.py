"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from stockit.domain.entities import (
    Product,
    Purchase,
    Sale,
    PurchaseListing,
    SaleListing,
)


class Database(ABC):
    """Abstract storage interface for the inventory ledger.

    Every method is a single transaction: it either applies all of its effects
    or none. Implementations raise stockit.domain.errors.StorageError for
    failures of the underlying storage engine.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Product operations
    @abstractmethod
    def create_product(
        self,
        name: str,
        category: str,
        price: Decimal,
        quantity: int,
        reorder_level: int,
    ) -> int:
        """Create a new product. Returns product ID."""
        pass

    @abstractmethod
    def get_product(self, product_id: int) -> Optional[Product]:
        """Get product by ID."""
        pass

    @abstractmethod
    def list_products(
        self, search: Optional[str] = None, low_stock_only: bool = False
    ) -> list[Product]:
        """List products in ID order.

        Args:
            search: Optional case-insensitive substring of name or category
            low_stock_only: If True, only products with quantity < reorder_level
        """
        pass

    @abstractmethod
    def count_products(self) -> int:
        """Return the number of products."""
        pass

    @abstractmethod
    def update_product(
        self,
        product_id: int,
        name: Optional[str] = None,
        category: Optional[str] = None,
        price: Optional[Decimal] = None,
        reorder_level: Optional[int] = None,
        quantity: Optional[int] = None,
    ) -> None:
        """Overwrite the given (non-None) product fields in one transaction.

        Raises:
            NotFoundError: If the product does not exist
        """
        pass

    @abstractmethod
    def set_product_quantity(self, product_id: int, quantity: int) -> None:
        """Overwrite a product's stock with an absolute value.

        Raises:
            NotFoundError: If the product does not exist
        """
        pass

    @abstractmethod
    def adjust_product_quantity(self, product_id: int, delta: int) -> int:
        """Atomically add delta to a product's stock. Returns the new quantity.

        Raises:
            NotFoundError: If the product does not exist
            InsufficientStockError: If the result would be negative
            ValidationError: If the result would exceed the storable maximum
        """
        pass

    @abstractmethod
    def delete_product(self, product_id: int) -> None:
        """Delete a product, leaving its purchase and sale history in place.

        Raises:
            NotFoundError: If the product does not exist
        """
        pass

    # Recording transactions
    @abstractmethod
    def record_purchase(self, product_id: int, quantity: int, purchase_price: Decimal) -> int:
        """Append a purchase and increment stock in one transaction. Returns purchase ID.

        Raises:
            NotFoundError: If the product does not exist
            ValidationError: If stock would exceed the storable maximum
        """
        pass

    @abstractmethod
    def record_sale(self, product_id: int, quantity: int, selling_price: Decimal) -> int:
        """Append a sale and decrement stock in one transaction. Returns sale ID.

        The stock check and the decrement are evaluated as one conditional
        update, so concurrent sales can never drive stock negative.

        Raises:
            NotFoundError: If the product does not exist
            InsufficientStockError: If stock is lower than quantity
        """
        pass

    @abstractmethod
    def get_purchase(self, purchase_id: int) -> Optional[Purchase]:
        """Get purchase by ID."""
        pass

    @abstractmethod
    def get_sale(self, sale_id: int) -> Optional[Sale]:
        """Get sale by ID."""
        pass

    @abstractmethod
    def list_purchases(
        self,
        search: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[PurchaseListing]:
        """List purchases newest first, joined with the product's current name.

        Args:
            search: Optional case-insensitive substring of the resolved product name
            start_date: Optional inclusive start date (UTC)
            end_date: Optional inclusive end date (UTC)
        """
        pass

    @abstractmethod
    def list_sales(
        self,
        search: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[SaleListing]:
        """List sales newest first, joined with the product's current name."""
        pass
