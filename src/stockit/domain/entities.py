"""Domain model entities for stockit.

These are pure data classes representing inventory concepts, independent of
the database schema. Storage implementations convert their rows into these
before handing them to the services.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

UNKNOWN_PRODUCT_NAME = "Unknown product"


@dataclass(frozen=True)
class Product:
    """Catalog product with its current on-hand stock."""

    id: int
    name: str
    category: str
    price: Decimal
    quantity: int
    reorder_level: int

    @property
    def is_low_stock(self) -> bool:
        """True when stock is strictly below the reorder level."""
        return self.quantity < self.reorder_level


@dataclass(frozen=True)
class Purchase:
    """Stock received for a product. Append-only ledger entry."""

    id: int
    product_id: Optional[int]
    quantity: int
    purchase_price: Decimal
    purchase_date: datetime

    @property
    def total_cost(self) -> Decimal:
        return self.quantity * self.purchase_price


@dataclass(frozen=True)
class Sale:
    """Stock sold from a product. Append-only ledger entry."""

    id: int
    product_id: Optional[int]
    quantity: int
    selling_price: Decimal
    sale_date: datetime

    @property
    def total_revenue(self) -> Decimal:
        return self.quantity * self.selling_price


@dataclass(frozen=True)
class PurchaseListing:
    """Purchase joined with the product name resolved at query time."""

    purchase: Purchase
    product_name: str


@dataclass(frozen=True)
class SaleListing:
    """Sale joined with the product name resolved at query time."""

    sale: Sale
    product_name: str


@dataclass(frozen=True)
class InventoryStats:
    """Dashboard aggregates computed from the current ledger."""

    total_products: int
    low_stock_count: int
    total_revenue: Decimal
    total_cost: Decimal

    @property
    def profit(self) -> Decimal:
        return self.total_revenue - self.total_cost

    def to_dict(self) -> dict[str, Any]:
        """Render the aggregates under the keys used by transport callers."""
        return {
            "totalProducts": self.total_products,
            "lowStockCount": self.low_stock_count,
            "totalRevenue": self.total_revenue,
            "totalCost": self.total_cost,
            "profit": self.profit,
        }
