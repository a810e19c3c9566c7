"""Report domain service for dashboard aggregates."""

from decimal import Decimal

from stockit.database.base import Database
from stockit.domain.entities import InventoryStats, Product


class ReportService:
    """Service computing aggregates fresh from the current ledger."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_stats(self) -> InventoryStats:
        """Compute product count, low-stock count, revenue, cost and profit.

        Sums use exact Decimal arithmetic, so totals do not depend on the
        order in which purchases and sales were recorded. An empty ledger
        yields all zeros.
        """
        total_revenue = sum(
            (listing.sale.total_revenue for listing in self.db.list_sales()), Decimal("0")
        )
        total_cost = sum(
            (listing.purchase.total_cost for listing in self.db.list_purchases()), Decimal("0")
        )
        return InventoryStats(
            total_products=self.db.count_products(),
            low_stock_count=len(self.db.list_products(low_stock_only=True)),
            total_revenue=total_revenue,
            total_cost=total_cost,
        )

    def low_stock_products(self) -> list[Product]:
        """Products whose stock is strictly below their reorder level, in ID order."""
        return self.db.list_products(low_stock_only=True)
