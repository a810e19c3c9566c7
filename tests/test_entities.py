"""Tests for domain entities."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from stockit.domain.entities import (
    InventoryStats,
    Product,
    Purchase,
    Sale,
)


def make_product(quantity: int = 15, reorder_level: int = 10) -> Product:
    return Product(
        id=1,
        name="Widget",
        category="Hardware",
        price=Decimal("5.00"),
        quantity=quantity,
        reorder_level=reorder_level,
    )


class TestProduct:
    """Tests for Product entity."""

    def test_product_immutability(self):
        """Test that Product entities are immutable."""
        product = make_product()
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            product.quantity = 3

    def test_low_stock_is_strictly_below_reorder_level(self):
        """A product exactly at its reorder level is not low stock."""
        assert not make_product(quantity=15, reorder_level=10).is_low_stock
        assert not make_product(quantity=10, reorder_level=10).is_low_stock
        assert make_product(quantity=9, reorder_level=10).is_low_stock

    def test_zero_reorder_level_never_low(self):
        assert not make_product(quantity=0, reorder_level=0).is_low_stock


class TestLedgerEntries:
    """Tests for Purchase and Sale entities."""

    def test_purchase_total_cost(self):
        purchase = Purchase(
            id=1,
            product_id=1,
            quantity=20,
            purchase_price=Decimal("3.00"),
            purchase_date=datetime.now(UTC),
        )
        assert purchase.total_cost == Decimal("60.00")

    def test_sale_total_revenue(self):
        sale = Sale(
            id=1,
            product_id=None,
            quantity=3,
            selling_price=Decimal("0.10"),
            sale_date=datetime.now(UTC),
        )
        assert sale.total_revenue == Decimal("0.30")


class TestInventoryStats:
    """Tests for InventoryStats entity."""

    def test_profit_is_revenue_minus_cost(self):
        stats = InventoryStats(
            total_products=1,
            low_stock_count=1,
            total_revenue=Decimal("50.00"),
            total_cost=Decimal("60.00"),
        )
        assert stats.profit == Decimal("-10.00")

    def test_to_dict_uses_transport_keys(self):
        stats = InventoryStats(
            total_products=2,
            low_stock_count=1,
            total_revenue=Decimal("50.00"),
            total_cost=Decimal("20.00"),
        )
        assert stats.to_dict() == {
            "totalProducts": 2,
            "lowStockCount": 1,
            "totalRevenue": Decimal("50.00"),
            "totalCost": Decimal("20.00"),
            "profit": Decimal("30.00"),
        }
