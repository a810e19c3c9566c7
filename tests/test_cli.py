"""Tests for CLI commands."""

import json

import pytest
from stockit.cli.main import cli


def invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_help_does_not_require_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "product" in result.output
    assert "low-stock" in result.output


class TestProductCommands:
    def test_product_add(self, cli_runner, temp_db):
        result = invoke(
            cli_runner, temp_db,
            "product", "add", "Widget", "--category", "Hardware", "--price", "$4.99", "--quantity", "15",
        )

        assert result.exit_code == 0
        assert "Created product 'Widget'" in result.output
        assert "ID:" in result.output
        (product,) = temp_db.list_products()
        assert str(product.price) == "4.99"
        assert product.quantity == 15

    def test_product_add_empty_name(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "product", "add", " ")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert temp_db.list_products() == []

    def test_product_add_negative_price(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "product", "add", "Widget", "--price=-1")
        assert result.exit_code == 1
        assert "must not be negative" in result.output

    def test_product_add_bad_price(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "product", "add", "Widget", "--price", "cheap")
        assert result.exit_code == 1
        assert "Invalid price format" in result.output

    def test_product_list_empty(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "product", "list")
        assert result.exit_code == 0
        assert "No products found" in result.output

    def test_product_list_search(self, cli_runner, temp_db, product_service, widget):
        product_service.create_product(name="Gizmo", category="Electronics")

        result = invoke(cli_runner, temp_db, "product", "list", "--search", "electr")

        assert result.exit_code == 0
        assert "Gizmo" in result.output
        assert "Widget" not in result.output

    def test_product_list_marks_low_stock(self, cli_runner, temp_db, product_service):
        product_service.create_product(name="Scarce", quantity=1, reorder_level=5)
        result = invoke(cli_runner, temp_db, "product", "list")
        assert "LOW" in result.output

    def test_product_update(self, cli_runner, temp_db, product_service, widget):
        result = invoke(
            cli_runner, temp_db, "product", "update", "Widget", "--price", "6.25", "--quantity", "40"
        )

        assert result.exit_code == 0
        assert "Updated product" in result.output
        product = product_service.get_product(widget.id)
        assert str(product.price) == "6.25"
        assert product.quantity == 40

    def test_product_update_unknown(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "product", "update", "Ghost", "--price", "1")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_product_adjust(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "product", "adjust", str(widget.id), "--by=-5")

        assert result.exit_code == 0
        assert "is now 10" in result.output
        assert product_service.get_product(widget.id).quantity == 10

    def test_product_adjust_below_zero(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "product", "adjust", "Widget", "--by=-16")

        assert result.exit_code == 1
        assert "Insufficient stock" in result.output
        assert product_service.get_product(widget.id).quantity == 15

    def test_product_delete_confirmed(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "product", "delete", "Widget", input="y\n")

        assert result.exit_code == 0
        assert "Deleted product 'Widget'" in result.output
        assert product_service.get_product(widget.id) is None

    def test_product_delete_cancelled(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "product", "delete", "Widget", input="n\n")

        assert result.exit_code == 0
        assert "Deletion cancelled" in result.output
        assert product_service.get_product(widget.id) is not None

    def test_product_delete_yes_flag(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "product", "delete", str(widget.id), "--yes")
        assert result.exit_code == 0
        assert product_service.get_product(widget.id) is None

    def test_product_delete_vanishes_after_resolution(
        self, cli_runner, temp_db, product_service, widget, monkeypatch
    ):
        from stockit.cli.commands import product as product_commands

        real_resolve = product_commands.resolve_product_or_exit

        def resolve_then_lose(ctx, service, product):
            product_id = real_resolve(ctx, service, product)
            service.delete_product(product_id)
            return product_id

        monkeypatch.setattr(product_commands, "resolve_product_or_exit", resolve_then_lose)
        result = invoke(cli_runner, temp_db, "product", "delete", "Widget", input="y\n")

        assert result.exit_code == 1
        assert f"Product {widget.id} not found" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_product_add_quantity_past_cap(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "product", "add", "Bulk", "--quantity", str(2**63))
        assert result.exit_code == 1
        assert "must not exceed" in result.output
        assert temp_db.list_products() == []

    def test_product_named_like_a_number(self, cli_runner, temp_db, product_service, widget):
        vintage = product_service.create_product(name="2024")
        result = invoke(cli_runner, temp_db, "product", "adjust", "2024", "--by", "3")

        assert result.exit_code == 0
        assert product_service.get_product(vintage.id).quantity == 3

    def test_ambiguous_product_name(self, cli_runner, temp_db, product_service, widget):
        product_service.create_product(name="Widget")
        result = invoke(cli_runner, temp_db, "product", "delete", "Widget", "--yes")
        assert result.exit_code == 1
        assert "ambiguous" in result.output


class TestLedgerCommands:
    def test_purchase_record(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "purchase", "record", "Widget", "20", "--price", "3.00")

        assert result.exit_code == 0
        assert "Recorded purchase" in result.output
        assert "Total cost: $60.00" in result.output
        assert "Stock now: 35" in result.output

    def test_purchase_record_zero_quantity(self, cli_runner, temp_db, widget):
        result = invoke(cli_runner, temp_db, "purchase", "record", "Widget", "0")
        assert result.exit_code == 1
        assert "greater than zero" in result.output

    def test_sale_record(self, cli_runner, temp_db, widget):
        result = invoke(cli_runner, temp_db, "sale", "record", "Widget", "10", "--price", "5.00")

        assert result.exit_code == 0
        assert "Revenue: $50.00" in result.output
        assert "Stock now: 5" in result.output
        assert "below reorder level" in result.output

    def test_sale_record_uses_product_price(self, cli_runner, temp_db, widget):
        result = invoke(cli_runner, temp_db, "sale", "record", "Widget", "2")
        assert result.exit_code == 0
        assert "2 @ $5.00" in result.output

    def test_sale_record_insufficient_stock(self, cli_runner, temp_db, product_service, widget):
        result = invoke(cli_runner, temp_db, "sale", "record", "Widget", "16")

        assert result.exit_code == 1
        assert "Insufficient stock" in result.output
        assert product_service.get_product(widget.id).quantity == 15

    def test_sale_record_unknown_product(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "sale", "record", "42", "1")
        assert result.exit_code == 1
        assert "Product 42 not found" in result.output

    def test_list_history_with_deleted_product(
        self, cli_runner, temp_db, ledger_service, product_service, widget
    ):
        ledger_service.record_purchase(widget.id, 5, "3.00")
        ledger_service.record_sale(widget.id, 2, "5.00")
        product_service.delete_product(widget.id)

        purchases = invoke(cli_runner, temp_db, "purchase", "list")
        sales = invoke(cli_runner, temp_db, "sale", "list")

        assert purchases.exit_code == 0
        assert "Unknown product" in purchases.output
        assert sales.exit_code == 0
        assert "Unknown product" in sales.output

    def test_list_empty(self, cli_runner, temp_db):
        assert "No purchases found" in invoke(cli_runner, temp_db, "purchase", "list").output
        assert "No sales found" in invoke(cli_runner, temp_db, "sale", "list").output

    def test_list_with_date_filter(self, cli_runner, temp_db, ledger_service, widget):
        ledger_service.record_sale(widget.id, 1, "5.00")

        result = invoke(cli_runner, temp_db, "sale", "list", "--end-date", "2000-01-01")

        assert result.exit_code == 0
        assert "No sales found" in result.output

    def test_list_with_invalid_date(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "purchase", "list", "--start-date", "someday")
        assert result.exit_code == 1
        assert "Invalid start date" in result.output


class TestReportCommands:
    def test_stats_empty(self, cli_runner, temp_db):
        result = invoke(cli_runner, temp_db, "stats")

        assert result.exit_code == 0
        assert "Products:       0" in result.output
        assert "Profit:         $0.00" in result.output

    def test_stats_json(self, cli_runner, temp_db, ledger_service, widget):
        ledger_service.record_sale(widget.id, 10, "5.00")
        ledger_service.record_purchase(widget.id, 20, "3.00")

        result = invoke(cli_runner, temp_db, "stats", "--json")

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["totalProducts"] == 1
        assert payload["lowStockCount"] == 0
        assert float(payload["totalRevenue"]) == pytest.approx(50.0)
        assert float(payload["totalCost"]) == pytest.approx(60.0)
        assert float(payload["profit"]) == pytest.approx(-10.0)

    def test_low_stock(self, cli_runner, temp_db, ledger_service, widget):
        assert "No low-stock products" in invoke(cli_runner, temp_db, "low-stock").output

        ledger_service.record_sale(widget.id, 10, "5.00")
        result = invoke(cli_runner, temp_db, "low-stock")

        assert result.exit_code == 0
        assert "1 product(s) below reorder level" in result.output
        assert "Widget" in result.output


def test_storage_failure_exit_code(cli_runner, temp_db, monkeypatch):
    """Storage failures stay distinguishable from domain errors."""
    from stockit.database.sqlalchemy_db import SQLAlchemyDatabase
    from stockit.domain.errors import StorageError

    def broken_list_products(self, search=None, low_stock_only=False):
        raise StorageError("disk I/O error")

    monkeypatch.setattr(SQLAlchemyDatabase, "list_products", broken_list_products)

    result = invoke(cli_runner, temp_db, "product", "list")

    assert result.exit_code == 3
    assert "Storage error: disk I/O error" in result.output
