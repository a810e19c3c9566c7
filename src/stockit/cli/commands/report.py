"""Dashboard report commands."""

import json
from decimal import Decimal

import click
from stockit.cli.commands.product import format_product_row
from stockit.cli.error_handling import handle_storage_error
from stockit.domain.errors import StorageError
from stockit.domain.report import ReportService


@click.command("stats")
@click.option("--json", "as_json", is_flag=True, help="Print the aggregates as JSON")
@click.pass_context
def show_stats(ctx, as_json: bool):
    """Show product count, low-stock count, revenue, cost and profit."""
    db = ctx.obj["db"]
    service = ReportService(db)

    try:
        stats = service.get_stats()
    except StorageError as e:
        handle_storage_error(ctx, e)

    if as_json:
        payload = {
            key: str(value) if isinstance(value, Decimal) else value
            for key, value in stats.to_dict().items()
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo("\nInventory summary:")
    click.echo("-" * 40)
    click.echo(f"  Products:       {stats.total_products}")
    click.echo(f"  Low stock:      {stats.low_stock_count}")
    click.echo(f"  Total revenue:  ${stats.total_revenue:,.2f}")
    click.echo(f"  Total cost:     ${stats.total_cost:,.2f}")
    click.echo(f"  Profit:         ${stats.profit:,.2f}")


@click.command("low-stock")
@click.pass_context
def show_low_stock(ctx):
    """List products whose stock is below their reorder level."""
    db = ctx.obj["db"]
    service = ReportService(db)

    try:
        products = service.low_stock_products()
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not products:
        click.echo("No low-stock products.")
        return

    click.echo(f"\n{len(products)} product(s) below reorder level:")
    click.echo("-" * 100)
    for product in products:
        click.echo(format_product_row(product))


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(show_stats)
    cli.add_command(show_low_stock)
