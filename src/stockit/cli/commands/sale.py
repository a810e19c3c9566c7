"""Sale (stock outflow) commands."""

import click
from stockit.cli.date_filters import resolve_cli_date_range
from stockit.cli.error_handling import handle_domain_error, handle_storage_error
from stockit.cli.product_resolution import resolve_product_or_exit
from stockit.domain.errors import DomainError, StorageError
from stockit.domain.ledger import LedgerService
from stockit.domain.product import ProductService
from stockit.utils.amount_parser import parse_amount


@click.group()
def sale_group():
    """Record and view sales."""
    pass


@sale_group.command("record")
@click.argument("product", metavar="PRODUCT")
@click.argument("quantity", type=int)
@click.option("--price", help="Selling price per unit (defaults to the product's price)")
@click.pass_context
def record_sale(ctx, product: str, quantity: int, price: str | None):
    """Record a sale for a product.

    The sale is rejected if the product does not have enough stock.

    Examples:
        stockit sale record Widget 10 --price 5.00
    """
    db = ctx.obj["db"]
    product_service = ProductService(db)
    ledger = LedgerService(db)
    product_id = resolve_product_or_exit(ctx, product_service, product)

    unit_price = None
    if price is not None:
        try:
            unit_price = parse_amount(price)
        except ValueError as e:
            click.echo(f"Error: Invalid price format: {e}", err=True)
            ctx.exit(1)

    try:
        sale = ledger.record_sale(product_id, quantity, unit_price)
        remaining = product_service.require_product(product_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Recorded sale {sale.id}")
    click.echo(f"  Product: {remaining.name}")
    click.echo(f"  Quantity: {sale.quantity} @ ${sale.selling_price:,.2f}")
    click.echo(f"  Revenue: ${sale.total_revenue:,.2f}")
    click.echo(f"  Stock now: {remaining.quantity}")
    if remaining.is_low_stock:
        click.echo(f"  Warning: stock is below reorder level ({remaining.reorder_level})")


@sale_group.command("list")
@click.option("--search", help="Filter by product name (case-insensitive)")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def list_sales(ctx, search: str | None, start_date: str | None, end_date: str | None):
    """List sales, newest first."""
    db = ctx.obj["db"]
    ledger = LedgerService(db)
    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date)

    try:
        listings = ledger.list_sales(search=search, start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not listings:
        click.echo("No sales found.")
        return

    click.echo(f"\nFound {len(listings)} sale(s):")
    click.echo("-" * 90)
    for listing in listings:
        s = listing.sale
        click.echo(
            f"ID: {s.id:4d} | {s.sale_date:%Y-%m-%d %H:%M} | {listing.product_name:20s} | "
            f"{s.quantity:5d} @ ${s.selling_price:,.2f} | ${s.total_revenue:,.2f}"
        )


def register_commands(cli):
    """Register sale commands with main CLI."""
    cli.add_command(sale_group, name="sale")
