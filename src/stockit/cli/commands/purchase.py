"""Purchase (stock intake) commands."""

import click
from stockit.cli.date_filters import resolve_cli_date_range
from stockit.cli.error_handling import handle_domain_error, handle_storage_error
from stockit.cli.product_resolution import resolve_product_or_exit
from stockit.domain.errors import DomainError, StorageError
from stockit.domain.ledger import LedgerService
from stockit.domain.product import ProductService
from stockit.utils.amount_parser import parse_amount


@click.group()
def purchase_group():
    """Record and view purchases."""
    pass


@purchase_group.command("record")
@click.argument("product", metavar="PRODUCT")
@click.argument("quantity", type=int)
@click.option("--price", help="Purchase price per unit (defaults to the product's price)")
@click.pass_context
def record_purchase(ctx, product: str, quantity: int, price: str | None):
    """Record stock received for a product.

    PRODUCT can be a product name or ID.

    Examples:
        stockit purchase record Widget 20 --price 3.00
        stockit purchase record 1 5
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
        purchase = ledger.record_purchase(product_id, quantity, unit_price)
        stocked = product_service.require_product(product_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Recorded purchase {purchase.id}")
    click.echo(f"  Product: {stocked.name}")
    click.echo(f"  Quantity: {purchase.quantity} @ ${purchase.purchase_price:,.2f}")
    click.echo(f"  Total cost: ${purchase.total_cost:,.2f}")
    click.echo(f"  Stock now: {stocked.quantity}")


@purchase_group.command("list")
@click.option("--search", help="Filter by product name (case-insensitive)")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def list_purchases(ctx, search: str | None, start_date: str | None, end_date: str | None):
    """List purchases, newest first."""
    db = ctx.obj["db"]
    ledger = LedgerService(db)
    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date)

    try:
        listings = ledger.list_purchases(search=search, start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not listings:
        click.echo("No purchases found.")
        return

    click.echo(f"\nFound {len(listings)} purchase(s):")
    click.echo("-" * 90)
    for listing in listings:
        p = listing.purchase
        click.echo(
            f"ID: {p.id:4d} | {p.purchase_date:%Y-%m-%d %H:%M} | {listing.product_name:20s} | "
            f"{p.quantity:5d} @ ${p.purchase_price:,.2f} | ${p.total_cost:,.2f}"
        )


def register_commands(cli):
    """Register purchase commands with main CLI."""
    cli.add_command(purchase_group, name="purchase")
