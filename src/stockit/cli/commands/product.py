"""Product management commands."""

import click
from stockit.cli.error_handling import handle_domain_error, handle_storage_error
from stockit.cli.product_resolution import resolve_product_or_exit
from stockit.domain.entities import Product
from stockit.domain.errors import DomainError, StorageError
from stockit.domain.product import ProductService, DEFAULT_REORDER_LEVEL
from stockit.utils.amount_parser import parse_amount


def _parse_price_or_exit(ctx, price: str):
    try:
        return parse_amount(price)
    except ValueError as e:
        click.echo(f"Error: Invalid price format: {e}", err=True)
        ctx.exit(1)


def format_product_row(product: Product) -> str:
    """Format one product as a table row."""
    flag = "  LOW" if product.is_low_stock else ""
    return (
        f"ID: {product.id:3d} | {product.name:20s} | {product.category:15s} | "
        f"${product.price:>9,.2f} | Qty: {product.quantity:5d} | "
        f"Reorder: {product.reorder_level:4d}{flag}"
    )


@click.group()
def product_group():
    """Manage products."""
    pass


@product_group.command("add")
@click.argument("name", metavar="NAME")
@click.option("--category", default="", help="Product category")
@click.option("--price", default="0", help="Default unit price (e.g., 4.99)")
@click.option("--quantity", type=int, default=0, show_default=True, help="Initial stock")
@click.option(
    "--reorder-level",
    type=int,
    default=DEFAULT_REORDER_LEVEL,
    show_default=True,
    help="Stock level below which the product counts as low stock",
)
@click.pass_context
def add_product(ctx, name: str, category: str, price: str, quantity: int, reorder_level: int):
    """Add a product to the catalog.

    Examples:
        stockit product add "Widget" --category Hardware --price 4.99 --quantity 15
        stockit product add "Gadget" --reorder-level 5
    """
    db = ctx.obj["db"]
    service = ProductService(db)
    unit_price = _parse_price_or_exit(ctx, price)

    try:
        product = service.create_product(
            name=name,
            category=category,
            price=unit_price,
            reorder_level=reorder_level,
            quantity=quantity,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Created product '{product.name}' (ID: {product.id})")


@product_group.command("list")
@click.option("--search", help="Filter by name or category (case-insensitive)")
@click.pass_context
def list_products(ctx, search: str | None):
    """List products."""
    db = ctx.obj["db"]
    service = ProductService(db)

    try:
        products = service.list_products(search=search)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not products:
        click.echo("No products found.")
        return

    click.echo("\nProducts:")
    click.echo("-" * 100)
    for product in products:
        click.echo(format_product_row(product))


@product_group.command("update")
@click.argument("product", metavar="PRODUCT")
@click.option("--name", help="New name")
@click.option("--category", help="New category (use \"\" to clear)")
@click.option("--price", help="New default unit price")
@click.option("--reorder-level", type=int, help="New reorder level")
@click.option("--quantity", type=int, help="Overwrite stock (manual correction)")
@click.pass_context
def update_product(
    ctx,
    product: str,
    name: str | None,
    category: str | None,
    price: str | None,
    reorder_level: int | None,
    quantity: int | None,
) -> None:
    """Update a product.

    PRODUCT can be a product name or ID. Only the options given are changed.
    --quantity overwrites the stock level directly, bypassing the purchase
    and sale history.

    Examples:
        stockit product update Widget --price 5.49
        stockit product update 3 --quantity 40 --reorder-level 12
    """
    db = ctx.obj["db"]
    service = ProductService(db)
    product_id = resolve_product_or_exit(ctx, service, product)
    unit_price = _parse_price_or_exit(ctx, price) if price is not None else None

    try:
        updated = service.update_product(
            product_id,
            name=name,
            category=category,
            price=unit_price,
            reorder_level=reorder_level,
            quantity=quantity,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Updated product {updated.id}")
    click.echo(format_product_row(updated))


@product_group.command("adjust")
@click.argument("product", metavar="PRODUCT")
@click.option("--by", "delta", type=int, required=True, help="Units to add (negative to remove)")
@click.pass_context
def adjust_product(ctx, product: str, delta: int) -> None:
    """Adjust a product's stock by a relative amount.

    Examples:
        stockit product adjust Widget --by 5
        stockit product adjust Widget --by=-2
    """
    db = ctx.obj["db"]
    service = ProductService(db)
    product_id = resolve_product_or_exit(ctx, service, product)

    try:
        adjusted = service.adjust_quantity(product_id, delta)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Stock for '{adjusted.name}' is now {adjusted.quantity}")


@product_group.command("delete")
@click.argument("product", metavar="PRODUCT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_product(ctx, product: str, yes: bool) -> None:
    """Delete a product.

    PRODUCT can be a product name or ID. Purchase and sale history for the
    product is kept and listed under "Unknown product".

    Examples:
        stockit product delete Widget
        stockit product delete 3 --yes
    """
    db = ctx.obj["db"]
    service = ProductService(db)
    product_id = resolve_product_or_exit(ctx, service, product)
    try:
        product_obj = service.require_product(product_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete product '{product_obj.name}' (ID: {product_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_product(product_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    click.echo(f"Deleted product '{product_obj.name}'")


def register_commands(cli):
    """Register product commands with main CLI."""
    cli.add_command(product_group, name="product")
