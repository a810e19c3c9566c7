"""Main CLI entry point."""

import logging

import click
from stockit.database.factories import create_sqlite_database

# Import and register all commands at module level
from stockit.cli.commands import product, purchase, sale, report


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides STOCKIT_DB_PATH environment variable)",
    envvar="STOCKIT_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="STOCKIT_LOG_LEVEL",
    help="Logging verbosity (also STOCKIT_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Stockit - Inventory management.

    Track products, record purchases and sales, and keep an eye on revenue,
    cost, profit and low-stock items.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
product.register_commands(cli)
purchase.register_commands(cli)
sale.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
