"""CLI helpers for product resolution and error handling."""

from __future__ import annotations

import click
from stockit.cli.error_handling import handle_domain_error, handle_storage_error
from stockit.domain.errors import DomainError, StorageError
from stockit.domain.product import ProductService
from stockit.utils.product_resolver import resolve_product


def resolve_product_or_exit(
    ctx: click.Context, product_service: ProductService, product: str | int
) -> int:
    """Resolve product name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_product(product_service, product)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
    except StorageError as exc:
        handle_storage_error(ctx, exc)
