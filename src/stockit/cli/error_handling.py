"""CLI error handling helpers."""

import click

from stockit.domain.errors import DomainError, StorageError

# Exit codes keep the error kind visible to scripts: domain errors are the
# caller's to fix, storage errors may succeed on retry.
DOMAIN_ERROR_EXIT_CODE = 1
STORAGE_ERROR_EXIT_CODE = 3


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(DOMAIN_ERROR_EXIT_CODE)


def handle_storage_error(ctx: click.Context, error: StorageError) -> None:
    """Render a storage failure and exit with the storage exit code."""
    click.echo(f"Storage error: {error}", err=True)
    ctx.exit(STORAGE_ERROR_EXIT_CODE)
