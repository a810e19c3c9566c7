"""Shared pytest fixtures for stockit tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from stockit.database.factories import create_sqlite_database
from stockit.domain.ledger import LedgerService
from stockit.domain.product import ProductService
from stockit.domain.report import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def product_service(temp_db):
    """Create a ProductService with a temporary database."""
    return ProductService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def widget(product_service):
    """Create the sample 'Widget' product: 15 in stock, reorder level 10."""
    return product_service.create_product(
        name="Widget",
        category="Hardware",
        price=Decimal("5.00"),
        reorder_level=10,
        quantity=15,
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
