"""Shared pytest fixtures for sitebook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from sitebook.database.factories import create_sqlite_database
from sitebook.domain.site import SiteService
from sitebook.domain.expense import ExpenseService
from sitebook.domain.advance import AdvanceService
from sitebook.domain.funds import FundsService
from sitebook.domain.invoice import InvoiceService
from sitebook.domain.balance import BalanceService


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
def site_service(temp_db):
    """Create a SiteService with a temporary database."""
    return SiteService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def advance_service(temp_db):
    """Create an AdvanceService with a temporary database."""
    return AdvanceService(temp_db)


@pytest.fixture
def funds_service(temp_db):
    """Create a FundsService with a temporary database."""
    return FundsService(temp_db)


@pytest.fixture
def invoice_service(temp_db):
    """Create an InvoiceService with a temporary database."""
    return InvoiceService(temp_db)


@pytest.fixture
def balance_service(temp_db):
    """Create a BalanceService with a temporary database."""
    return BalanceService(temp_db)


@pytest.fixture
def sample_site(site_service):
    """Create a sample site for testing."""
    site_id = site_service.create_site(
        name="Tower B",
        start_date=date(2024, 4, 1),
        job_name="Foundation",
        pos_no="PO-114",
        location="Pune",
        total_funds=Decimal("500000"),
    )
    return site_service.get_site(site_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
