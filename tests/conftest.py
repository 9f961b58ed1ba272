"""Shared pytest fixtures for cashbook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from cashbook.database.factories import create_sqlite_database
from cashbook.domain.account import AccountService
from cashbook.domain.category import CategoryService, ReferenceDataService
from cashbook.domain.entities import (
    Account,
    AccountType,
    Category,
    EntryKind,
    EntryStatus,
    LedgerEntry,
)
from cashbook.domain.entry import EntryService
from cashbook.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo CLI logging setup so caplog sees engine records."""
    yield
    reset_logging()


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
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def reference_service(temp_db):
    """Create a ReferenceDataService with a temporary database."""
    return ReferenceDataService(temp_db)


@pytest.fixture
def entry_service(temp_db):
    """Create an EntryService with a temporary database."""
    return EntryService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create an ordinary account with an opening balance of 1000."""
    account_id = account_service.create_account(
        name="Operating", opening_balance=Decimal("1000"), bank_name="Test Bank"
    )
    return account_service.get_account(account_id)


@pytest.fixture
def sample_card(account_service):
    """Create a card account with a limit of 5000."""
    account_id = account_service.create_account(
        name="Corporate Card", account_type=AccountType.CARD, credit_limit=Decimal("5000")
    )
    return account_service.get_account(account_id)


@pytest.fixture
def sample_categories(category_service):
    """Create one inflow and three outflow categories, keyed by name."""
    names = [
        ("Sales", EntryKind.INFLOW),
        ("Imposto ISS", EntryKind.OUTFLOW),
        ("Matéria-prima", EntryKind.OUTFLOW),
        ("Aluguel", EntryKind.OUTFLOW),
    ]
    return {
        name: category_service.create_category(name=name, kind=kind) for name, kind in names
    }


@pytest.fixture
def make_entry():
    """Build in-memory ledger entries with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(
        kind=EntryKind.INFLOW,
        amount="100",
        due_date=date(2024, 5, 10),
        status=EntryStatus.PENDING,
        **kwargs,
    ):
        if status == EntryStatus.SETTLED and "settled_date" not in kwargs:
            kwargs["settled_date"] = due_date
        return LedgerEntry(
            id=kwargs.pop("id", next(counter)),
            kind=kind,
            amount=Decimal(amount),
            due_date=due_date,
            status=status,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_account():
    """Build in-memory accounts."""

    def _make(id=1, name=None, type=AccountType.ORDINARY, opening_balance="0", credit_limit=None, active=True):
        return Account(
            id=id,
            name=name or f"Account {id}",
            type=type,
            opening_balance=Decimal(opening_balance),
            opening_date=None,
            credit_limit=Decimal(credit_limit) if credit_limit is not None else None,
            active=active,
        )

    return _make


@pytest.fixture
def make_category():
    """Build in-memory categories."""

    def _make(id, name, kind=EntryKind.OUTFLOW):
        return Category(id=id, name=name, kind=kind)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def run_cli(cli_runner, temp_db, tmp_path):
    """Invoke the CLI against the temporary database on a fixed date."""
    from cashbook.cli.main import cli

    empty_config = tmp_path / "config.toml"
    empty_config.write_text("")

    def _run(*args, today="2024-05-15", config=None):
        base = [
            "--db-path",
            temp_db.database_path,
            "--config",
            str(config or empty_config),
            "--today",
            today,
        ]
        return cli_runner.invoke(cli, base + list(args))

    return _run
