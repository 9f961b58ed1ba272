"""Tests for Database interface returning domain models."""

import subprocess
import sys
from datetime import date, datetime
from decimal import Decimal

import pytest

from cashbook.domain import entities
from cashbook.domain.entities import AccountType, EntryKind, EntryStatus
from cashbook.domain.errors import NotFoundError
from cashbook.domain.filters import EntryFilter


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_account_round_trip(self, temp_db):
        account_id = temp_db.create_account(
            name="Visa",
            account_type=AccountType.CARD,
            opening_balance=Decimal("-10.25"),
            opening_date=date(2024, 1, 1),
            credit_limit=Decimal("2500"),
        )

        account = temp_db.get_account(account_id)

        assert isinstance(account, entities.Account)
        assert account.type == AccountType.CARD
        assert account.opening_balance == Decimal("-10.25")
        assert account.opening_date == date(2024, 1, 1)
        assert account.credit_limit == Decimal("2500")
        assert account.active is True
        assert isinstance(account.created_at, datetime)

    def test_list_accounts_filters(self, temp_db):
        temp_db.create_account(name="B", account_type=AccountType.ORDINARY)
        card_id = temp_db.create_account(name="A", account_type=AccountType.CARD)
        temp_db.set_account_active(card_id, False)

        assert [a.name for a in temp_db.list_accounts()] == ["A", "B"]
        assert [a.name for a in temp_db.list_accounts(active_only=True)] == ["B"]
        assert [a.name for a in temp_db.list_accounts(account_type=AccountType.CARD)] == ["A"]

    def test_get_missing_returns_none(self, temp_db):
        assert temp_db.get_account(999) is None
        assert temp_db.get_category(999) is None
        assert temp_db.get_entry(999) is None

    def test_categories_by_name_and_kind(self, temp_db):
        temp_db.create_category("Juros", EntryKind.INFLOW)
        outflow_id = temp_db.create_category("Juros", EntryKind.OUTFLOW)

        found = temp_db.get_category_by_name("Juros", EntryKind.OUTFLOW)

        assert found.id == outflow_id
        assert len(temp_db.list_categories()) == 2
        assert len(temp_db.list_categories(EntryKind.INFLOW)) == 1

    def test_entry_lifecycle(self, temp_db):
        entry_id = temp_db.create_entry(
            kind=EntryKind.OUTFLOW,
            amount=Decimal("42.10"),
            due_date=date(2024, 5, 10),
            description="Internet",
            installment_number=1,
            installment_count=12,
            recurring=True,
        )

        entry = temp_db.get_entry(entry_id)
        assert entry.status == EntryStatus.PENDING
        assert entry.amount == Decimal("42.10")
        assert entry.recurring is True

        temp_db.update_entry_status(entry_id, EntryStatus.SETTLED, date(2024, 5, 11))
        entry = temp_db.get_entry(entry_id)
        assert entry.status == EntryStatus.SETTLED
        assert entry.settled_date == date(2024, 5, 11)

        temp_db.delete_entry(entry_id)
        assert temp_db.get_entry(entry_id) is None

        with pytest.raises(NotFoundError):
            temp_db.delete_entry(entry_id)
        with pytest.raises(NotFoundError):
            temp_db.update_entry_status(entry_id, EntryStatus.CANCELED)

    def test_list_entries_applies_filter(self, temp_db):
        account_id = temp_db.create_account(name="Ops", account_type=AccountType.ORDINARY)
        temp_db.create_entry(EntryKind.INFLOW, Decimal("10"), date(2024, 5, 2), account_id=account_id, description="Venda balcão")
        temp_db.create_entry(EntryKind.INFLOW, Decimal("20"), date(2024, 5, 1), description="Venda online")
        temp_db.create_entry(EntryKind.OUTFLOW, Decimal("30"), date(2024, 6, 1), status=EntryStatus.SETTLED, settled_date=date(2024, 6, 1))

        all_entries = temp_db.list_entries()
        assert [e.due_date for e in all_entries] == [
            date(2024, 5, 1),
            date(2024, 5, 2),
            date(2024, 6, 1),
        ]

        may = temp_db.list_entries(EntryFilter(end_date=date(2024, 5, 31)))
        assert len(may) == 2

        by_account = temp_db.list_entries(EntryFilter(account_ids=frozenset({account_id})))
        assert [e.amount for e in by_account] == [Decimal("10")]

        by_text = temp_db.list_entries(EntryFilter(description="BALCÃO"))
        assert [e.amount for e in by_text] == [Decimal("10")]

        settled = temp_db.list_entries(EntryFilter(status=EntryStatus.SETTLED, min_amount=Decimal("25")))
        assert [e.amount for e in settled] == [Decimal("30")]

    def test_count_pending_entries(self, temp_db):
        account_id = temp_db.create_account(name="Ops", account_type=AccountType.ORDINARY)
        temp_db.create_entry(EntryKind.INFLOW, Decimal("1"), date(2024, 1, 1), account_id=account_id)
        temp_db.create_entry(
            EntryKind.INFLOW,
            Decimal("1"),
            date(2024, 1, 1),
            status=EntryStatus.SETTLED,
            settled_date=date(2024, 1, 1),
            account_id=account_id,
        )

        assert temp_db.count_pending_entries(account_id) == 1


@pytest.mark.parametrize(
    "first_import", ["cashbook.database.base", "cashbook.database", "cashbook.domain"]
)
def test_packages_import_in_any_order(first_import):
    code = f"import {first_import}; from cashbook.domain import AccountService, EntryService"
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
