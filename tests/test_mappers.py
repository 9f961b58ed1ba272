"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from cashbook.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Entry as ORMEntry,
)
from cashbook.database.mappers import account_to_domain, category_to_domain, entry_to_domain
from cashbook.domain.entities import AccountType, EntryKind, EntryStatus, LedgerEntry


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_card_account_to_domain(self):
        orm_account = ORMAccount(
            id=1,
            name="Visa",
            account_type="cartao_credito",
            opening_balance=Decimal("-120.50"),
            credit_limit=Decimal("3000.00"),
            active=True,
            created_at=datetime.now(UTC),
        )

        account = account_to_domain(orm_account)

        assert account.type == AccountType.CARD
        assert account.is_card
        assert account.opening_balance == Decimal("-120.50")
        assert account.credit_limit == Decimal("3000.00")
        assert account.created_at == orm_account.created_at

    def test_missing_opening_balance_is_zero(self):
        orm_account = ORMAccount(id=2, name="Cash", account_type="ordinary", active=False)

        account = account_to_domain(orm_account)

        assert account.opening_balance == Decimal("0")
        assert account.credit_limit is None
        assert account.active is False


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_kind_accepts_store_values(self):
        category = category_to_domain(ORMCategory(id=3, name="Vendas", kind="entrada"))
        assert category.kind == EntryKind.INFLOW


class TestEntryMapper:
    """Tests for Entry mapper."""

    def test_entry_to_domain(self):
        orm_entry = ORMEntry(
            id=10,
            kind="saida",
            amount=Decimal("99.90"),
            due_date=date(2024, 5, 10),
            settled_date=date(2024, 5, 9),
            status="pago",
            account_id=1,
            installment_number=2,
            installment_count=3,
            recurring=None,
        )

        entry = entry_to_domain(orm_entry)

        assert isinstance(entry, LedgerEntry)
        assert entry.kind == EntryKind.OUTFLOW
        assert entry.status == EntryStatus.SETTLED
        assert entry.signed_amount == Decimal("-99.90")
        assert entry.installment_label == "2/3"
        assert entry.recurring is False

    def test_legacy_overdue_status_is_pending(self):
        orm_entry = ORMEntry(
            id=11, kind="entrada", amount=1, due_date=date(2024, 1, 1), status="atrasado"
        )
        entry = entry_to_domain(orm_entry)
        assert entry.status == EntryStatus.PENDING
        assert entry.amount == Decimal("1")
