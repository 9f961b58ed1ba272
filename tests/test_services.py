"""Tests for account, category and entry services."""

from datetime import date
from decimal import Decimal

import pytest

from cashbook.domain.entities import AccountType, EntryKind, EntryStatus
from cashbook.domain.errors import (
    ConflictError,
    DependencyError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from cashbook.domain.filters import EntryFilter


class TestAccountService:
    def test_create_and_get(self, account_service):
        account_id = account_service.create_account(
            "Visa", account_type=AccountType.CARD, credit_limit=Decimal("1000")
        )
        account = account_service.get_account(account_id)
        assert account.name == "Visa"
        assert account.is_card

    def test_duplicate_name(self, account_service, sample_account):
        with pytest.raises(ConflictError, match="already exists"):
            account_service.create_account("Operating")

    def test_limit_only_on_cards(self, account_service):
        with pytest.raises(ValidationError):
            account_service.create_account("Ops", credit_limit=Decimal("10"))
        with pytest.raises(ValidationError):
            account_service.create_account(
                "Card", account_type=AccountType.CARD, credit_limit=Decimal("-1")
            )

    def test_deactivate_blocked_by_pending_entries(
        self, account_service, entry_service, sample_account
    ):
        entry_id = entry_service.create_entry(
            EntryKind.INFLOW, Decimal("10"), date(2024, 5, 1), account_id=sample_account.id
        )

        with pytest.raises(DependencyError):
            account_service.deactivate_account(sample_account.id)

        entry_service.mark_settled(entry_id, date(2024, 5, 1))
        account_service.deactivate_account(sample_account.id)
        assert account_service.list_accounts(active_only=True) == []

        account_service.activate_account(sample_account.id)
        assert account_service.get_account(sample_account.id).active

    def test_deactivate_missing(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.deactivate_account(404)

    def test_errors_are_value_errors(self):
        assert issubclass(DomainError, ValueError)


class TestCategoryService:
    def test_same_name_allowed_for_each_kind(self, category_service):
        category_service.create_category("Juros", EntryKind.INFLOW)
        category_service.create_category("Juros", EntryKind.OUTFLOW)

        with pytest.raises(ConflictError):
            category_service.create_category("Juros", EntryKind.OUTFLOW)

    def test_empty_name(self, category_service):
        with pytest.raises(ValidationError):
            category_service.create_category("  ", EntryKind.INFLOW)

    def test_list_by_kind(self, category_service, sample_categories):
        names = [c.name for c in category_service.list_categories(EntryKind.OUTFLOW)]
        assert sorted(names) == sorted(["Imposto ISS", "Matéria-prima", "Aluguel"])


class TestReferenceDataService:
    def test_cost_centers_and_counterparties(self, reference_service):
        reference_service.create_cost_center("Loja", "Store front")
        reference_service.create_counterparty("ACME Ltda", "12.345.678/0001-90")

        assert [cc.name for cc in reference_service.list_cost_centers()] == ["Loja"]
        assert reference_service.list_counterparties()[0].document == "12.345.678/0001-90"

        with pytest.raises(ConflictError):
            reference_service.create_cost_center("Loja")
        with pytest.raises(ConflictError):
            reference_service.create_counterparty("ACME Ltda")


class TestEntryService:
    def test_create_pending_and_settled(self, entry_service, sample_account, sample_categories):
        pending_id = entry_service.create_entry(
            EntryKind.INFLOW,
            Decimal("100"),
            date(2024, 5, 10),
            account_id=sample_account.id,
            category_id=sample_categories["Sales"],
        )
        settled_id = entry_service.create_entry(
            EntryKind.OUTFLOW,
            Decimal("30"),
            date(2024, 5, 10),
            settled_date=date(2024, 5, 9),
        )

        assert entry_service.get_entry(pending_id).status == EntryStatus.PENDING
        settled = entry_service.get_entry(settled_id)
        assert settled.status == EntryStatus.SETTLED
        assert settled.settled_date == date(2024, 5, 9)

    def test_rejects_invalid_input(self, entry_service, sample_categories):
        with pytest.raises(ValidationError):
            entry_service.create_entry(EntryKind.INFLOW, Decimal("-1"), date(2024, 1, 1))
        with pytest.raises(ValidationError):
            entry_service.create_entry(
                EntryKind.INFLOW, Decimal("1"), date(2024, 1, 1), installment_number=3, installment_count=2
            )
        with pytest.raises(ValidationError):
            entry_service.create_entry(
                EntryKind.INFLOW, Decimal("1"), date(2024, 1, 1), installment_number=1
            )
        with pytest.raises(ValidationError, match="inflow"):
            entry_service.create_entry(
                EntryKind.INFLOW,
                Decimal("1"),
                date(2024, 1, 1),
                category_id=sample_categories["Aluguel"],
            )

    def test_rejects_missing_references(self, entry_service):
        for field in ("account_id", "category_id", "cost_center_id", "counterparty_id"):
            with pytest.raises(NotFoundError):
                entry_service.create_entry(
                    EntryKind.INFLOW, Decimal("1"), date(2024, 1, 1), **{field: 99}
                )

    def test_lifecycle(self, entry_service):
        entry_id = entry_service.create_entry(EntryKind.OUTFLOW, Decimal("5"), date(2024, 1, 1))

        entry_service.mark_settled(entry_id, date(2024, 1, 2))
        assert entry_service.get_entry(entry_id).settled_date == date(2024, 1, 2)

        entry_service.reopen(entry_id)
        reopened = entry_service.get_entry(entry_id)
        assert reopened.status == EntryStatus.PENDING
        assert reopened.settled_date is None

        entry_service.cancel(entry_id)
        assert entry_service.get_entry(entry_id).is_canceled
        with pytest.raises(ValidationError):
            entry_service.mark_settled(entry_id)

        entry_service.delete_entry(entry_id)
        assert entry_service.get_entry(entry_id) is None
        with pytest.raises(NotFoundError):
            entry_service.cancel(entry_id)

    def test_mark_settled_defaults_to_today(self, entry_service):
        entry_id = entry_service.create_entry(EntryKind.INFLOW, Decimal("5"), date(2024, 1, 1))
        entry_service.mark_settled(entry_id)
        assert entry_service.get_entry(entry_id).settled_date == date.today()

    def test_list_entries(self, entry_service):
        entry_service.create_entry(EntryKind.INFLOW, Decimal("5"), date(2024, 1, 1))
        entry_service.create_entry(EntryKind.OUTFLOW, Decimal("6"), date(2024, 1, 2))

        outflows = entry_service.list_entries(EntryFilter(kind=EntryKind.OUTFLOW))

        assert [e.amount for e in outflows] == [Decimal("6")]
