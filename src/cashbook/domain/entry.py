"""Ledger entry domain service."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from cashbook.domain.entities import EntryKind, EntryStatus, LedgerEntry
from cashbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    category_kind_mismatch,
    category_not_found,
    cost_center_not_found,
    counterparty_not_found,
    entry_not_found,
)
from cashbook.domain.filters import EntryFilter

if TYPE_CHECKING:
    from cashbook.database.base import Database


class EntryService:
    """Service for recording ledger entries and moving them through their lifecycle."""

    def __init__(self, db: Database):
        """Initialize entry service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_entry(
        self,
        kind: EntryKind,
        amount: Decimal,
        due_date: date,
        account_id: Optional[int] = None,
        category_id: Optional[int] = None,
        cost_center_id: Optional[int] = None,
        counterparty_id: Optional[int] = None,
        description: Optional[str] = None,
        document_number: Optional[str] = None,
        notes: Optional[str] = None,
        installment_number: Optional[int] = None,
        installment_count: Optional[int] = None,
        recurring: bool = False,
        settled_date: Optional[date] = None,
    ) -> int:
        """Create a ledger entry.

        The entry is created pending, or settled when ``settled_date`` is given.

        Args:
            kind: INFLOW or OUTFLOW
            amount: Non-negative amount; the sign comes from ``kind``
            due_date: Date the entry is due or expected
            account_id: Optional account the entry posts against
            category_id: Optional category of the same kind as the entry
            cost_center_id: Optional cost center
            counterparty_id: Optional supplier or customer
            description: Optional description
            document_number: Optional document number
            notes: Optional notes
            installment_number: Optional installment number (1-based)
            installment_count: Optional total number of installments
            recurring: Whether the entry recurs
            settled_date: If given, the entry is recorded as already settled

        Returns:
            Entry ID

        Raises:
            ValidationError: If amount or installment fields are invalid, or the
                category kind does not match the entry kind
            NotFoundError: If a referenced entity doesn't exist
        """
        if amount < 0:
            raise ValidationError(f"Amount must not be negative, got {amount}")
        self._validate_installment(installment_number, installment_count)

        if account_id is not None and self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        if category_id is not None:
            category = self.db.get_category(category_id)
            if category is None:
                raise NotFoundError(category_not_found(category_id))
            if category.kind != kind:
                raise ValidationError(
                    category_kind_mismatch(category.name, category.kind.value, kind.value)
                )

        if cost_center_id is not None and self.db.get_cost_center(cost_center_id) is None:
            raise NotFoundError(cost_center_not_found(cost_center_id))

        if counterparty_id is not None and self.db.get_counterparty(counterparty_id) is None:
            raise NotFoundError(counterparty_not_found(counterparty_id))

        status = EntryStatus.SETTLED if settled_date is not None else EntryStatus.PENDING
        return self.db.create_entry(
            kind=kind,
            amount=amount,
            due_date=due_date,
            status=status,
            settled_date=settled_date,
            account_id=account_id,
            category_id=category_id,
            cost_center_id=cost_center_id,
            counterparty_id=counterparty_id,
            description=description,
            document_number=document_number,
            notes=notes,
            installment_number=installment_number,
            installment_count=installment_count,
            recurring=recurring,
        )

    @staticmethod
    def _validate_installment(number: Optional[int], count: Optional[int]) -> None:
        if number is None and count is None:
            return
        if number is None or count is None:
            raise ValidationError("Installment number and count must be given together")
        if count < 1 or not 1 <= number <= count:
            raise ValidationError(f"Invalid installment {number}/{count}")

    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get entry by ID.

        Returns:
            LedgerEntry or None if not found
        """
        return self.db.get_entry(entry_id)

    def _require_entry(self, entry_id: int) -> LedgerEntry:
        entry = self.db.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def mark_settled(self, entry_id: int, settled_date: Optional[date] = None) -> None:
        """Mark an entry as paid or received.

        Args:
            entry_id: Entry ID
            settled_date: Settlement date (defaults to today)

        Raises:
            NotFoundError: If entry doesn't exist
            ValidationError: If the entry is canceled
        """
        entry = self._require_entry(entry_id)
        if entry.is_canceled:
            raise ValidationError(f"Entry {entry_id} is canceled and cannot be settled")
        self.db.update_entry_status(
            entry_id, EntryStatus.SETTLED, settled_date or date.today()
        )

    def reopen(self, entry_id: int) -> None:
        """Return a settled or canceled entry to pending."""
        self._require_entry(entry_id)
        self.db.update_entry_status(entry_id, EntryStatus.PENDING, None)

    def cancel(self, entry_id: int) -> None:
        """Cancel an entry; canceled entries drop out of every report.

        Raises:
            NotFoundError: If entry doesn't exist
        """
        self._require_entry(entry_id)
        self.db.update_entry_status(entry_id, EntryStatus.CANCELED, None)

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If entry doesn't exist
        """
        self._require_entry(entry_id)
        self.db.delete_entry(entry_id)

    def list_entries(self, entry_filter: Optional[EntryFilter] = None) -> list[LedgerEntry]:
        """List entries matching a filter, ordered by due date."""
        return self.db.list_entries(entry_filter)
