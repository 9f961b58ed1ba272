"""Ledger entry filtering."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from cashbook.domain.entities import EntryKind, EntryStatus, LedgerEntry


@dataclass(frozen=True)
class EntryFilter:
    """Criteria for selecting ledger entries.

    Every criterion left as None matches all entries. ``account_ids`` is a
    set of accounts; entries without an account never match it. Dates apply
    to the due date and are inclusive.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    kind: Optional[EntryKind] = None
    status: Optional[EntryStatus] = None
    account_ids: Optional[frozenset[int]] = None
    category_id: Optional[int] = None
    uncategorized: bool = False
    cost_center_id: Optional[int] = None
    counterparty_id: Optional[int] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None
    description: Optional[str] = None

    def matches(self, entry: LedgerEntry) -> bool:
        """Check whether an entry satisfies every criterion."""
        if self.start_date is not None and entry.due_date < self.start_date:
            return False
        if self.end_date is not None and entry.due_date > self.end_date:
            return False
        if self.kind is not None and entry.kind != self.kind:
            return False
        if self.status is not None and entry.status != self.status:
            return False
        if self.account_ids is not None and entry.account_id not in self.account_ids:
            return False
        if self.uncategorized:
            if entry.category_id is not None:
                return False
        elif self.category_id is not None and entry.category_id != self.category_id:
            return False
        if self.cost_center_id is not None and entry.cost_center_id != self.cost_center_id:
            return False
        if self.counterparty_id is not None and entry.counterparty_id != self.counterparty_id:
            return False
        if self.min_amount is not None and entry.amount < self.min_amount:
            return False
        if self.max_amount is not None and entry.amount > self.max_amount:
            return False
        if self.description:
            text = (entry.description or "").casefold()
            if self.description.casefold() not in text:
                return False
        return True


def apply_filter(
    entries: Iterable[LedgerEntry], entry_filter: Optional[EntryFilter]
) -> list[LedgerEntry]:
    """Return the entries matching a filter, preserving order."""
    if entry_filter is None:
        return list(entries)
    return [e for e in entries if entry_filter.matches(e)]


def restrict_to_accounts(
    entries: Iterable[LedgerEntry], account_ids: Optional[Iterable[int]]
) -> list[LedgerEntry]:
    """Keep entries posted to one of the given accounts.

    None means no restriction, so unassigned entries are kept too.
    """
    if account_ids is None:
        return list(entries)
    selected = set(account_ids)
    return [e for e in entries if e.account_id in selected]
