"""Aging of pending receivables and payables."""

from datetime import date, datetime
from typing import Sequence

from cashbook.domain.entities import ZERO, AgingEntry, AgingReport, EntryKind, LedgerEntry
from cashbook.utils.date_parser import as_date

DEFAULT_DUE_SOON_DAYS = 7


def days_overdue(entry: LedgerEntry, today: date) -> int:
    """Whole days between the due date and today; negative if not yet due."""
    return (today - entry.due_date).days


def analyze_aging(
    entries: Sequence[LedgerEntry],
    kind: EntryKind,
    now: date | datetime,
    due_soon_days: int = DEFAULT_DUE_SOON_DAYS,
) -> AgingReport:
    """Split pending entries of one kind into overdue and upcoming.

    Entries due today are listed with the overdue ones (``days_overdue`` of
    0) but only strictly overdue entries count towards ``total_overdue``.

    Args:
        entries: Ledger entries of the snapshot
        kind: INFLOW for receivables, OUTFLOW for payables
        now: Reference instant; time of day is ignored
        due_soon_days: Window in which upcoming entries are flagged as due soon

    Returns:
        AgingReport with both buckets sorted by due date, earliest first
    """
    today = as_date(now)
    pending = sorted(
        (e for e in entries if e.is_pending and e.kind == kind),
        key=lambda e: (e.due_date, e.id),
    )

    overdue = []
    upcoming = []
    for entry in pending:
        aged = AgingEntry(
            entry=entry,
            days_overdue=days_overdue(entry, today),
            due_soon_days=due_soon_days,
        )
        if aged.days_overdue >= 0:
            overdue.append(aged)
        else:
            upcoming.append(aged)

    return AgingReport(
        kind=kind,
        as_of=today,
        overdue=tuple(overdue),
        upcoming=tuple(upcoming),
        total_overdue=sum((a.entry.amount for a in overdue if a.is_overdue), ZERO),
        total_due_today=sum((a.entry.amount for a in overdue if a.is_due_today), ZERO),
        total_upcoming=sum((a.entry.amount for a in upcoming), ZERO),
        total_all=sum((e.amount for e in pending), ZERO),
    )
