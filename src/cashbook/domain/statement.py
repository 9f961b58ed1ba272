"""Account statement with running balance."""

from datetime import date
from typing import Optional, Sequence

from cashbook.domain.entities import ZERO, LedgerEntry, StatementLine, StatementSummary


def summarize(entries: Sequence[LedgerEntry]) -> StatementSummary:
    """Settled inflow and outflow totals plus the number of pending entries."""
    inflows = sum((e.amount for e in entries if e.is_settled and e.is_inflow), ZERO)
    outflows = sum((e.amount for e in entries if e.is_settled and e.is_outflow), ZERO)
    return StatementSummary(
        inflows=inflows,
        outflows=outflows,
        net=inflows - outflows,
        pending_count=sum(1 for e in entries if e.is_pending),
    )


def build_statement(
    entries: Sequence[LedgerEntry],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> tuple[list[StatementLine], StatementSummary]:
    """Build statement lines for the entries due within a date range.

    The running balance starts at zero and only moves on settled entries;
    pending and canceled entries are listed with the balance unchanged.

    Returns:
        Tuple of (lines, summary); lines are most recent first
    """
    selected = [
        e
        for e in entries
        if (start is None or e.due_date >= start) and (end is None or e.due_date <= end)
    ]
    selected.sort(key=lambda e: (e.due_date, e.id))

    lines = []
    running = ZERO
    for entry in selected:
        if entry.is_settled:
            running += entry.signed_amount
        lines.append(StatementLine(entry=entry, running_balance=running))

    lines.reverse()
    return lines, summarize(selected)
