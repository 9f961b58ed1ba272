"""Confirmed and projected account balances."""

import logging
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from cashbook.domain.entities import (
    ZERO,
    Account,
    AccountBalanceSnapshot,
    BalanceReport,
    LedgerEntry,
)
from cashbook.utils.date_parser import as_date

logger = logging.getLogger(__name__)


def effective_settled_date(entry: LedgerEntry) -> date:
    """Date a settled entry moved cash.

    Settled entries without a settlement date fall back to their due date.
    """
    if entry.settled_date is None:
        logger.warning(
            "Entry %s is settled without a settled date; using due date %s",
            entry.id,
            entry.due_date,
        )
        return entry.due_date
    return entry.settled_date


def _account_movements(
    entries: Iterable[LedgerEntry], as_of: date
) -> tuple[dict[int, Decimal], dict[int, Decimal]]:
    """Sum settled (up to as_of) and pending signed amounts per account."""
    settled: dict[int, Decimal] = defaultdict(lambda: ZERO)
    pending: dict[int, Decimal] = defaultdict(lambda: ZERO)

    for entry in entries:
        if entry.account_id is None or entry.is_canceled:
            continue
        if entry.is_settled:
            if effective_settled_date(entry) <= as_of:
                settled[entry.account_id] += entry.signed_amount
        elif entry.is_pending:
            pending[entry.account_id] += entry.signed_amount

    return settled, pending


def aggregate_balances(
    entries: Sequence[LedgerEntry],
    accounts: Sequence[Account],
    as_of: date | datetime,
    account_ids: Optional[Iterable[int]] = None,
) -> BalanceReport:
    """Compute per-account and total balances.

    confirmed = opening balance + settled inflows - settled outflows, counting
    only settlements on or before ``as_of``. projected = confirmed + pending
    inflows - pending outflows, whatever their due date. Canceled entries are
    ignored.

    Args:
        entries: Ledger entries of the snapshot
        accounts: Known accounts
        as_of: Cut-off date (a datetime is truncated to its date)
        account_ids: Optional subset of accounts to include; entries of
            excluded accounts do not count at all

    Returns:
        BalanceReport with one snapshot per included account, in the order
        the accounts were given
    """
    as_of = as_date(as_of)
    selected = set(account_ids) if account_ids is not None else None
    included = [a for a in accounts if selected is None or a.id in selected]
    known_ids = {a.id for a in accounts}

    skipped = [
        e for e in entries if e.account_id is not None and e.account_id not in known_ids
    ]
    for entry in skipped:
        logger.warning(
            "Entry %s references unknown account %s; excluded from balances",
            entry.id,
            entry.account_id,
        )

    settled, pending = _account_movements(
        (e for e in entries if e.account_id in known_ids), as_of
    )

    snapshots = []
    for account in included:
        confirmed = account.opening_balance + settled[account.id]
        snapshots.append(
            AccountBalanceSnapshot(
                account_id=account.id,
                account_name=account.name,
                confirmed=confirmed,
                projected=confirmed + pending[account.id],
                as_of=as_of,
            )
        )

    logger.debug("Computed balances for %d account(s) as of %s", len(snapshots), as_of)
    return BalanceReport(
        accounts=tuple(snapshots),
        confirmed=sum((s.confirmed for s in snapshots), ZERO),
        projected=sum((s.projected for s in snapshots), ZERO),
        as_of=as_of,
        skipped_entries=len(skipped),
    )
