"""Credit-card invoice exposure.

Invoice cycles are calendar months around the reference date rather than
statement-closing windows.
"""

import calendar
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from cashbook.domain.entities import ZERO, Account, CreditCardExposure, LedgerEntry
from cashbook.domain.errors import ValidationError
from cashbook.utils.date_parser import as_date, month_bounds

logger = logging.getLogger(__name__)

DEFAULT_DUE_DAY = 10


def _cycle_total(entries: Sequence[LedgerEntry], bounds: tuple[date, date]) -> Decimal:
    start, end = bounds
    return sum((e.amount for e in entries if start <= e.due_date <= end), ZERO)


def next_due_date(today: date, due_day: int = DEFAULT_DUE_DAY) -> date:
    """Invoice due date in the month after ``today``, clamped to month length."""
    start, _ = month_bounds(today, 1)
    last_day = calendar.monthrange(start.year, start.month)[1]
    return start.replace(day=min(due_day, last_day))


def card_exposure(
    account: Account,
    entries: Sequence[LedgerEntry],
    now: date | datetime,
    due_day: int = DEFAULT_DUE_DAY,
) -> CreditCardExposure:
    """Compute invoice-cycle totals and available limit of a card account.

    Cycle totals count outflows of the card due within the cycle whatever
    their status, except canceled ones. ``available_limit_after_payment``
    adds the current cycle back on top of the limit net of scheduled
    charges.

    Args:
        account: Card account
        entries: Ledger entries of the snapshot
        now: Reference date selecting the current cycle
        due_day: Day of month the next invoice is due

    Returns:
        CreditCardExposure; limits may be negative when over the limit

    Raises:
        ValidationError: If the account is not a card account
    """
    if not account.is_card:
        raise ValidationError(f"Account {account.id} ('{account.name}') is not a card account")

    today = as_date(now)
    charges = [
        e
        for e in entries
        if e.account_id == account.id and e.is_outflow and not e.is_canceled
    ]

    current = _cycle_total(charges, month_bounds(today))
    following = _cycle_total(charges, month_bounds(today, 1))
    previous = _cycle_total(charges, month_bounds(today, -1))
    scheduled = sum((e.amount for e in charges if e.is_pending), ZERO)

    if account.credit_limit is None:
        logger.warning("Card account %s has no credit limit; using 0", account.id)
    limit = account.credit_limit if account.credit_limit is not None else ZERO

    return CreditCardExposure(
        account_id=account.id,
        account_name=account.name,
        credit_limit=limit,
        current_cycle_total=current,
        next_cycle_total=following,
        previous_cycle_total=previous,
        scheduled_pending=scheduled,
        available_limit=limit - current - scheduled,
        available_limit_after_payment=limit - scheduled + current,
        next_due_date=next_due_date(today, due_day),
    )


def card_exposures(
    accounts: Sequence[Account],
    entries: Sequence[LedgerEntry],
    now: date | datetime,
    due_day: int = DEFAULT_DUE_DAY,
) -> list[CreditCardExposure]:
    """Exposure of every active card account, in the given account order."""
    return [
        card_exposure(account, entries, now, due_day)
        for account in accounts
        if account.is_card and account.active
    ]
