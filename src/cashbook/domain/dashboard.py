"""Dashboard reporting service.

Reads one consistent snapshot from the store and runs the pure report
functions over it, so every view of a rendering pass sees the same entries.
"""

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from cashbook.config import EngineConfig
from cashbook.database.base import Database
from cashbook.domain.aging import analyze_aging
from cashbook.domain.balance import aggregate_balances
from cashbook.domain.cash_flow import build_series
from cashbook.domain.consistency import check_consistency
from cashbook.domain.credit_card import card_exposures
from cashbook.domain.entities import (
    AccountType,
    AgingReport,
    BalanceReport,
    CashFlowSeries,
    ConsistencyReport,
    CreditCardExposure,
    EntryKind,
    IncomeStatement,
    LedgerSnapshot,
    StatementLine,
    StatementSummary,
)
from cashbook.domain.filters import EntryFilter, apply_filter
from cashbook.domain.income_statement import compose_income_statement
from cashbook.domain.statement import build_statement
from cashbook.utils.date_parser import as_date, month_bounds

logger = logging.getLogger(__name__)


class DashboardService:
    """Service computing the dashboard reports from a ledger snapshot."""

    def __init__(self, db: Database, config: Optional[EngineConfig] = None):
        """Initialize dashboard service.

        Args:
            db: Database instance
            config: Engine configuration (defaults when None)
        """
        self.db = db
        self.config = config or EngineConfig()

    def snapshot(self) -> LedgerSnapshot:
        """Read entries, accounts and categories in one pass."""
        snapshot = LedgerSnapshot(
            entries=tuple(self.db.list_entries()),
            accounts=tuple(self.db.list_accounts()),
            categories=tuple(self.db.list_categories()),
        )
        logger.debug(
            "Loaded snapshot: %d entries, %d accounts, %d categories",
            len(snapshot.entries),
            len(snapshot.accounts),
            len(snapshot.categories),
        )
        return snapshot

    @staticmethod
    def _cash_account_ids(snapshot: LedgerSnapshot) -> list[int]:
        return [
            a.id for a in snapshot.accounts if a.active and a.type == AccountType.ORDINARY
        ]

    def balances(
        self,
        as_of: date | datetime,
        account_ids: Optional[Iterable[int]] = None,
        snapshot: Optional[LedgerSnapshot] = None,
    ) -> BalanceReport:
        """Confirmed and projected balances; defaults to active ordinary accounts."""
        snapshot = snapshot or self.snapshot()
        if account_ids is None:
            account_ids = self._cash_account_ids(snapshot)
        return aggregate_balances(snapshot.entries, snapshot.accounts, as_of, account_ids)

    def cash_flow(
        self,
        now: date | datetime,
        range_start: Optional[date] = None,
        range_end: Optional[date] = None,
        account_ids: Optional[Iterable[int]] = None,
        snapshot: Optional[LedgerSnapshot] = None,
    ) -> CashFlowSeries:
        """Cash-flow series; defaults to the month of ``now`` and active ordinary accounts."""
        snapshot = snapshot or self.snapshot()
        month_start, month_end = month_bounds(as_date(now))
        if account_ids is None:
            account_ids = self._cash_account_ids(snapshot)
        return build_series(
            snapshot.entries,
            range_start or month_start,
            range_end or month_end,
            account_ids,
        )

    def aging(
        self,
        kind: EntryKind,
        now: date | datetime,
        snapshot: Optional[LedgerSnapshot] = None,
    ) -> AgingReport:
        """Overdue and upcoming receivables (INFLOW) or payables (OUTFLOW)."""
        snapshot = snapshot or self.snapshot()
        return analyze_aging(snapshot.entries, kind, now, self.config.due_soon_days)

    def card_exposures(
        self, now: date | datetime, snapshot: Optional[LedgerSnapshot] = None
    ) -> list[CreditCardExposure]:
        """Exposure of every active card account."""
        snapshot = snapshot or self.snapshot()
        return card_exposures(
            snapshot.accounts, snapshot.entries, now, self.config.card_due_day
        )

    def income_statement(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
        entry_filter: Optional[EntryFilter] = None,
        snapshot: Optional[LedgerSnapshot] = None,
    ) -> IncomeStatement:
        """Income statement over a due-date period, optionally pre-filtered."""
        snapshot = snapshot or self.snapshot()
        entries = apply_filter(snapshot.entries, entry_filter)
        return compose_income_statement(
            entries,
            snapshot.categories,
            period_start,
            period_end,
            self.config.keywords,
        )

    def statement(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        entry_filter: Optional[EntryFilter] = None,
        snapshot: Optional[LedgerSnapshot] = None,
    ) -> tuple[list[StatementLine], StatementSummary]:
        """Statement lines with running balance, most recent first."""
        snapshot = snapshot or self.snapshot()
        entries = apply_filter(snapshot.entries, entry_filter)
        return build_statement(entries, start, end)

    def consistency(self, snapshot: Optional[LedgerSnapshot] = None) -> ConsistencyReport:
        """Referential and status issues in the ledger."""
        snapshot = snapshot or self.snapshot()
        return check_consistency(snapshot.entries, snapshot.accounts, snapshot.categories)
