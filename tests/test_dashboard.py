"""Tests for the dashboard reporting service."""

from datetime import date
from decimal import Decimal

import pytest

from cashbook.config import EngineConfig
from cashbook.domain.dashboard import DashboardService
from cashbook.domain.entities import EntryKind
from cashbook.domain.filters import EntryFilter

TODAY = date(2024, 5, 15)


@pytest.fixture
def ledger(entry_service, sample_account, sample_card, sample_categories):
    """Populate a small ledger for May 2024."""
    create = entry_service.create_entry
    create(
        EntryKind.INFLOW,
        Decimal("2000"),
        date(2024, 5, 5),
        account_id=sample_account.id,
        category_id=sample_categories["Sales"],
        settled_date=date(2024, 5, 5),
    )
    create(
        EntryKind.OUTFLOW,
        Decimal("300"),
        date(2024, 5, 8),
        account_id=sample_account.id,
        category_id=sample_categories["Imposto ISS"],
        settled_date=date(2024, 5, 8),
    )
    create(
        EntryKind.OUTFLOW,
        Decimal("500"),
        date(2024, 5, 20),
        account_id=sample_account.id,
        category_id=sample_categories["Aluguel"],
    )
    create(
        EntryKind.INFLOW,
        Decimal("400"),
        date(2024, 5, 10),
        account_id=sample_account.id,
        category_id=sample_categories["Sales"],
    )
    create(
        EntryKind.OUTFLOW,
        Decimal("250"),
        date(2024, 5, 12),
        account_id=sample_card.id,
        category_id=sample_categories["Matéria-prima"],
    )
    return {"account": sample_account, "card": sample_card}


@pytest.fixture
def dashboard(temp_db):
    return DashboardService(temp_db)


def test_balances_default_to_ordinary_accounts(dashboard, ledger):
    report = dashboard.balances(TODAY)

    assert [s.account_name for s in report.accounts] == ["Operating"]
    assert report.confirmed == Decimal("2700")
    assert report.projected == Decimal("2600")


def test_balances_for_explicit_accounts(dashboard, ledger):
    report = dashboard.balances(TODAY, account_ids=[ledger["card"].id])
    assert report.confirmed == Decimal("0")
    assert report.projected == Decimal("-250")


def test_cash_flow_defaults_to_month_of_now(dashboard, ledger):
    series = dashboard.cash_flow(TODAY)

    assert series.range_start == date(2024, 5, 1)
    assert series.range_end == date(2024, 5, 31)
    assert len(series.points) == 31
    assert series.total_inflow == Decimal("2400")
    assert series.total_outflow == Decimal("800")
    assert series.closing_balance == Decimal("1600")


def test_aging(dashboard, ledger):
    receivables = dashboard.aging(EntryKind.INFLOW, TODAY)
    payables = dashboard.aging(EntryKind.OUTFLOW, TODAY)

    assert receivables.total_overdue == Decimal("400")
    assert payables.total_overdue == Decimal("250")
    assert payables.total_upcoming == Decimal("500")


def test_card_exposures_use_configured_due_day(temp_db, ledger):
    dashboard = DashboardService(temp_db, EngineConfig(card_due_day=25))

    [exposure] = dashboard.card_exposures(TODAY)

    assert exposure.current_cycle_total == Decimal("250")
    assert exposure.available_limit == Decimal("4500")
    assert exposure.next_due_date == date(2024, 6, 25)


def test_income_statement(dashboard, ledger):
    dre = dashboard.income_statement(date(2024, 5, 1), date(2024, 5, 31))

    assert dre.gross_revenue == Decimal("2000")
    assert dre.deductions == Decimal("300")
    assert dre.net_profit == Decimal("1700")


def test_income_statement_with_filter(dashboard, ledger):
    only_inflows = EntryFilter(kind=EntryKind.INFLOW)
    dre = dashboard.income_statement(entry_filter=only_inflows)
    assert dre.deductions == Decimal("0")
    assert dre.net_profit == Decimal("2000")


def test_statement_and_consistency_share_snapshot(dashboard, ledger):
    snapshot = dashboard.snapshot()

    lines, summary = dashboard.statement(snapshot=snapshot)
    report = dashboard.consistency(snapshot)

    assert len(lines) == 5
    assert lines[0].entry.due_date == date(2024, 5, 20)
    assert summary.net == Decimal("1700")
    assert summary.pending_count == 3
    assert report.ok
