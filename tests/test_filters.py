"""Tests for entry filters."""

from datetime import date
from decimal import Decimal

from cashbook.domain.entities import EntryKind, EntryStatus
from cashbook.domain.filters import EntryFilter, apply_filter, restrict_to_accounts


def test_empty_filter_matches_everything(make_entry):
    entries = [make_entry(), make_entry(kind=EntryKind.OUTFLOW)]
    assert apply_filter(entries, EntryFilter()) == entries
    assert apply_filter(entries, None) == entries


def test_date_bounds_are_inclusive(make_entry):
    f = EntryFilter(start_date=date(2024, 5, 1), end_date=date(2024, 5, 31))
    assert f.matches(make_entry(due_date=date(2024, 5, 1)))
    assert f.matches(make_entry(due_date=date(2024, 5, 31)))
    assert not f.matches(make_entry(due_date=date(2024, 6, 1)))


def test_field_criteria(make_entry):
    entry = make_entry(
        kind=EntryKind.OUTFLOW,
        amount="150",
        status=EntryStatus.SETTLED,
        account_id=1,
        category_id=2,
        cost_center_id=3,
        counterparty_id=4,
        description="Conta de Energia",
    )

    assert EntryFilter(kind=EntryKind.OUTFLOW, status=EntryStatus.SETTLED).matches(entry)
    assert EntryFilter(account_ids=frozenset({1, 5})).matches(entry)
    assert not EntryFilter(account_ids=frozenset({5})).matches(entry)
    assert EntryFilter(category_id=2, cost_center_id=3, counterparty_id=4).matches(entry)
    assert not EntryFilter(counterparty_id=5).matches(entry)
    assert EntryFilter(min_amount=Decimal("150"), max_amount=Decimal("150")).matches(entry)
    assert not EntryFilter(min_amount=Decimal("150.01")).matches(entry)
    assert EntryFilter(description="ENERGIA").matches(entry)
    assert not EntryFilter(description="água").matches(entry)


def test_uncategorized(make_entry):
    f = EntryFilter(uncategorized=True)
    assert f.matches(make_entry())
    assert not f.matches(make_entry(category_id=1))


def test_restrict_to_accounts(make_entry):
    entries = [make_entry(account_id=1), make_entry(account_id=2), make_entry()]
    assert len(restrict_to_accounts(entries, None)) == 3
    assert [e.account_id for e in restrict_to_accounts(entries, [2])] == [2]
