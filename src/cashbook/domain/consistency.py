"""Referential and status consistency checks over a ledger snapshot."""

import logging
from typing import Sequence

from cashbook.domain.entities import Account, Category, ConsistencyReport, LedgerEntry

logger = logging.getLogger(__name__)


def check_consistency(
    entries: Sequence[LedgerEntry],
    accounts: Sequence[Account],
    categories: Sequence[Category],
) -> ConsistencyReport:
    """Find entries the reports can only handle by skipping or falling back.

    Never raises: every finding is returned and logged as a warning.
    """
    account_ids = {a.id for a in accounts}
    category_index = {c.id: c for c in categories}

    missing_accounts = []
    missing_categories = []
    settled_without_date = []
    kind_mismatches = []
    issues = []

    for entry in entries:
        if entry.account_id is not None and entry.account_id not in account_ids:
            missing_accounts.append(entry.id)
            issues.append(f"Entry {entry.id}: unknown account {entry.account_id}")

        if entry.category_id is not None:
            category = category_index.get(entry.category_id)
            if category is None:
                missing_categories.append(entry.id)
                issues.append(f"Entry {entry.id}: unknown category {entry.category_id}")
            elif category.kind != entry.kind:
                kind_mismatches.append(entry.id)
                issues.append(
                    f"Entry {entry.id}: {entry.kind.value} entry in "
                    f"{category.kind.value} category '{category.name}'"
                )

        if entry.is_settled and entry.settled_date is None:
            settled_without_date.append(entry.id)
            issues.append(f"Entry {entry.id}: settled without a settled date")

    for issue in issues:
        logger.warning(issue)

    return ConsistencyReport(
        missing_accounts=tuple(missing_accounts),
        missing_categories=tuple(missing_categories),
        settled_without_date=tuple(settled_without_date),
        kind_mismatches=tuple(kind_mismatches),
        issues=tuple(issues),
    )
