"""Income statement (DRE) composition."""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from cashbook.domain.classifier import DEFAULT_KEYWORDS, ClassificationKeywords, classify
from cashbook.domain.entities import (
    ZERO,
    Category,
    CategoryTotal,
    DreBucket,
    IncomeStatement,
    LedgerEntry,
)

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"


def _in_period(entry: LedgerEntry, start: Optional[date], end: Optional[date]) -> bool:
    if start is not None and entry.due_date < start:
        return False
    if end is not None and entry.due_date > end:
        return False
    return True


def _resolve_category(
    entry: LedgerEntry, category_index: dict[int, Category]
) -> Optional[Category]:
    if entry.category_id is None:
        return None
    category = category_index.get(entry.category_id)
    if category is None:
        logger.warning(
            "Entry %s references unknown category %s; treated as uncategorized",
            entry.id,
            entry.category_id,
        )
    return category


def _sorted_totals(
    totals: dict[tuple[DreBucket, Optional[int]], Decimal],
    names: dict[Optional[int], str],
) -> tuple[CategoryTotal, ...]:
    lines = [
        CategoryTotal(
            category_id=category_id,
            category_name=names.get(category_id, UNCATEGORIZED),
            total=total,
            bucket=bucket,
        )
        for (bucket, category_id), total in totals.items()
        if total != 0
    ]
    lines.sort(key=lambda line: (-line.total, line.category_name))
    return tuple(lines)


def compose_income_statement(
    entries: Sequence[LedgerEntry],
    categories: Sequence[Category],
    period_start: Optional[date] = None,
    period_end: Optional[date] = None,
    keywords: ClassificationKeywords = DEFAULT_KEYWORDS,
) -> IncomeStatement:
    """Fold settled entries of a period into a seven-line income statement.

    Settled inflows make up gross revenue. Settled outflows are split by
    the classifier into deductions, costs and operating expenses; the three
    buckets always add up to the settled outflow total.

    Args:
        entries: Ledger entries of the snapshot
        categories: Known categories, used for names and classification
        period_start: Optional first due date to include
        period_end: Optional last due date to include
        keywords: Classification keyword tables

    Returns:
        IncomeStatement with revenue and expense breakdowns by category
    """
    category_index = {c.id: c for c in categories}
    names: dict[Optional[int], str] = {c.id: c.name for c in categories}

    buckets: dict[DreBucket, Decimal] = defaultdict(lambda: ZERO)
    revenue: dict[tuple[DreBucket, Optional[int]], Decimal] = defaultdict(lambda: ZERO)
    expenses: dict[tuple[DreBucket, Optional[int]], Decimal] = defaultdict(lambda: ZERO)

    for entry in entries:
        if not entry.is_settled or not _in_period(entry, period_start, period_end):
            continue

        category = _resolve_category(entry, category_index)
        category_id = category.id if category is not None else None

        if entry.is_inflow:
            buckets[DreBucket.NONE] += entry.amount
            revenue[(DreBucket.NONE, category_id)] += entry.amount
            continue

        bucket = classify(entry, category, keywords)
        buckets[bucket] += entry.amount
        expenses[(bucket, category_id)] += entry.amount

    gross_revenue = buckets[DreBucket.NONE]
    deductions = buckets[DreBucket.DEDUCTION]
    costs = buckets[DreBucket.COST]
    operating_expenses = buckets[DreBucket.OPERATING_EXPENSE]

    net_revenue = gross_revenue - deductions
    gross_profit = net_revenue - costs
    net_profit = gross_profit - operating_expenses

    return IncomeStatement(
        period_start=period_start,
        period_end=period_end,
        gross_revenue=gross_revenue,
        deductions=deductions,
        net_revenue=net_revenue,
        costs=costs,
        gross_profit=gross_profit,
        operating_expenses=operating_expenses,
        net_profit=net_profit,
        revenue_by_category=_sorted_totals(revenue, names),
        expenses_by_category=_sorted_totals(expenses, names),
    )
