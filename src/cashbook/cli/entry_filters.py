"""CLI helpers turning filter options into an EntryFilter."""

from datetime import date
from typing import Optional

import click
from cashbook.cli.account_resolution import (
    resolve_accounts_or_exit,
    resolve_category_or_exit,
)
from cashbook.cli.date_filters import period_flags, period_options, resolve_cli_date_range
from cashbook.domain.account import AccountService
from cashbook.domain.category import CategoryService, ReferenceDataService
from cashbook.domain.entities import EntryKind, EntryStatus
from cashbook.domain.filters import EntryFilter
from cashbook.utils.amount_parser import parse_amount


def filter_options(func):
    """Attach the entry filter options to a command."""
    options = [
        click.option("--start-date", help="Start of due-date range"),
        click.option("--end-date", help="End of due-date range"),
        click.option("--kind", type=click.Choice(["inflow", "outflow"]), help="Entry kind"),
        click.option(
            "--status",
            type=click.Choice(["pending", "settled", "canceled"]),
            help="Entry status",
        ),
        click.option("--account", "accounts", multiple=True, help="Account name or ID (repeatable)"),
        click.option("--category", help="Category name or ID"),
        click.option("--uncategorized", is_flag=True, help="Only entries without a category"),
        click.option("--cost-center", help="Cost center name or ID"),
        click.option("--counterparty", help="Counterparty name or ID"),
        click.option("--min-amount", help="Minimum amount"),
        click.option("--max-amount", help="Maximum amount"),
        click.option("--description", help="Text contained in the description"),
    ]
    for option in reversed(options):
        func = option(func)
    return period_options(func)


def _resolve_reference(ctx, items, value: str, label: str) -> int:
    for item in items:
        if str(item.id) == value or item.name == value:
            return item.id
    click.echo(f"Error: {label} '{value}' not found", err=True)
    ctx.exit(1)


def build_entry_filter(
    ctx,
    kwargs: dict,
    default_range: Optional[tuple[date, date]] = None,
) -> EntryFilter:
    """Consume the filter options from ``kwargs`` and build an EntryFilter.

    Exits with an error message when a referenced entity or value is invalid.
    """
    db = ctx.obj["db"]
    flags = period_flags(kwargs)
    start, end = resolve_cli_date_range(
        ctx,
        start_date=kwargs.pop("start_date"),
        end_date=kwargs.pop("end_date"),
        period_flags=flags,
        default_range=default_range,
        today=ctx.obj["today"],
    )

    kind = kwargs.pop("kind")
    kind = EntryKind.parse(kind) if kind else None
    status = kwargs.pop("status")

    account_ids = resolve_accounts_or_exit(ctx, AccountService(db), kwargs.pop("accounts"))

    category = kwargs.pop("category")
    category_id = (
        resolve_category_or_exit(ctx, CategoryService(db), category, kind) if category else None
    )

    reference = ReferenceDataService(db)
    cost_center = kwargs.pop("cost_center")
    cost_center_id = (
        _resolve_reference(ctx, reference.list_cost_centers(), cost_center, "Cost center")
        if cost_center
        else None
    )
    counterparty = kwargs.pop("counterparty")
    counterparty_id = (
        _resolve_reference(ctx, reference.list_counterparties(), counterparty, "Counterparty")
        if counterparty
        else None
    )

    try:
        min_amount = kwargs.pop("min_amount")
        max_amount = kwargs.pop("max_amount")
        min_amount = parse_amount(min_amount) if min_amount else None
        max_amount = parse_amount(max_amount) if max_amount else None
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    return EntryFilter(
        start_date=start,
        end_date=end,
        kind=kind,
        status=EntryStatus.parse(status) if status else None,
        account_ids=frozenset(account_ids) if account_ids is not None else None,
        category_id=category_id,
        uncategorized=kwargs.pop("uncategorized"),
        cost_center_id=cost_center_id,
        counterparty_id=counterparty_id,
        min_amount=min_amount,
        max_amount=max_amount,
        description=kwargs.pop("description"),
    )
