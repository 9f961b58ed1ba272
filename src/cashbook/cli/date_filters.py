"""CLI helpers for date range resolution."""

from datetime import date

import click

from cashbook.utils.date_parser import get_date_range, parse_date


def period_options(func):
    """Attach the mutually exclusive period flags to a report command."""
    for flag in ("last-year", "this-year", "next-month", "last-month", "this-month"):
        func = click.option(
            f"--{flag}",
            flag.replace("-", "_"),
            is_flag=True,
            help=f"Restrict to {flag.replace('-', ' ')}",
        )(func)
    return func


def period_flags(kwargs: dict) -> dict[str, bool]:
    """Pop the period flags added by ``period_options`` out of ``kwargs``."""
    names = ("this-month", "last-month", "next-month", "this-year", "last-year")
    return {name: kwargs.pop(name.replace("-", "_"), False) for name in names}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
    today: date | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --next-month, --this-year, --last-year) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period, today)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date, today)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date, today)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if start is None and end is None and default_range is not None:
            start, end = default_range

    return start, end
