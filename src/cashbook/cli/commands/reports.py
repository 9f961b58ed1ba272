"""Dashboard report commands."""

import click
from cashbook.cli.account_resolution import resolve_accounts_or_exit
from cashbook.cli.date_filters import period_flags, period_options, resolve_cli_date_range
from cashbook.cli.entry_filters import build_entry_filter, filter_options
from cashbook.cli.error_handling import handle_domain_error
from cashbook.domain.account import AccountService
from cashbook.domain.dashboard import DashboardService
from cashbook.domain.entities import AgingReport, EntryKind
from cashbook.domain.errors import DomainError
from cashbook.utils.date_parser import parse_date
from cashbook.utils.serialize import to_json, to_plain

json_option = click.option("--json", "as_json", is_flag=True, help="Print JSON")


def _dashboard(ctx) -> DashboardService:
    return DashboardService(ctx.obj["db"], ctx.obj["config"])


@click.command("balances")
@click.option("--as-of", help="Balance date (defaults to today)")
@click.option("--account", "accounts", multiple=True, help="Account name or ID (repeatable)")
@json_option
@click.pass_context
def balances(ctx, as_of: str | None, accounts: tuple[str, ...], as_json: bool):
    """Show confirmed and projected balances.

    Without --account, all active ordinary (non-card) accounts are included.
    """
    try:
        as_of_date = parse_date(as_of, ctx.obj["today"]) if as_of else ctx.obj["today"]
    except ValueError as e:
        handle_domain_error(ctx, e)
    account_ids = resolve_accounts_or_exit(ctx, AccountService(ctx.obj["db"]), accounts)

    report = _dashboard(ctx).balances(as_of_date, account_ids)
    if as_json:
        click.echo(to_json(report))
        return

    click.echo(f"\nBalances as of {report.as_of}:")
    click.echo("-" * 70)
    for snap in report.accounts:
        click.echo(f"{snap.account_name:30s} {snap.confirmed:>16,.2f} {snap.projected:>16,.2f}")
    click.echo("-" * 70)
    click.echo(f"{'Confirmed':30s} {report.confirmed:>16,.2f}")
    click.echo(f"{'Projected':30s} {report.projected:>16,.2f}")
    if report.skipped_entries:
        click.echo(f"\n{report.skipped_entries} entry(ies) reference unknown accounts and were skipped.")


@click.command("cash-flow")
@click.option("--start-date", help="Start date (defaults to first day of the month)")
@click.option("--end-date", help="End date (defaults to last day of the month)")
@period_options
@click.option("--account", "accounts", multiple=True, help="Account name or ID (repeatable)")
@click.option("--all-days", is_flag=True, help="Also print days without movement")
@json_option
@click.pass_context
def cash_flow(
    ctx,
    start_date: str | None,
    end_date: str | None,
    accounts: tuple[str, ...],
    all_days: bool,
    as_json: bool,
    **kwargs,
):
    """Show the daily cash-flow series with running balance."""
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags(kwargs),
        today=ctx.obj["today"],
    )
    account_ids = resolve_accounts_or_exit(ctx, AccountService(ctx.obj["db"]), accounts)

    try:
        series = _dashboard(ctx).cash_flow(ctx.obj["today"], start, end, account_ids)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(to_json(series))
        return

    click.echo(f"\nCash flow {series.range_start} to {series.range_end}")
    click.echo(f"Opening balance: {series.opening_balance:,.2f}")
    click.echo("-" * 78)
    click.echo(f"{'Date':10s} {'Inflow':>16s} {'Outflow':>16s} {'Net':>16s} {'Balance':>16s}")
    for point in series.points:
        if not all_days and not (point.inflow_total or point.outflow_total):
            continue
        click.echo(
            f"{point.date} {point.inflow_total:>16,.2f} {point.outflow_total:>16,.2f} "
            f"{point.net_of_day:>16,.2f} {point.running_balance:>16,.2f}"
        )
    click.echo("-" * 78)
    click.echo(
        f"{'Total':10s} {series.total_inflow:>16,.2f} {series.total_outflow:>16,.2f} "
        f"{'':>16s} {series.closing_balance:>16,.2f}"
    )


def _echo_aging(report: AgingReport) -> None:
    title = "Receivables" if report.kind == EntryKind.INFLOW else "Payables"
    click.echo(f"\n{title} as of {report.as_of}:")
    click.echo("-" * 70)
    if not report.overdue and not report.upcoming:
        click.echo("Nothing pending.")
    for item in report.overdue + report.upcoming:
        label = item.label or ""
        description = item.entry.description or ""
        click.echo(
            f"{item.entry.id:4d} | {item.entry.due_date} | {item.entry.amount:>12,.2f} | "
            f"{label:12s} | {description}"
        )
    click.echo("-" * 70)
    click.echo(f"Overdue:   {report.total_overdue:>14,.2f}")
    click.echo(f"Due today: {report.total_due_today:>14,.2f}")
    click.echo(f"Upcoming:  {report.total_upcoming:>14,.2f}")
    click.echo(f"Total:     {report.total_all:>14,.2f}")


@click.command("aging")
@click.option(
    "--kind",
    type=click.Choice(["receivables", "payables"]),
    help="Only receivables (inflows) or payables (outflows)",
)
@json_option
@click.pass_context
def aging(ctx, kind: str | None, as_json: bool):
    """Show overdue and upcoming receivables and payables."""
    kinds = {"receivables": EntryKind.INFLOW, "payables": EntryKind.OUTFLOW}
    selected = [kinds[kind]] if kind else list(kinds.values())

    dashboard = _dashboard(ctx)
    snapshot = dashboard.snapshot()
    reports = [dashboard.aging(k, ctx.obj["today"], snapshot) for k in selected]

    if as_json:
        click.echo(to_json({r.kind.value: to_plain(r) for r in reports}))
        return
    for report in reports:
        _echo_aging(report)


@click.command("cards")
@json_option
@click.pass_context
def cards(ctx, as_json: bool):
    """Show invoice exposure and available limit of credit-card accounts."""
    exposures = _dashboard(ctx).card_exposures(ctx.obj["today"])

    if as_json:
        click.echo(to_json(exposures))
        return
    if not exposures:
        click.echo("No active card accounts.")
        return

    for exp in exposures:
        click.echo(f"\n{exp.account_name} (ID: {exp.account_id})")
        click.echo("-" * 50)
        click.echo(f"Limit:                  {exp.credit_limit:>14,.2f}")
        click.echo(f"Current invoice:        {exp.current_cycle_total:>14,.2f}")
        click.echo(f"Next invoice:           {exp.next_cycle_total:>14,.2f}")
        click.echo(f"Previous invoice:       {exp.previous_cycle_total:>14,.2f}")
        click.echo(f"Scheduled pending:      {exp.scheduled_pending:>14,.2f}")
        click.echo(f"Available limit:        {exp.available_limit:>14,.2f}")
        click.echo(f"Available after payment:{exp.available_limit_after_payment:>14,.2f}")
        click.echo(f"Next due date:          {exp.next_due_date}")


@click.command("dre")
@filter_options
@click.option("--details", is_flag=True, help="Show totals per category")
@json_option
@click.pass_context
def dre(ctx, details: bool, as_json: bool, **kwargs):
    """Show the classified income statement (DRE).

    Only settled entries count; the date range applies to due dates.
    """
    entry_filter = build_entry_filter(ctx, kwargs)
    statement = _dashboard(ctx).income_statement(
        entry_filter.start_date, entry_filter.end_date, entry_filter
    )

    if as_json:
        click.echo(to_json(statement))
        return

    start = statement.period_start or "beginning"
    end = statement.period_end or "open end"
    click.echo(f"\nIncome statement ({start} to {end})")
    click.echo("-" * 50)
    for label, value in statement.lines():
        click.echo(f"{label:30s} {value:>16,.2f}")

    if details:
        click.echo("\nRevenue by category:")
        for total in statement.revenue_by_category:
            click.echo(f"  {total.category_name:28s} {total.total:>16,.2f}")
        click.echo("\nExpenses by category:")
        for total in statement.expenses_by_category:
            click.echo(
                f"  {total.category_name:28s} {total.total:>16,.2f}  [{total.bucket.value}]"
            )


@click.command("statement")
@filter_options
@json_option
@click.pass_context
def statement(ctx, as_json: bool, **kwargs):
    """Show entries with a running balance of settled amounts, most recent first."""
    entry_filter = build_entry_filter(ctx, kwargs)
    lines, summary = _dashboard(ctx).statement(
        entry_filter.start_date, entry_filter.end_date, entry_filter
    )

    if as_json:
        click.echo(to_json({"lines": lines, "summary": summary}))
        return

    if not lines:
        click.echo("No entries found.")
    for line in lines:
        e = line.entry
        signed = e.signed_amount
        click.echo(
            f"{e.due_date} | {signed:>+14,.2f} | {e.status.value:8s} | "
            f"{line.running_balance:>14,.2f} | {e.description or ''}"
        )
    click.echo("-" * 70)
    click.echo(f"Inflows:  {summary.inflows:>14,.2f}")
    click.echo(f"Outflows: {summary.outflows:>14,.2f}")
    click.echo(f"Net:      {summary.net:>14,.2f}")
    click.echo(f"Pending entries: {summary.pending_count}")


@click.command("check")
@json_option
@click.pass_context
def check(ctx, as_json: bool):
    """Check the ledger for dangling references and inconsistent entries.

    Exits with status 1 when issues are found.
    """
    report = _dashboard(ctx).consistency()

    if as_json:
        click.echo(to_json(report))
    elif report.ok:
        click.echo("No issues found.")
    else:
        click.echo(f"Found {report.issue_count} issue(s):")
        for issue in report.issues:
            click.echo(f"  - {issue}")

    if not report.ok:
        ctx.exit(1)


def register_commands(cli):
    """Register report commands with CLI."""
    cli.add_command(balances)
    cli.add_command(cash_flow)
    cli.add_command(aging)
    cli.add_command(cards)
    cli.add_command(dre)
    cli.add_command(statement)
    cli.add_command(check)
