"""Ledger entry commands."""

import re

import click
from cashbook.cli.account_resolution import resolve_account_or_exit, resolve_category_or_exit
from cashbook.cli.entry_filters import build_entry_filter, filter_options
from cashbook.cli.error_handling import handle_domain_error
from cashbook.domain.account import AccountService
from cashbook.domain.category import CategoryService, ReferenceDataService
from cashbook.domain.entities import EntryKind
from cashbook.domain.entry import EntryService
from cashbook.domain.errors import DomainError
from cashbook.utils.amount_parser import parse_amount
from cashbook.utils.date_parser import parse_date
from cashbook.utils.serialize import to_json

INSTALLMENT_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*$")


@click.group()
def entry_group():
    """Record and manage inflow and outflow entries."""
    pass


def _reference_id(ctx, items, value: str | None, label: str) -> int | None:
    if value is None:
        return None
    for item in items:
        if str(item.id) == value or item.name == value:
            return item.id
    click.echo(f"Error: {label} '{value}' not found", err=True)
    ctx.exit(1)


@entry_group.command("add")
@click.argument("kind", type=click.Choice(["inflow", "outflow"]))
@click.argument("amount")
@click.option("--due", "due_date", required=True, help="Due date (YYYY-MM-DD, 'today', ...)")
@click.option("--account", help="Account name or ID")
@click.option("--category", help="Category name or ID")
@click.option("--cost-center", help="Cost center name or ID")
@click.option("--counterparty", help="Counterparty name or ID")
@click.option("--description", help="Entry description")
@click.option("--document", "document_number", help="Document number")
@click.option("--notes", help="Notes")
@click.option("--installment", help="Installment as NUMBER/COUNT, e.g. 2/6")
@click.option("--recurring", is_flag=True, help="Mark the entry as recurring")
@click.option("--settled-date", help="Record as already settled on this date")
@click.pass_context
def add_entry(
    ctx,
    kind: str,
    amount: str,
    due_date: str,
    account: str | None,
    category: str | None,
    cost_center: str | None,
    counterparty: str | None,
    description: str | None,
    document_number: str | None,
    notes: str | None,
    installment: str | None,
    recurring: bool,
    settled_date: str | None,
):
    """Add an entry.

    KIND is inflow or outflow; AMOUNT is always positive.

    Examples:
        cashbook entry add inflow 1500 --due 2024-05-10 --account Operating --category Sales
        cashbook entry add outflow "R$ 89,90" --due today --settled-date today
    """
    db = ctx.obj["db"]
    today = ctx.obj["today"]
    entry_kind = EntryKind.parse(kind)

    try:
        parsed_amount = parse_amount(amount)
        due = parse_date(due_date, today)
        settled = parse_date(settled_date, today) if settled_date else None
    except ValueError as e:
        handle_domain_error(ctx, e)

    installment_number = installment_count = None
    if installment:
        match = INSTALLMENT_RE.match(installment)
        if match is None:
            click.echo(f"Error: Invalid installment '{installment}', expected NUMBER/COUNT", err=True)
            ctx.exit(1)
        installment_number, installment_count = int(match.group(1)), int(match.group(2))

    account_id = resolve_account_or_exit(ctx, AccountService(db), account) if account else None
    category_id = (
        resolve_category_or_exit(ctx, CategoryService(db), category, entry_kind)
        if category
        else None
    )
    reference = ReferenceDataService(db)
    cost_center_id = _reference_id(ctx, reference.list_cost_centers(), cost_center, "Cost center")
    counterparty_id = _reference_id(
        ctx, reference.list_counterparties(), counterparty, "Counterparty"
    )

    try:
        entry_id = EntryService(db).create_entry(
            kind=entry_kind,
            amount=parsed_amount,
            due_date=due,
            account_id=account_id,
            category_id=category_id,
            cost_center_id=cost_center_id,
            counterparty_id=counterparty_id,
            description=description,
            document_number=document_number,
            notes=notes,
            installment_number=installment_number,
            installment_count=installment_count,
            recurring=recurring,
            settled_date=settled,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created {kind} entry {entry_id}")


@entry_group.command("list")
@filter_options
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@click.pass_context
def list_entries(ctx, as_json: bool, **kwargs):
    """List entries ordered by due date."""
    entry_filter = build_entry_filter(ctx, kwargs)
    entries = EntryService(ctx.obj["db"]).list_entries(entry_filter)

    if as_json:
        click.echo(to_json(entries))
        return

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entry(ies):")
    click.echo("-" * 100)
    for e in entries:
        description = e.description or ""
        if e.installment_label:
            description = f"{description} ({e.installment_label})".strip()
        settled = f" on {e.settled_date}" if e.settled_date else ""
        click.echo(
            f"{e.id:4d} | {e.due_date} | {e.kind.value:7s} | {e.amount:>12,.2f} | "
            f"{e.status.value}{settled} | {description}"
        )


@entry_group.command("settle")
@click.argument("entry_id", type=int)
@click.option("--date", "settled_date", help="Settlement date (defaults to today)")
@click.pass_context
def settle_entry(ctx, entry_id: int, settled_date: str | None):
    """Mark an entry as paid or received."""
    today = ctx.obj["today"]
    try:
        settled = parse_date(settled_date, today) if settled_date else today
        EntryService(ctx.obj["db"]).mark_settled(entry_id, settled)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Settled entry {entry_id} on {settled}")


@entry_group.command("reopen")
@click.argument("entry_id", type=int)
@click.pass_context
def reopen_entry(ctx, entry_id: int):
    """Return an entry to pending."""
    try:
        EntryService(ctx.obj["db"]).reopen(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Reopened entry {entry_id}")


@entry_group.command("cancel")
@click.argument("entry_id", type=int)
@click.pass_context
def cancel_entry(ctx, entry_id: int):
    """Cancel an entry."""
    try:
        EntryService(ctx.obj["db"]).cancel(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Canceled entry {entry_id}")


@entry_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: int, yes: bool):
    """Delete an entry permanently."""
    if not yes:
        click.confirm(f"Delete entry {entry_id}?", abort=True)
    try:
        EntryService(ctx.obj["db"]).delete_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted entry {entry_id}")


def register_commands(cli):
    """Register entry commands with CLI."""
    cli.add_command(entry_group, name="entry")
