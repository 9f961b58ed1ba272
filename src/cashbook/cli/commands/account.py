"""Account management commands."""

import click
from cashbook.cli.account_resolution import resolve_account_or_exit
from cashbook.cli.error_handling import handle_domain_error
from cashbook.domain.account import AccountService
from cashbook.domain.entities import AccountType
from cashbook.domain.errors import DomainError
from cashbook.utils.amount_parser import parse_amount
from cashbook.utils.date_parser import parse_date


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(["ordinary", "card"]),
    default="ordinary",
    show_default=True,
    help="Account type",
)
@click.option("--opening-balance", default="0", help="Opening balance")
@click.option("--opening-date", help="Opening date (YYYY-MM-DD)")
@click.option("--limit", "credit_limit", help="Credit limit (card accounts only)")
@click.option("--bank", help="Bank name")
@click.pass_context
def create_account(
    ctx,
    name: str,
    account_type: str,
    opening_balance: str,
    opening_date: str | None,
    credit_limit: str | None,
    bank: str | None,
):
    """Create a new account.

    Examples:
        cashbook account create "Operating"
        cashbook account create "Corporate Visa" --type card --limit 5000
    """
    service = AccountService(ctx.obj["db"])

    try:
        account_id = service.create_account(
            name=name,
            account_type=AccountType.parse(account_type),
            opening_balance=parse_amount(opening_balance),
            opening_date=parse_date(opening_date, ctx.obj["today"]) if opening_date else None,
            credit_limit=parse_amount(credit_limit) if credit_limit is not None else None,
            bank_name=bank,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created account '{name}' (ID: {account_id})")


@account_group.command("list")
@click.option("--active", "active_only", is_flag=True, help="Only active accounts")
@click.pass_context
def list_accounts(ctx, active_only: bool):
    """List all accounts."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts(active_only=active_only)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        status = "active" if acc.active else "inactive"
        line = (
            f"ID: {acc.id:3d} | {acc.name:20s} | {acc.type.value:8s} | "
            f"Opening: {acc.opening_balance:>12,.2f} | {status}"
        )
        if acc.is_card:
            limit = acc.credit_limit if acc.credit_limit is not None else 0
            line += f" | Limit: {limit:,.2f}"
        click.echo(line)


@account_group.command("deactivate")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def deactivate_account(ctx, account: str) -> None:
    """Deactivate an account.

    ACCOUNT can be an account name or ID. Accounts with pending entries
    cannot be deactivated.
    """
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        service.deactivate_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deactivated account {account_id}")


@account_group.command("activate")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def activate_account(ctx, account: str) -> None:
    """Reactivate an account."""
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, account)
    service.activate_account(account_id)
    click.echo(f"Activated account {account_id}")


def register_commands(cli):
    """Register account commands with CLI."""
    cli.add_command(account_group, name="account")
