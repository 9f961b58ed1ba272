"""Category, cost center and counterparty commands."""

import click
from cashbook.cli.error_handling import handle_domain_error
from cashbook.domain.category import CategoryService, ReferenceDataService
from cashbook.domain.entities import EntryKind
from cashbook.domain.errors import DomainError

KIND_CHOICE = click.Choice(["inflow", "outflow"])


@click.group()
def category_group():
    """Manage inflow and outflow categories."""
    pass


@category_group.command("create")
@click.argument("name")
@click.option("--kind", type=KIND_CHOICE, required=True, help="Entry kind of the category")
@click.option("--color", help="Display color")
@click.pass_context
def create_category(ctx, name: str, kind: str, color: str | None):
    """Create a new category.

    Outflow category names drive the income statement: names containing
    tax keywords are deductions, product keywords are costs, and anything
    else is an operating expense.

    Examples:
        cashbook category create "Sales" --kind inflow
        cashbook category create "Imposto ISS" --kind outflow
    """
    service = CategoryService(ctx.obj["db"])

    try:
        category_id = service.create_category(name=name, kind=EntryKind.parse(kind), color=color)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created {kind} category '{name}' (ID: {category_id})")


@category_group.command("list")
@click.option("--kind", type=KIND_CHOICE, help="Only categories of this kind")
@click.pass_context
def list_categories(ctx, kind: str | None):
    """List categories."""
    service = CategoryService(ctx.obj["db"])
    categories = service.list_categories(EntryKind.parse(kind) if kind else None)

    if not categories:
        click.echo("No categories found.")
        return

    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.kind.value:7s} | {cat.name}")


@click.group()
def cost_center_group():
    """Manage cost centers."""
    pass


@cost_center_group.command("create")
@click.argument("name")
@click.option("--description", help="Description")
@click.pass_context
def create_cost_center(ctx, name: str, description: str | None):
    """Create a cost center."""
    service = ReferenceDataService(ctx.obj["db"])
    try:
        cost_center_id = service.create_cost_center(name, description)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created cost center '{name}' (ID: {cost_center_id})")


@cost_center_group.command("list")
@click.pass_context
def list_cost_centers(ctx):
    """List cost centers."""
    cost_centers = ReferenceDataService(ctx.obj["db"]).list_cost_centers()
    if not cost_centers:
        click.echo("No cost centers found.")
        return
    for cc in cost_centers:
        click.echo(f"ID: {cc.id:3d} | {cc.name}")


@click.group()
def counterparty_group():
    """Manage suppliers and customers."""
    pass


@counterparty_group.command("create")
@click.argument("name")
@click.option("--document", help="Tax document number")
@click.pass_context
def create_counterparty(ctx, name: str, document: str | None):
    """Create a counterparty."""
    service = ReferenceDataService(ctx.obj["db"])
    try:
        counterparty_id = service.create_counterparty(name, document)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created counterparty '{name}' (ID: {counterparty_id})")


@counterparty_group.command("list")
@click.pass_context
def list_counterparties(ctx):
    """List counterparties."""
    counterparties = ReferenceDataService(ctx.obj["db"]).list_counterparties()
    if not counterparties:
        click.echo("No counterparties found.")
        return
    for cp in counterparties:
        suffix = f" ({cp.document})" if cp.document else ""
        click.echo(f"ID: {cp.id:3d} | {cp.name}{suffix}")


def register_commands(cli):
    """Register category and reference data commands with CLI."""
    cli.add_command(category_group, name="category")
    cli.add_command(cost_center_group, name="cost-center")
    cli.add_command(counterparty_group, name="counterparty")
