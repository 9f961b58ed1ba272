"""Main CLI entry point."""

import logging
from datetime import date

import click
from cashbook import __version__
from cashbook.config import load_config
from cashbook.database.factories import create_sqlite_database
from cashbook.domain.errors import DomainError
from cashbook.logging_config import configure_logging
from cashbook.utils.date_parser import parse_date

# Import and register all commands at module level
from cashbook.cli.commands import (
    account,
    category,
    entry,
    reports,
)


@click.group()
@click.version_option(__version__, prog_name="cashbook")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CASHBOOK_DB_PATH environment variable)",
    envvar="CASHBOOK_DB_PATH",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    help="Path to TOML engine configuration (overrides CASHBOOK_CONFIG)",
    envvar="CASHBOOK_CONFIG",
)
@click.option(
    "--today",
    help="Reference date for reports (YYYY-MM-DD); defaults to the current date",
    envvar="CASHBOOK_TODAY",
)
@click.option("--verbose", "-v", is_flag=True, help="Log engine details to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, config_path: str | None, today: str | None, verbose: bool):
    """Cashbook - cash management for small businesses.

    Record inflows and outflows against accounts and categories, then view
    balances, cash flow, aging, credit-card exposure and the income statement.
    """
    ctx.ensure_object(dict)
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["config"] = load_config(config_path)
            ctx.obj["today"] = parse_date(today) if today else date.today()
        except (DomainError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
entry.register_commands(cli)
reports.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
