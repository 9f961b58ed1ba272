"""CLI helpers for account and category resolution."""

from __future__ import annotations

from typing import Iterable, Optional

import click
from cashbook.domain.account import AccountService
from cashbook.domain.category import CategoryService
from cashbook.domain.entities import EntryKind
from cashbook.domain.errors import DomainError, category_name_not_found
from cashbook.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str | int
) -> int:
    """Resolve account name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(account_service, account)
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def resolve_accounts_or_exit(
    ctx: click.Context, account_service: AccountService, accounts: Iterable[str]
) -> Optional[list[int]]:
    """Resolve repeated --account options; None when none were given."""
    accounts = list(accounts)
    if not accounts:
        return None
    return [resolve_account_or_exit(ctx, account_service, a) for a in accounts]


def resolve_category_or_exit(
    ctx: click.Context,
    category_service: CategoryService,
    category: str,
    kind: Optional[EntryKind] = None,
) -> int:
    """Resolve a category name or ID, or exit with a CLI error."""
    if category.isdigit():
        found = category_service.get_category(int(category))
    else:
        found = category_service.get_category_by_name(category, kind)
    if found is None:
        click.echo(f"Error: {category_name_not_found(category)}", err=True)
        ctx.exit(1)
    return found.id
