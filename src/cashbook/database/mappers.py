"""Mapper functions to convert between domain models and SQLAlchemy models.

Enum columns are stored as their string values; amounts come back from the
Numeric columns as Decimal.
"""

from decimal import Decimal

from cashbook.domain import entities as domain
from cashbook.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    CostCenter as ORMCostCenter,
    Counterparty as ORMCounterparty,
    Entry as ORMEntry,
)


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=domain.AccountType.parse(orm_account.account_type),
        opening_balance=_decimal(orm_account.opening_balance or 0),
        opening_date=orm_account.opening_date,
        credit_limit=(
            _decimal(orm_account.credit_limit)
            if orm_account.credit_limit is not None
            else None
        ),
        active=orm_account.active,
        bank_name=orm_account.bank_name,
        created_at=orm_account.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        kind=domain.EntryKind.parse(orm_category.kind),
        color=orm_category.color,
        created_at=orm_category.created_at,
    )


def cost_center_to_domain(orm_cost_center: ORMCostCenter) -> domain.CostCenter:
    """Convert SQLAlchemy CostCenter model to domain CostCenter entity."""
    return domain.CostCenter(
        id=orm_cost_center.id,
        name=orm_cost_center.name,
        active=orm_cost_center.active,
        description=orm_cost_center.description,
    )


def counterparty_to_domain(orm_counterparty: ORMCounterparty) -> domain.Counterparty:
    """Convert SQLAlchemy Counterparty model to domain Counterparty entity."""
    return domain.Counterparty(
        id=orm_counterparty.id,
        name=orm_counterparty.name,
        active=orm_counterparty.active,
        document=orm_counterparty.document,
    )


def entry_to_domain(orm_entry: ORMEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy Entry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        id=orm_entry.id,
        kind=domain.EntryKind.parse(orm_entry.kind),
        amount=_decimal(orm_entry.amount),
        due_date=orm_entry.due_date,
        status=domain.EntryStatus.parse(orm_entry.status),
        settled_date=orm_entry.settled_date,
        account_id=orm_entry.account_id,
        category_id=orm_entry.category_id,
        cost_center_id=orm_entry.cost_center_id,
        counterparty_id=orm_entry.counterparty_id,
        description=orm_entry.description,
        document_number=orm_entry.document_number,
        notes=orm_entry.notes,
        installment_number=orm_entry.installment_number,
        installment_count=orm_entry.installment_count,
        recurring=bool(orm_entry.recurring),
        created_at=orm_entry.created_at,
    )
