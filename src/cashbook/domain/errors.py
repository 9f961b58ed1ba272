"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def entry_not_found(entry_id: int) -> str:
    """Return message for missing ledger entry."""
    return f"Entry {entry_id} not found"


def cost_center_not_found(cost_center_id: int) -> str:
    """Return message for missing cost center."""
    return f"Cost center {cost_center_id} not found"


def counterparty_not_found(counterparty_id: int) -> str:
    """Return message for missing counterparty."""
    return f"Counterparty {counterparty_id} not found"


def duplicate_name(entity: str, name: str) -> str:
    """Return message for a duplicate entity name."""
    return f"{entity} with name '{name}' already exists"


def category_kind_mismatch(category_name: str, category_kind: str, entry_kind: str) -> str:
    """Return message when an entry is assigned a category of the other kind."""
    return (
        f"Category '{category_name}' is an {category_kind} category "
        f"and cannot be used on an {entry_kind} entry"
    )


def account_deactivate_blocked(account_id: int, pending_count: int) -> str:
    """Return message when an account still has pending entries."""
    return (
        f"Cannot deactivate account {account_id}: it has {pending_count} pending "
        f"entr{'ies' if pending_count != 1 else 'y'}. "
        "Please settle or cancel them first."
    )
