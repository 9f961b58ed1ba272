"""Account domain service."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from cashbook.domain.entities import Account as AccountEntity, AccountType
from cashbook.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    account_deactivate_blocked,
    account_not_found,
    duplicate_name,
)

if TYPE_CHECKING:
    from cashbook.database.base import Database


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        account_type: AccountType = AccountType.ORDINARY,
        opening_balance: Decimal = Decimal("0"),
        opening_date: Optional[date] = None,
        credit_limit: Optional[Decimal] = None,
        bank_name: Optional[str] = None,
    ) -> int:
        """Create a new account.

        Args:
            name: Account name
            account_type: ORDINARY or CARD
            opening_balance: Starting balance; negative for a card's starting debt
            opening_date: Date the opening balance refers to
            credit_limit: Credit limit, only meaningful for card accounts
            bank_name: Optional bank name

        Returns:
            Account ID

        Raises:
            ConflictError: If account name already exists
            ValidationError: If a credit limit is negative or set on an ordinary account
        """
        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(duplicate_name("Account", name))

        if credit_limit is not None:
            if account_type != AccountType.CARD:
                raise ValidationError("Credit limit can only be set on card accounts")
            if credit_limit < 0:
                raise ValidationError("Credit limit cannot be negative")

        return self.db.create_account(
            name=name,
            account_type=account_type,
            opening_balance=opening_balance,
            opening_date=opening_date,
            credit_limit=credit_limit,
            bank_name=bank_name,
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(
        self, active_only: bool = False, account_type: Optional[AccountType] = None
    ) -> list[AccountEntity]:
        """List accounts.

        Returns:
            List of account entities ordered by name
        """
        return self.db.list_accounts(active_only=active_only, account_type=account_type)

    def deactivate_account(self, account_id: int) -> None:
        """Deactivate an account.

        Accounts are never deleted while entries reference them; deactivation
        hides them from the default dashboard views.

        Raises:
            NotFoundError: If account not found
            DependencyError: If the account still has pending entries
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        pending_count = self.db.count_pending_entries(account_id)
        if pending_count > 0:
            raise DependencyError(account_deactivate_blocked(account_id, pending_count))

        self.db.set_account_active(account_id, False)

    def activate_account(self, account_id: int) -> None:
        """Reactivate a deactivated account."""
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        self.db.set_account_active(account_id, True)
