"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from cashbook.domain.entities import (
    Account,
    AccountType,
    Category,
    CostCenter,
    Counterparty,
    EntryKind,
    EntryStatus,
    LedgerEntry,
)
from cashbook.domain.filters import EntryFilter


class Database(ABC):
    """Abstract ledger store for cashbook.

    The reporting engine only reads through ``list_*``; the create/update
    operations serve the surrounding application.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        account_type: AccountType,
        opening_balance: Decimal = Decimal("0"),
        opening_date: Optional[date] = None,
        credit_limit: Optional[Decimal] = None,
        bank_name: Optional[str] = None,
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(
        self, active_only: bool = False, account_type: Optional[AccountType] = None
    ) -> list[Account]:
        """List accounts ordered by name, optionally only active ones of a type."""
        pass

    @abstractmethod
    def set_account_active(self, account_id: int, active: bool) -> None:
        """Activate or deactivate an account."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str, kind: EntryKind, color: Optional[str] = None) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(
        self, name: str, kind: Optional[EntryKind] = None
    ) -> Optional[Category]:
        """Get category by exact name, optionally restricted to a kind."""
        pass

    @abstractmethod
    def list_categories(self, kind: Optional[EntryKind] = None) -> list[Category]:
        """List categories ordered by name, optionally filtered by kind."""
        pass

    # Cost center and counterparty operations
    @abstractmethod
    def create_cost_center(self, name: str, description: Optional[str] = None) -> int:
        """Create a cost center. Returns cost center ID."""
        pass

    @abstractmethod
    def get_cost_center(self, cost_center_id: int) -> Optional[CostCenter]:
        """Get cost center by ID."""
        pass

    @abstractmethod
    def list_cost_centers(self) -> list[CostCenter]:
        """List cost centers ordered by name."""
        pass

    @abstractmethod
    def create_counterparty(self, name: str, document: Optional[str] = None) -> int:
        """Create a counterparty. Returns counterparty ID."""
        pass

    @abstractmethod
    def get_counterparty(self, counterparty_id: int) -> Optional[Counterparty]:
        """Get counterparty by ID."""
        pass

    @abstractmethod
    def list_counterparties(self) -> list[Counterparty]:
        """List counterparties ordered by name."""
        pass

    # Entry operations
    @abstractmethod
    def create_entry(
        self,
        kind: EntryKind,
        amount: Decimal,
        due_date: date,
        status: EntryStatus = EntryStatus.PENDING,
        settled_date: Optional[date] = None,
        account_id: Optional[int] = None,
        category_id: Optional[int] = None,
        cost_center_id: Optional[int] = None,
        counterparty_id: Optional[int] = None,
        description: Optional[str] = None,
        document_number: Optional[str] = None,
        notes: Optional[str] = None,
        installment_number: Optional[int] = None,
        installment_count: Optional[int] = None,
        recurring: bool = False,
    ) -> int:
        """Create a ledger entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get ledger entry by ID."""
        pass

    @abstractmethod
    def list_entries(self, entry_filter: Optional[EntryFilter] = None) -> list[LedgerEntry]:
        """List ledger entries matching a filter, ordered by due date then ID."""
        pass

    @abstractmethod
    def update_entry_status(
        self, entry_id: int, status: EntryStatus, settled_date: Optional[date] = None
    ) -> None:
        """Change an entry's status and settled date."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: int) -> None:
        """Delete a ledger entry."""
        pass

    @abstractmethod
    def count_pending_entries(self, account_id: int) -> int:
        """Count pending entries posted to an account."""
        pass
