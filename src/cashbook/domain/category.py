"""Category and reference data domain services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from cashbook.domain.entities import Category, CostCenter, Counterparty, EntryKind
from cashbook.domain.errors import ConflictError, ValidationError, duplicate_name

if TYPE_CHECKING:
    from cashbook.database.base import Database


class CategoryService:
    """Service for managing inflow and outflow categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, name: str, kind: EntryKind, color: Optional[str] = None) -> int:
        """Create a category.

        Category names drive income statement classification (for example a
        name containing "imposto" is a deduction), so names are kept as given.

        Args:
            name: Category name
            kind: INFLOW or OUTFLOW
            color: Optional display color

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If a category with this name and kind exists
        """
        if not name or not name.strip():
            raise ValidationError("Category name cannot be empty")
        if self.db.get_category_by_name(name, kind) is not None:
            raise ConflictError(duplicate_name(f"{kind.value.capitalize()} category", name))
        return self.db.create_category(name=name, kind=kind, color=color)

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def get_category_by_name(self, name: str, kind: Optional[EntryKind] = None) -> Optional[Category]:
        """Get category by name."""
        return self.db.get_category_by_name(name, kind)

    def list_categories(self, kind: Optional[EntryKind] = None) -> list[Category]:
        """List categories, optionally of one kind."""
        return self.db.list_categories(kind=kind)


class ReferenceDataService:
    """Service for cost centers and counterparties."""

    def __init__(self, db: Database):
        self.db = db

    def create_cost_center(self, name: str, description: Optional[str] = None) -> int:
        """Create a cost center.

        Raises:
            ConflictError: If a cost center with this name exists
        """
        if any(cc.name == name for cc in self.db.list_cost_centers()):
            raise ConflictError(duplicate_name("Cost center", name))
        return self.db.create_cost_center(name=name, description=description)

    def list_cost_centers(self) -> list[CostCenter]:
        return self.db.list_cost_centers()

    def create_counterparty(self, name: str, document: Optional[str] = None) -> int:
        """Create a supplier or customer.

        Raises:
            ConflictError: If a counterparty with this name exists
        """
        if any(cp.name == name for cp in self.db.list_counterparties()):
            raise ConflictError(duplicate_name("Counterparty", name))
        return self.db.create_counterparty(name=name, document=document)

    def list_counterparties(self) -> list[Counterparty]:
        return self.db.list_counterparties()
