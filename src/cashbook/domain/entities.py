"""Domain model entities for cashbook.

These are pure data classes representing business concepts, independent of
database schema. Ledger facts (entries, accounts, categories) come from the
store; the report views at the bottom of this module are derived by the
engine and never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional


ZERO = Decimal("0")


class EntryKind(str, Enum):
    """Direction of a ledger entry."""

    INFLOW = "inflow"
    OUTFLOW = "outflow"

    @classmethod
    def parse(cls, value: "str | EntryKind") -> "EntryKind":
        """Parse a kind name, accepting the Portuguese store values."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        aliases = {
            "inflow": cls.INFLOW,
            "in": cls.INFLOW,
            "entrada": cls.INFLOW,
            "outflow": cls.OUTFLOW,
            "out": cls.OUTFLOW,
            "saida": cls.OUTFLOW,
            "saída": cls.OUTFLOW,
        }
        if key not in aliases:
            raise ValueError(f"Unknown entry kind: '{value}'")
        return aliases[key]


class EntryStatus(str, Enum):
    """Lifecycle status of a ledger entry.

    "Overdue" is never stored: it is derived from the due date by the aging
    analyzer, so the legacy "atrasado" value parses as PENDING.
    """

    PENDING = "pending"
    SETTLED = "settled"
    CANCELED = "canceled"

    @classmethod
    def parse(cls, value: "str | EntryStatus") -> "EntryStatus":
        """Parse a status name, accepting the Portuguese store values."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        aliases = {
            "pending": cls.PENDING,
            "pendente": cls.PENDING,
            "atrasado": cls.PENDING,
            "overdue": cls.PENDING,
            "settled": cls.SETTLED,
            "paid": cls.SETTLED,
            "received": cls.SETTLED,
            "pago": cls.SETTLED,
            "recebido": cls.SETTLED,
            "canceled": cls.CANCELED,
            "cancelled": cls.CANCELED,
            "cancelado": cls.CANCELED,
        }
        if key not in aliases:
            raise ValueError(f"Unknown entry status: '{value}'")
        return aliases[key]


class AccountType(str, Enum):
    """Kind of balance-holding account."""

    ORDINARY = "ordinary"
    CARD = "card"

    @classmethod
    def parse(cls, value: "str | AccountType") -> "AccountType":
        """Parse an account type name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("card", "credit-card", "cartao_credito"):
            return cls.CARD
        if key in ("ordinary", "checking", "corrente", "conta_corrente"):
            return cls.ORDINARY
        raise ValueError(f"Unknown account type: '{value}'")


class DreBucket(str, Enum):
    """Income statement line an outflow entry is classified into."""

    DEDUCTION = "deduction"
    COST = "cost"
    OPERATING_EXPENSE = "operating_expense"
    NONE = "none"


@dataclass(frozen=True)
class Account:
    """Balance-holding account domain entity."""

    id: int
    name: str
    type: AccountType
    opening_balance: Decimal
    opening_date: Optional[date]
    credit_limit: Optional[Decimal]
    active: bool
    bank_name: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_card(self) -> bool:
        return self.type == AccountType.CARD


@dataclass(frozen=True)
class Category:
    """Classification category domain entity."""

    id: int
    name: str
    kind: EntryKind
    color: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class CostCenter:
    """Cost center domain entity, used for filtering only."""

    id: int
    name: str
    active: bool = True
    description: Optional[str] = None


@dataclass(frozen=True)
class Counterparty:
    """Supplier or customer domain entity, used for filtering only."""

    id: int
    name: str
    active: bool = True
    document: Optional[str] = None


@dataclass(frozen=True)
class LedgerEntry:
    """Ledger entry domain entity.

    The amount is never negative; its sign is implied by ``kind``.
    """

    derived: ClassVar[tuple[str, ...]] = ("signed_amount", "installment_label")

    id: int
    kind: EntryKind
    amount: Decimal
    due_date: date
    status: EntryStatus
    settled_date: Optional[date] = None
    account_id: Optional[int] = None
    category_id: Optional[int] = None
    cost_center_id: Optional[int] = None
    counterparty_id: Optional[int] = None
    description: Optional[str] = None
    document_number: Optional[str] = None
    notes: Optional[str] = None
    installment_number: Optional[int] = None
    installment_count: Optional[int] = None
    recurring: bool = False
    created_at: Optional[datetime] = None

    @property
    def is_inflow(self) -> bool:
        return self.kind == EntryKind.INFLOW

    @property
    def is_outflow(self) -> bool:
        return self.kind == EntryKind.OUTFLOW

    @property
    def is_settled(self) -> bool:
        return self.status == EntryStatus.SETTLED

    @property
    def is_pending(self) -> bool:
        return self.status == EntryStatus.PENDING

    @property
    def is_canceled(self) -> bool:
        return self.status == EntryStatus.CANCELED

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the entry kind."""
        return self.amount if self.is_inflow else -self.amount

    @property
    def installment_label(self) -> Optional[str]:
        """Installment label such as "2/10", if the entry is an installment."""
        if self.installment_number is None or self.installment_count is None:
            return None
        return f"{self.installment_number}/{self.installment_count}"


@dataclass(frozen=True)
class LedgerSnapshot:
    """One consistent read of the store used for a rendering pass."""

    entries: tuple[LedgerEntry, ...]
    accounts: tuple[Account, ...]
    categories: tuple[Category, ...]

    def account_index(self) -> dict[int, Account]:
        return {account.id: account for account in self.accounts}

    def category_index(self) -> dict[int, Category]:
        return {category.id: category for category in self.categories}


# Derived views


@dataclass(frozen=True)
class AccountBalanceSnapshot:
    """Confirmed and projected balance of one account."""

    account_id: int
    account_name: str
    confirmed: Decimal
    projected: Decimal
    as_of: date


@dataclass(frozen=True)
class BalanceReport:
    """Per-account balances and their grand totals."""

    accounts: tuple[AccountBalanceSnapshot, ...]
    confirmed: Decimal
    projected: Decimal
    as_of: date
    skipped_entries: int = 0


@dataclass(frozen=True)
class CashFlowPoint:
    """Cash movement of a single calendar day."""

    date: date
    inflow_total: Decimal
    outflow_total: Decimal
    net_of_day: Decimal
    running_balance: Decimal


@dataclass(frozen=True)
class CashFlowSeries:
    """Gapless day-by-day cash-flow series over a date range."""

    derived: ClassVar[tuple[str, ...]] = ("closing_balance", "total_inflow", "total_outflow")

    range_start: date
    range_end: date
    opening_balance: Decimal
    points: tuple[CashFlowPoint, ...]

    @property
    def closing_balance(self) -> Decimal:
        if not self.points:
            return self.opening_balance
        return self.points[-1].running_balance

    @property
    def total_inflow(self) -> Decimal:
        return sum((p.inflow_total for p in self.points), ZERO)

    @property
    def total_outflow(self) -> Decimal:
        return sum((p.outflow_total for p in self.points), ZERO)


@dataclass(frozen=True)
class AgingEntry:
    """Pending entry with its distance to the due date.

    A negative ``days_overdue`` means the entry is not due yet.
    """

    derived: ClassVar[tuple[str, ...]] = ("label", "is_overdue", "is_due_today", "is_due_soon")

    entry: LedgerEntry
    days_overdue: int
    due_soon_days: int = 7

    @property
    def is_overdue(self) -> bool:
        return self.days_overdue > 0

    @property
    def is_due_today(self) -> bool:
        return self.days_overdue == 0

    @property
    def is_due_soon(self) -> bool:
        return -self.due_soon_days <= self.days_overdue < 0

    @property
    def label(self) -> Optional[str]:
        if self.is_overdue:
            return f"{self.days_overdue}d overdue"
        if self.is_due_today:
            return "due today"
        if self.is_due_soon:
            return f"{-self.days_overdue}d left"
        return None


@dataclass(frozen=True)
class AgingReport:
    """Pending entries of one kind split into overdue and upcoming."""

    kind: EntryKind
    as_of: date
    overdue: tuple[AgingEntry, ...]
    upcoming: tuple[AgingEntry, ...]
    total_overdue: Decimal
    total_due_today: Decimal
    total_upcoming: Decimal
    total_all: Decimal


@dataclass(frozen=True)
class CreditCardExposure:
    """Invoice-cycle exposure of a card account."""

    account_id: int
    account_name: str
    credit_limit: Decimal
    current_cycle_total: Decimal
    next_cycle_total: Decimal
    previous_cycle_total: Decimal
    scheduled_pending: Decimal
    available_limit: Decimal
    available_limit_after_payment: Decimal
    next_due_date: date


@dataclass(frozen=True)
class CategoryTotal:
    """Total of settled entries of one category within a statement line."""

    category_id: Optional[int]
    category_name: str
    total: Decimal
    bucket: DreBucket = DreBucket.NONE


@dataclass(frozen=True)
class IncomeStatement:
    """Seven-line classified income statement (DRE)."""

    period_start: Optional[date]
    period_end: Optional[date]
    gross_revenue: Decimal
    deductions: Decimal
    net_revenue: Decimal
    costs: Decimal
    gross_profit: Decimal
    operating_expenses: Decimal
    net_profit: Decimal
    revenue_by_category: tuple[CategoryTotal, ...] = ()
    expenses_by_category: tuple[CategoryTotal, ...] = ()

    def lines(self) -> list[tuple[str, Decimal]]:
        """Statement lines in presentation order."""
        return [
            ("Gross revenue", self.gross_revenue),
            ("(-) Deductions", self.deductions),
            ("= Net revenue", self.net_revenue),
            ("(-) Costs", self.costs),
            ("= Gross profit", self.gross_profit),
            ("(-) Operating expenses", self.operating_expenses),
            ("= Net profit", self.net_profit),
        ]


@dataclass(frozen=True)
class StatementLine:
    """Entry of an account statement with the balance after it."""

    entry: LedgerEntry
    running_balance: Decimal


@dataclass(frozen=True)
class StatementSummary:
    """Settled totals and pending count of a statement."""

    inflows: Decimal
    outflows: Decimal
    net: Decimal
    pending_count: int


@dataclass(frozen=True)
class ConsistencyReport:
    """Entries that violate referential or status invariants."""

    derived: ClassVar[tuple[str, ...]] = ("ok", "issue_count")

    missing_accounts: tuple[int, ...] = ()
    missing_categories: tuple[int, ...] = ()
    settled_without_date: tuple[int, ...] = ()
    kind_mismatches: tuple[int, ...] = ()
    issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not (
            self.missing_accounts
            or self.missing_categories
            or self.settled_without_date
            or self.kind_mismatches
        )

    @property
    def issue_count(self) -> int:
        return (
            len(self.missing_accounts)
            + len(self.missing_categories)
            + len(self.settled_without_date)
            + len(self.kind_mismatches)
        )
