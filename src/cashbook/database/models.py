"""SQLAlchemy models for cashbook database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Bank or card account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    account_type = Column(String, nullable=False, default="ordinary")
    bank_name = Column(String, nullable=True)
    opening_balance = Column(Numeric(14, 2), nullable=False, default=0)
    opening_date = Column(Date, nullable=True)
    credit_limit = Column(Numeric(14, 2), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    entries = relationship("Entry", back_populates="account")


class Category(Base):
    """Inflow or outflow category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    kind = Column(String, nullable=False)
    color = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("name", "kind", name="uq_category_name_kind"),)

    # Relationships
    entries = relationship("Entry", back_populates="category")


class CostCenter(Base):
    """Cost center model."""

    __tablename__ = "cost_centers"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    active = Column(Boolean, default=True, nullable=False)


class Counterparty(Base):
    """Supplier or customer model."""

    __tablename__ = "counterparties"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    document = Column(String, nullable=True)
    active = Column(Boolean, default=True, nullable=False)


class Entry(Base):
    """Ledger entry model."""

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    kind = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    due_date = Column(Date, nullable=False)
    settled_date = Column(Date, nullable=True)
    status = Column(String, nullable=False, default="pending")
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    cost_center_id = Column(Integer, ForeignKey("cost_centers.id"), nullable=True)
    counterparty_id = Column(Integer, ForeignKey("counterparties.id"), nullable=True)
    description = Column(String, nullable=True)
    document_number = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    installment_number = Column(Integer, nullable=True)
    installment_count = Column(Integer, nullable=True)
    recurring = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_entries_due_date", "due_date"),)

    # Relationships
    account = relationship("Account", back_populates="entries")
    category = relationship("Category", back_populates="entries")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
