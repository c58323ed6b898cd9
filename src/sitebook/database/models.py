"""SQLAlchemy models for sitebook database."""

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
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(12, 2)


class Site(Base):
    """Construction site model."""

    __tablename__ = "sites"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    job_name = Column(String, nullable=True)
    pos_no = Column(String, nullable=True)
    location = Column(String, nullable=True)
    start_date = Column(Date, nullable=False)
    completion_date = Column(Date, nullable=True)
    is_completed = Column(Boolean, default=False, nullable=False)
    total_funds = Column(MONEY, default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    expenses = relationship("Expense", back_populates="site")
    advances = relationship("Advance", back_populates="site")
    funds_received = relationship("FundsReceived", back_populates="site")
    invoices = relationship("Invoice", back_populates="site")


class Expense(Base):
    """Site expense model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    site_id = Column(Integer, ForeignKey("sites.id"), nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(MONEY, nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    site = relationship("Site", back_populates="expenses")


class Advance(Base):
    """Advance model."""

    __tablename__ = "advances"

    id = Column(Integer, primary_key=True)
    site_id = Column(Integer, ForeignKey("sites.id"), nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(MONEY, nullable=False)
    purpose = Column(String, nullable=False)
    recipient_type = Column(String, nullable=False)
    recipient_name = Column(String, nullable=False)
    remarks = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    site = relationship("Site", back_populates="advances")


class FundsReceived(Base):
    """Funds received from head office."""

    __tablename__ = "funds_received"

    id = Column(Integer, primary_key=True)
    site_id = Column(Integer, ForeignKey("sites.id"), nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(MONEY, nullable=False)
    reference = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    site = relationship("Site", back_populates="funds_received")


class Invoice(Base):
    """Site invoice model."""

    __tablename__ = "site_invoices"

    id = Column(Integer, primary_key=True)
    site_id = Column(Integer, ForeignKey("sites.id"), nullable=False)
    date = Column(Date, nullable=False)
    party_id = Column(String, nullable=True)
    party_name = Column(String, nullable=False)
    material = Column(String, nullable=True)
    quantity = Column(Numeric(12, 3), default=0, nullable=False)
    rate = Column(MONEY, default=0, nullable=False)
    gst_percentage = Column(Numeric(5, 2), default=0, nullable=False)
    gross_amount = Column(MONEY, nullable=False)
    net_amount = Column(MONEY, nullable=False)
    approver_type = Column(String, nullable=True)
    payment_status = Column(String, default="pending", nullable=False)
    bill_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    site = relationship("Site", back_populates="invoices")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
