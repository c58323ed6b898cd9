"""Domain model entities for sitebook.

These are pure data classes representing site finance concepts, independent
of the database schema. Enumerations are string-valued so the stored value
and the displayed value are the same thing.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class ExpenseCategory(str, Enum):
    """Expense categories recorded against a site."""

    MATERIAL = "Material"
    LABOR = "Labor"
    TRAVEL = "Travel"
    OFFICE = "Office"
    MISC = "Miscellaneous"
    TRANSPORT = "Transport"
    FOOD = "Food"
    ACCOMMODATION = "Accommodation"
    EQUIPMENT = "Equipment"
    MAINTENANCE = "Maintenance"
    STAFF_TRAVELLING = "STAFF TRAVELLING CHARGES"
    STATIONARY_PRINTING = "STATIONARY & PRINTING"
    DIESEL_FUEL = "DIESEL & FUEL CHARGES"
    LABOUR_TRAVELLING = "LABOUR TRAVELLING EXP."
    LODGING_BOARDING = "LOADGING & BOARDING FOR STAFF"
    LABOUR_FOOD = "FOOD CHARGES FOR LABOUR"
    SITE_EXPENSES = "SITE EXPENSES"
    LABOUR_ROOM_RENT = "ROOM RENT FOR LABOUR"


class AdvancePurpose(str, Enum):
    """Why an advance was handed out."""

    ADVANCE = "Advance"
    SAFETY_SHOES = "Safety Shoes"
    TOOLS = "Tools"
    OTHER = "Other"


class AdvanceClass(str, Enum):
    """Ledger class of an advance, derived from its purpose."""

    MONEY_ADVANCE = "money_advance"
    WORKER_DEBIT = "worker_debit"


class RecipientType(str, Enum):
    """Who received an advance."""

    WORKER = "worker"
    SUBCONTRACTOR = "subcontractor"
    SUPERVISOR = "supervisor"


class ApproverType(str, Enum):
    """Who approved (and paid) an invoice."""

    HO = "ho"
    SUPERVISOR = "supervisor"


class PaymentStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True)
class Site:
    """Construction site domain entity."""

    id: int
    name: str
    job_name: Optional[str]
    pos_no: Optional[str]
    location: Optional[str]
    start_date: date
    completion_date: Optional[date]
    is_completed: bool
    total_funds: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Expense:
    """Expense paid on behalf of a site."""

    id: int
    site_id: int
    date: date
    amount: Decimal
    category: ExpenseCategory
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Advance:
    """Advance handed to a worker, subcontractor or supervisor."""

    id: int
    site_id: int
    date: date
    amount: Decimal
    purpose: AdvancePurpose
    recipient_type: RecipientType
    recipient_name: str
    remarks: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class FundsReceived:
    """Funds received by a site from head office."""

    id: int
    site_id: int
    date: date
    amount: Decimal
    reference: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Invoice:
    """Supplier invoice booked against a site."""

    id: int
    site_id: int
    date: date
    party_id: Optional[str]
    party_name: str
    material: Optional[str]
    quantity: Decimal
    rate: Decimal
    gst_percentage: Decimal
    gross_amount: Decimal
    net_amount: Decimal
    approver_type: ApproverType
    payment_status: PaymentStatus
    bill_url: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class BalanceSummary:
    """Derived financial summary of one site.

    ``debits_to_worker`` and ``pending_invoices`` are informational and do not
    enter ``total_balance``.
    """

    funds_received: Decimal
    total_expenditure: Decimal
    total_advances: Decimal
    debits_to_worker: Decimal
    invoices_paid: Decimal
    pending_invoices: Decimal
    total_balance: Decimal


@dataclass(frozen=True)
class DashboardOverview:
    """Totals shown on the dashboard across all sites."""

    total_sites: int
    active_sites: int
    completed_sites: int
    total_funds_allocated: Decimal
    total_expenses: Decimal
