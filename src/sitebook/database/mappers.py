"""Mapper functions to convert between domain models and SQLAlchemy models.

Stored enum columns are plain strings; this is the only place they are
turned back into domain enumerations. An invoice without an approver is
treated as approved by head office.
"""

from decimal import Decimal

from sitebook.domain import entities as domain
from sitebook.domain.classifier import classify_purpose
from sitebook.database.models import (
    Site as ORMSite,
    Expense as ORMExpense,
    Advance as ORMAdvance,
    FundsReceived as ORMFundsReceived,
    Invoice as ORMInvoice,
)


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value or 0))


def site_to_domain(orm_site: ORMSite) -> domain.Site:
    """Convert SQLAlchemy Site model to domain Site entity."""
    return domain.Site(
        id=orm_site.id,
        name=orm_site.name,
        job_name=orm_site.job_name,
        pos_no=orm_site.pos_no,
        location=orm_site.location,
        start_date=orm_site.start_date,
        completion_date=orm_site.completion_date,
        is_completed=bool(orm_site.is_completed),
        total_funds=_decimal(orm_site.total_funds),
        created_at=orm_site.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        site_id=orm_expense.site_id,
        date=orm_expense.date,
        amount=_decimal(orm_expense.amount),
        category=domain.ExpenseCategory(orm_expense.category),
        description=orm_expense.description,
        created_at=orm_expense.created_at,
    )


def advance_to_domain(orm_advance: ORMAdvance) -> domain.Advance:
    """Convert SQLAlchemy Advance model to domain Advance entity.

    Raises:
        UnknownPurposeError: If the stored purpose has no classification
    """
    # Unclassifiable rows must not vanish from both totals
    classify_purpose(orm_advance.purpose)
    return domain.Advance(
        id=orm_advance.id,
        site_id=orm_advance.site_id,
        date=orm_advance.date,
        amount=_decimal(orm_advance.amount),
        purpose=domain.AdvancePurpose(orm_advance.purpose),
        recipient_type=domain.RecipientType(orm_advance.recipient_type),
        recipient_name=orm_advance.recipient_name,
        remarks=orm_advance.remarks,
        created_at=orm_advance.created_at,
    )


def funds_received_to_domain(orm_funds: ORMFundsReceived) -> domain.FundsReceived:
    """Convert SQLAlchemy FundsReceived model to domain FundsReceived entity."""
    return domain.FundsReceived(
        id=orm_funds.id,
        site_id=orm_funds.site_id,
        date=orm_funds.date,
        amount=_decimal(orm_funds.amount),
        reference=orm_funds.reference,
        created_at=orm_funds.created_at,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        site_id=orm_invoice.site_id,
        date=orm_invoice.date,
        party_id=orm_invoice.party_id,
        party_name=orm_invoice.party_name,
        material=orm_invoice.material,
        quantity=_decimal(orm_invoice.quantity),
        rate=_decimal(orm_invoice.rate),
        gst_percentage=_decimal(orm_invoice.gst_percentage),
        gross_amount=_decimal(orm_invoice.gross_amount),
        net_amount=_decimal(orm_invoice.net_amount),
        approver_type=domain.ApproverType(orm_invoice.approver_type or domain.ApproverType.HO.value),
        payment_status=domain.PaymentStatus(orm_invoice.payment_status),
        bill_url=orm_invoice.bill_url,
        created_at=orm_invoice.created_at,
    )
