"""Invoice domain service."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from sitebook.database.base import Database
from sitebook.domain.entities import (
    ApproverType,
    Invoice as InvoiceEntity,
    PaymentStatus,
)
from sitebook.domain.errors import (
    NotFoundError,
    ValidationError,
    record_not_found,
)
from sitebook.domain.ledger import to_amount, to_stored_amount
from sitebook.domain.site import ensure_site_exists
from sitebook.logging_utils import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def calculate_invoice_amounts(
    quantity: Decimal, rate: Decimal, gst_percentage: Decimal
) -> tuple[Decimal, Decimal]:
    """Return (gross, net) for an invoice line.

    Gross is quantity x rate; net adds GST. Both are rounded half-up to
    two decimal places.
    """
    gross = (to_amount(quantity) * to_amount(rate)).quantize(CENT, rounding=ROUND_HALF_UP)
    gst = to_amount(gst_percentage)
    net = (gross * (1 + gst / HUNDRED)).quantize(CENT, rounding=ROUND_HALF_UP)
    return gross, net


def parse_approver_type(approver_type: ApproverType | str | None) -> ApproverType:
    """Resolve approver type; missing values mean head office.

    Raises:
        ValidationError: If the value is not 'ho' or 'supervisor'
    """
    if approver_type is None or approver_type == "":
        return ApproverType.HO
    try:
        return ApproverType(str(getattr(approver_type, "value", approver_type)).strip().lower())
    except ValueError as e:
        raise ValidationError(f"Unknown approver type '{approver_type}'") from e


def parse_payment_status(status: PaymentStatus | str) -> PaymentStatus:
    """Resolve payment status.

    Raises:
        ValidationError: If the value is not 'pending' or 'paid'
    """
    try:
        return PaymentStatus(str(getattr(status, "value", status)).strip().lower())
    except ValueError as e:
        raise ValidationError(f"Unknown payment status '{status}'") from e


class InvoiceService:
    """Service for managing site invoices."""

    def __init__(self, db: Database):
        """Initialize invoice service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_invoice(
        self,
        site_id: int,
        date: date,
        party_name: str,
        approver_type: ApproverType | str | None = None,
        payment_status: PaymentStatus | str = PaymentStatus.PENDING,
        party_id: Optional[str] = None,
        material: Optional[str] = None,
        quantity: Decimal = Decimal("0"),
        rate: Decimal = Decimal("0"),
        gst_percentage: Decimal = Decimal("0"),
        gross_amount: Optional[Decimal] = None,
        net_amount: Optional[Decimal] = None,
        bill_url: Optional[str] = None,
    ) -> int:
        """Record an invoice against a site.

        When ``gross_amount`` or ``net_amount`` are not given they are
        calculated from quantity, rate and GST percentage.

        Args:
            site_id: Site ID
            date: Invoice date
            party_name: Supplier name
            approver_type: 'ho' or 'supervisor'; defaults to head office
            payment_status: 'pending' or 'paid'
            party_id: Optional supplier invoice number
            material: Optional material description
            quantity: Quantity supplied
            rate: Rate per unit
            gst_percentage: GST percentage
            gross_amount: Optional gross amount override
            net_amount: Optional net amount override
            bill_url: Optional link to the scanned bill

        Returns:
            Invoice ID

        Raises:
            NotFoundError: If the site doesn't exist
            InvalidAmountError: If any amount is negative, not a number, or
                does not fit its column exactly
            ValidationError: If party name, approver or status are invalid
        """
        ensure_site_exists(self.db, site_id)
        if not party_name or not party_name.strip():
            raise ValidationError("Party name must not be empty")

        quantity = to_stored_amount(quantity, places=3, integer_digits=9)
        rate = to_stored_amount(rate)
        gst_percentage = to_stored_amount(gst_percentage, integer_digits=3)
        calculated_gross, calculated_net = calculate_invoice_amounts(
            quantity, rate, gst_percentage
        )
        gross = to_stored_amount(calculated_gross if gross_amount is None else gross_amount)
        net = to_stored_amount(calculated_net if net_amount is None else net_amount)
        approver = parse_approver_type(approver_type)

        invoice_id = self.db.create_invoice(
            site_id=site_id,
            date=date,
            party_name=party_name.strip(),
            gross_amount=gross,
            net_amount=net,
            approver_type=approver,
            payment_status=parse_payment_status(payment_status),
            party_id=party_id,
            material=material,
            quantity=quantity,
            rate=rate,
            gst_percentage=gst_percentage,
            bill_url=bill_url,
        )
        logger.info(
            "Added invoice %s (%s, net %s) to site %s",
            invoice_id,
            approver.value,
            net,
            site_id,
        )
        return invoice_id

    def get_invoice(self, invoice_id: int) -> Optional[InvoiceEntity]:
        """Get invoice by ID, or None if not found."""
        return self.db.get_invoice(invoice_id)

    def list_invoices(
        self,
        site_id: Optional[int] = None,
        approver_type: Optional[ApproverType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[InvoiceEntity]:
        """List invoices, newest first, optionally filtered by approver."""
        invoices = self.db.list_invoices(site_id=site_id, start_date=start_date, end_date=end_date)
        if approver_type is None:
            return invoices
        return [inv for inv in invoices if inv.approver_type == approver_type]

    def set_payment_status(self, invoice_id: int, status: PaymentStatus | str) -> None:
        """Change invoice payment status.

        Raises:
            NotFoundError: If the invoice doesn't exist
            ValidationError: If the status is unknown
        """
        if self.db.get_invoice(invoice_id) is None:
            raise NotFoundError(record_not_found("Invoice", invoice_id))
        new_status = parse_payment_status(status)
        self.db.update_invoice_payment_status(invoice_id, new_status)
        logger.info("Invoice %s marked %s", invoice_id, new_status.value)

    def mark_paid(self, invoice_id: int) -> None:
        """Mark an invoice as paid."""
        self.set_payment_status(invoice_id, PaymentStatus.PAID)

    def delete_invoice(self, invoice_id: int) -> None:
        """Delete an invoice.

        Raises:
            NotFoundError: If the invoice doesn't exist
        """
        if self.db.get_invoice(invoice_id) is None:
            raise NotFoundError(record_not_found("Invoice", invoice_id))
        self.db.delete_invoice(invoice_id)
        logger.info("Deleted invoice %s", invoice_id)
