"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from sitebook.domain.entities import (
    Site,
    Expense,
    Advance,
    FundsReceived,
    Invoice,
    ExpenseCategory,
    AdvancePurpose,
    RecipientType,
    ApproverType,
    PaymentStatus,
)


class Database(ABC):
    """Abstract database interface for sitebook.

    ``list_*`` record queries return rows ordered by date, newest first. The
    balance logic does not depend on that ordering.
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

    # Site operations
    @abstractmethod
    def create_site(
        self,
        name: str,
        start_date: date,
        job_name: Optional[str] = None,
        pos_no: Optional[str] = None,
        location: Optional[str] = None,
        total_funds: Decimal = Decimal("0"),
    ) -> int:
        """Create a new site. Returns site ID."""
        pass

    @abstractmethod
    def get_site(self, site_id: int) -> Optional[Site]:
        """Get site by ID."""
        pass

    @abstractmethod
    def get_site_by_name(self, name: str) -> Optional[Site]:
        """Get site by name."""
        pass

    @abstractmethod
    def list_sites(self) -> list[Site]:
        """List all sites, newest first."""
        pass

    @abstractmethod
    def update_site(self, site_id: int, fields: dict[str, Any]) -> None:
        """Update the given site columns."""
        pass

    @abstractmethod
    def delete_site(self, site_id: int) -> None:
        """Delete a site."""
        pass

    @abstractmethod
    def get_site_record_counts(self, site_id: int) -> dict[str, int]:
        """Count records attached to a site, keyed by record kind."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        site_id: int,
        date: date,
        amount: Decimal,
        category: ExpenseCategory,
        description: Optional[str] = None,
    ) -> int:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(
        self,
        site_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Expense]:
        """List expenses with optional filters."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense."""
        pass

    # Advance operations
    @abstractmethod
    def create_advance(
        self,
        site_id: int,
        date: date,
        amount: Decimal,
        purpose: AdvancePurpose,
        recipient_type: RecipientType,
        recipient_name: str,
        remarks: Optional[str] = None,
    ) -> int:
        """Create an advance. Returns advance ID."""
        pass

    @abstractmethod
    def get_advance(self, advance_id: int) -> Optional[Advance]:
        """Get advance by ID."""
        pass

    @abstractmethod
    def list_advances(
        self,
        site_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Advance]:
        """List advances with optional filters."""
        pass

    @abstractmethod
    def delete_advance(self, advance_id: int) -> None:
        """Delete an advance."""
        pass

    # Funds received operations
    @abstractmethod
    def create_funds_received(
        self,
        site_id: int,
        date: date,
        amount: Decimal,
        reference: Optional[str] = None,
    ) -> int:
        """Record funds received. Returns entry ID."""
        pass

    @abstractmethod
    def get_funds_received(self, funds_id: int) -> Optional[FundsReceived]:
        """Get funds received entry by ID."""
        pass

    @abstractmethod
    def list_funds_received(
        self,
        site_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[FundsReceived]:
        """List funds received with optional filters."""
        pass

    @abstractmethod
    def delete_funds_received(self, funds_id: int) -> None:
        """Delete a funds received entry."""
        pass

    # Invoice operations
    @abstractmethod
    def create_invoice(
        self,
        site_id: int,
        date: date,
        party_name: str,
        gross_amount: Decimal,
        net_amount: Decimal,
        approver_type: ApproverType,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        party_id: Optional[str] = None,
        material: Optional[str] = None,
        quantity: Decimal = Decimal("0"),
        rate: Decimal = Decimal("0"),
        gst_percentage: Decimal = Decimal("0"),
        bill_url: Optional[str] = None,
    ) -> int:
        """Create an invoice. Returns invoice ID."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def list_invoices(
        self,
        site_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Invoice]:
        """List invoices with optional filters."""
        pass

    @abstractmethod
    def update_invoice_payment_status(self, invoice_id: int, status: PaymentStatus) -> None:
        """Update invoice payment status."""
        pass

    @abstractmethod
    def delete_invoice(self, invoice_id: int) -> None:
        """Delete an invoice."""
        pass
