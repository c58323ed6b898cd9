"""Expense domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sitebook.database.base import Database
from sitebook.domain.entities import Expense as ExpenseEntity, ExpenseCategory
from sitebook.domain.errors import NotFoundError, ValidationError, record_not_found
from sitebook.domain.ledger import to_stored_amount
from sitebook.domain.site import ensure_site_exists
from sitebook.logging_utils import get_logger

logger = get_logger(__name__)


def parse_category(category: ExpenseCategory | str) -> ExpenseCategory:
    """Resolve a category by value or member name, case-insensitively.

    Raises:
        ValidationError: If no category matches
    """
    if isinstance(category, ExpenseCategory):
        return category
    wanted = category.strip().upper()
    for member in ExpenseCategory:
        if wanted in (member.value.upper(), member.name):
            return member
    raise ValidationError(f"Unknown expense category '{category}'")


class ExpenseService:
    """Service for managing site expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_expense(
        self,
        site_id: int,
        date: date,
        amount: Decimal,
        category: ExpenseCategory | str,
        description: Optional[str] = None,
    ) -> int:
        """Record an expense against a site.

        Args:
            site_id: Site ID
            date: Expense date
            amount: Amount paid, non-negative
            category: Expense category
            description: Optional description

        Returns:
            Expense ID

        Raises:
            NotFoundError: If the site doesn't exist
            InvalidAmountError: If the amount is negative, not a number, or has
                more than two decimal places
            ValidationError: If the category is unknown
        """
        ensure_site_exists(self.db, site_id)
        expense_id = self.db.create_expense(
            site_id=site_id,
            date=date,
            amount=to_stored_amount(amount),
            category=parse_category(category),
            description=description,
        )
        logger.info("Added expense %s to site %s", expense_id, site_id)
        return expense_id

    def get_expense(self, expense_id: int) -> Optional[ExpenseEntity]:
        """Get expense by ID, or None if not found."""
        return self.db.get_expense(expense_id)

    def list_expenses(
        self,
        site_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ExpenseEntity]:
        """List expenses, newest first, optionally for one site and date range."""
        return self.db.list_expenses(site_id=site_id, start_date=start_date, end_date=end_date)

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense doesn't exist
        """
        if self.db.get_expense(expense_id) is None:
            raise NotFoundError(record_not_found("Expense", expense_id))
        self.db.delete_expense(expense_id)
        logger.info("Deleted expense %s", expense_id)
