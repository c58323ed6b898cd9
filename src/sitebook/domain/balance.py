"""Balance domain service.

Loads one site's records through the database and hands them to the ledger
aggregator. This is the only place balances are computed, so every view
uses the same formula.
"""

from datetime import date
from typing import Optional

from sitebook.database.base import Database
from sitebook.domain.entities import BalanceSummary, DashboardOverview
from sitebook.domain.ledger import (
    ZERO,
    compute_balance_summary,
    supervisor_invoices,
    to_amount,
)
from sitebook.domain.site import ensure_site_exists
from sitebook.logging_utils import get_logger

logger = get_logger(__name__)


class BalanceService:
    """Service for site balance summaries and the dashboard overview."""

    def __init__(self, db: Database):
        """Initialize balance service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_site_balance(
        self,
        site_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> BalanceSummary:
        """Compute the balance summary for a site.

        Args:
            site_id: Site ID
            start_date: Optional start date; records before it are ignored
            end_date: Optional end date; records after it are ignored

        Returns:
            BalanceSummary for the site

        Raises:
            NotFoundError: If the site doesn't exist
            InvalidAmountError: If a stored amount is invalid
        """
        ensure_site_exists(self.db, site_id)
        window = {"site_id": site_id, "start_date": start_date, "end_date": end_date}

        expenses = self.db.list_expenses(**window)
        advances = self.db.list_advances(**window)
        funds = self.db.list_funds_received(**window)
        invoices = self.db.list_invoices(**window)

        summary = compute_balance_summary(
            expenses=expenses,
            advances=advances,
            funds_received=funds,
            supervisor_approved_invoices=supervisor_invoices(invoices),
        )
        logger.debug("Balance for site %s: %s", site_id, summary)
        return summary

    def get_overview(self) -> DashboardOverview:
        """Build dashboard totals across all sites."""
        sites = self.db.list_sites()
        completed = sum(1 for site in sites if site.is_completed)
        total_funds = sum((to_amount(site.total_funds) for site in sites), ZERO)
        total_expenses = sum(
            (to_amount(expense.amount) for expense in self.db.list_expenses()), ZERO
        )
        return DashboardOverview(
            total_sites=len(sites),
            active_sites=len(sites) - completed,
            completed_sites=completed,
            total_funds_allocated=total_funds,
            total_expenses=total_expenses,
        )
