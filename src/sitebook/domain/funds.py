"""Funds received domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sitebook.database.base import Database
from sitebook.domain.entities import FundsReceived as FundsReceivedEntity
from sitebook.domain.errors import NotFoundError, record_not_found
from sitebook.domain.ledger import to_stored_amount
from sitebook.domain.site import ensure_site_exists
from sitebook.logging_utils import get_logger

logger = get_logger(__name__)


class FundsService:
    """Service for funds received from head office."""

    def __init__(self, db: Database):
        self.db = db

    def add_funds(
        self,
        site_id: int,
        date: date,
        amount: Decimal,
        reference: Optional[str] = None,
    ) -> int:
        """Record funds received by a site.

        Returns:
            Funds entry ID

        Raises:
            NotFoundError: If the site doesn't exist
            InvalidAmountError: If the amount is negative, not a number, or has
                more than two decimal places
        """
        ensure_site_exists(self.db, site_id)
        funds_id = self.db.create_funds_received(
            site_id=site_id, date=date, amount=to_stored_amount(amount), reference=reference
        )
        logger.info("Recorded funds %s for site %s", funds_id, site_id)
        return funds_id

    def get_funds(self, funds_id: int) -> Optional[FundsReceivedEntity]:
        return self.db.get_funds_received(funds_id)

    def list_funds(
        self,
        site_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[FundsReceivedEntity]:
        return self.db.list_funds_received(
            site_id=site_id, start_date=start_date, end_date=end_date
        )

    def delete_funds(self, funds_id: int) -> None:
        """Delete a funds received entry.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        if self.db.get_funds_received(funds_id) is None:
            raise NotFoundError(record_not_found("Funds entry", funds_id))
        self.db.delete_funds_received(funds_id)
        logger.info("Deleted funds entry %s", funds_id)
