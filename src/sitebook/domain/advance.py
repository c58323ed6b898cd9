"""Advance domain service."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, TypeVar

from sitebook.database.base import Database
from sitebook.domain.classifier import classify_advance, classify_purpose
from sitebook.domain.entities import (
    Advance as AdvanceEntity,
    AdvanceClass,
    AdvancePurpose,
    RecipientType,
)
from sitebook.domain.errors import (
    NotFoundError,
    UnknownPurposeError,
    ValidationError,
    record_not_found,
    unknown_purpose,
)
from sitebook.domain.ledger import to_stored_amount
from sitebook.domain.site import ensure_site_exists
from sitebook.logging_utils import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def _lookup(enum_type: type[E], value: E | str) -> Optional[E]:
    if isinstance(value, enum_type):
        return value
    wanted = str(value).strip().replace("-", "_").replace(" ", "_").upper()
    for member in enum_type:
        if wanted in (member.name, member.value.replace(" ", "_").upper()):
            return member
    return None


def parse_purpose(purpose: AdvancePurpose | str) -> AdvancePurpose:
    """Resolve an advance purpose ('Safety Shoes', 'safety-shoes', ...).

    Raises:
        UnknownPurposeError: If no purpose matches
    """
    member = _lookup(AdvancePurpose, purpose)
    if member is None:
        raise UnknownPurposeError(unknown_purpose(purpose))
    return member


def parse_recipient_type(recipient_type: RecipientType | str) -> RecipientType:
    """Resolve a recipient type.

    Raises:
        ValidationError: If no recipient type matches
    """
    member = _lookup(RecipientType, recipient_type)
    if member is None:
        raise ValidationError(f"Unknown recipient type '{recipient_type}'")
    return member


class AdvanceService:
    """Service for managing advances and worker debits."""

    def __init__(self, db: Database):
        """Initialize advance service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_advance(
        self,
        site_id: int,
        date: date,
        amount: Decimal,
        purpose: AdvancePurpose | str,
        recipient_type: RecipientType | str,
        recipient_name: str,
        remarks: Optional[str] = None,
    ) -> int:
        """Record an advance against a site.

        Args:
            site_id: Site ID
            date: Date handed out
            amount: Amount, non-negative
            purpose: Advance purpose; decides whether it counts against balance
            recipient_type: Who received it
            recipient_name: Recipient name
            remarks: Optional remarks

        Returns:
            Advance ID

        Raises:
            NotFoundError: If the site doesn't exist
            InvalidAmountError: If the amount is negative, not a number, or has
                more than two decimal places
            UnknownPurposeError: If the purpose is unknown or unclassified
            ValidationError: If the recipient is missing or of unknown type
        """
        ensure_site_exists(self.db, site_id)
        purpose = parse_purpose(purpose)
        advance_class = classify_purpose(purpose)
        if not recipient_name or not recipient_name.strip():
            raise ValidationError("Recipient name must not be empty")

        advance_id = self.db.create_advance(
            site_id=site_id,
            date=date,
            amount=to_stored_amount(amount),
            purpose=purpose,
            recipient_type=parse_recipient_type(recipient_type),
            recipient_name=recipient_name.strip(),
            remarks=remarks,
        )
        logger.info(
            "Added advance %s (%s) to site %s", advance_id, advance_class.value, site_id
        )
        return advance_id

    def get_advance(self, advance_id: int) -> Optional[AdvanceEntity]:
        """Get advance by ID, or None if not found."""
        return self.db.get_advance(advance_id)

    def list_advances(
        self,
        site_id: Optional[int] = None,
        advance_class: Optional[AdvanceClass] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[AdvanceEntity]:
        """List advances, newest first.

        Args:
            site_id: Optional site filter
            advance_class: Only money advances or only worker debits
            start_date: Optional start date filter
            end_date: Optional end date filter
        """
        advances = self.db.list_advances(site_id=site_id, start_date=start_date, end_date=end_date)
        if advance_class is None:
            return advances
        return [adv for adv in advances if classify_advance(adv) is advance_class]

    def delete_advance(self, advance_id: int) -> None:
        """Delete an advance.

        Raises:
            NotFoundError: If the advance doesn't exist
        """
        if self.db.get_advance(advance_id) is None:
            raise NotFoundError(record_not_found("Advance", advance_id))
        self.db.delete_advance(advance_id)
        logger.info("Deleted advance %s", advance_id)
