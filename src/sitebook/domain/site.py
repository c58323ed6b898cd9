"""Site domain service."""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from sitebook.database.base import Database
from sitebook.domain.entities import Site as SiteEntity
from sitebook.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    completion_before_start,
    duplicate_site_name,
    site_delete_blocked,
    site_not_found,
)
from sitebook.domain.ledger import to_stored_amount
from sitebook.logging_utils import get_logger

logger = get_logger(__name__)


def ensure_site_exists(db: Database, site_id: int) -> SiteEntity:
    """Return the site, raising NotFoundError if it does not exist."""
    site = db.get_site(site_id)
    if site is None:
        raise NotFoundError(site_not_found(site_id))
    return site


class SiteService:
    """Service for managing construction sites."""

    def __init__(self, db: Database):
        """Initialize site service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_site(
        self,
        name: str,
        start_date: date,
        job_name: Optional[str] = None,
        pos_no: Optional[str] = None,
        location: Optional[str] = None,
        total_funds: Decimal = Decimal("0"),
    ) -> int:
        """Create a new site.

        Args:
            name: Site name, unique across sites
            start_date: Date work started
            job_name: Optional job name
            pos_no: Optional purchase order number
            location: Optional location
            total_funds: Funds allocated to the site

        Returns:
            Site ID

        Raises:
            ValidationError: If the name is empty or funds are invalid
            ConflictError: If a site with the same name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Site name must not be empty")
        if self.db.get_site_by_name(name) is not None:
            raise ConflictError(duplicate_site_name(name))

        site_id = self.db.create_site(
            name=name,
            start_date=start_date,
            job_name=job_name,
            pos_no=pos_no,
            location=location,
            total_funds=to_stored_amount(total_funds),
        )
        logger.info("Created site %s (%s)", site_id, name)
        return site_id

    def get_site(self, site_id: int) -> Optional[SiteEntity]:
        """Get site by ID, or None if not found."""
        return self.db.get_site(site_id)

    def require_site(self, site_id: int) -> SiteEntity:
        """Get site by ID.

        Raises:
            NotFoundError: If the site does not exist
        """
        return ensure_site_exists(self.db, site_id)

    def get_site_by_name(self, name: str) -> Optional[SiteEntity]:
        """Get site by name, or None if not found."""
        return self.db.get_site_by_name(name)

    def list_sites(self, include_completed: bool = True) -> list[SiteEntity]:
        """List sites, newest first.

        Args:
            include_completed: If False, only sites still in progress
        """
        sites = self.db.list_sites()
        if include_completed:
            return sites
        return [site for site in sites if not site.is_completed]

    def update_site(self, site_id: int, **fields: Any) -> None:
        """Update site fields.

        Only the keyword arguments given are changed. ``None`` values are
        ignored except for ``completion_date``, which may be cleared.

        Raises:
            NotFoundError: If the site does not exist
            ValidationError: If a value is invalid
            ConflictError: If the new name is already used
        """
        site = self.require_site(site_id)
        changes = {
            key: value
            for key, value in fields.items()
            if value is not None or key == "completion_date"
        }
        if not changes:
            return

        if "name" in changes:
            changes["name"] = changes["name"].strip()
            if not changes["name"]:
                raise ValidationError("Site name must not be empty")
        if "total_funds" in changes:
            changes["total_funds"] = to_stored_amount(changes["total_funds"])

        start = changes.get("start_date", site.start_date)
        completion = changes.get("completion_date", site.completion_date)
        if completion is not None and completion < start:
            raise ValidationError(completion_before_start(completion, start))

        self.db.update_site(site_id, changes)
        logger.info("Updated site %s: %s", site_id, ", ".join(sorted(changes)))

    def complete_site(self, site_id: int, completion_date: date) -> None:
        """Mark a site as completed on the given date.

        Raises:
            NotFoundError: If the site does not exist
            ValidationError: If completion precedes the start date
        """
        site = self.require_site(site_id)
        if completion_date < site.start_date:
            raise ValidationError(completion_before_start(completion_date, site.start_date))
        self.db.update_site(
            site_id, {"is_completed": True, "completion_date": completion_date}
        )
        logger.info("Site %s completed on %s", site_id, completion_date)

    def delete_site(self, site_id: int) -> None:
        """Delete a site with no recorded transactions.

        Raises:
            NotFoundError: If the site does not exist
            DependencyError: If expenses, advances, funds or invoices exist
        """
        self.require_site(site_id)
        counts = self.db.get_site_record_counts(site_id)
        if any(counts.values()):
            raise DependencyError(site_delete_blocked(site_id, counts))
        self.db.delete_site(site_id)
        logger.info("Deleted site %s", site_id)
