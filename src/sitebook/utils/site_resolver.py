"""Utility for resolving site names to IDs."""

from sitebook.domain.errors import NotFoundError, site_name_not_found, site_not_found
from sitebook.domain.site import SiteService


def resolve_site(site_service: SiteService, site: str | int) -> int:
    """Resolve site name or ID to site ID.

    Args:
        site_service: SiteService instance
        site: Site name (str) or ID (int or string representation of int)

    Returns:
        Site ID

    Raises:
        NotFoundError: If site is not found
    """
    if isinstance(site, int):
        site_id = site
    else:
        # A site literally named "12" still wins over site ID 12
        by_name = site_service.get_site_by_name(site.strip())
        if by_name is not None:
            return by_name.id
        try:
            site_id = int(site)
        except ValueError:
            raise NotFoundError(site_name_not_found(site))

    if site_service.get_site(site_id) is None:
        raise NotFoundError(site_not_found(site_id))
    return site_id
