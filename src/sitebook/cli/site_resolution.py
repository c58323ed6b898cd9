"""CLI helpers for site resolution and error handling."""

from __future__ import annotations

import click
from sitebook.cli.error_handling import handle_domain_error
from sitebook.domain.site import SiteService
from sitebook.utils.site_resolver import resolve_site


def resolve_site_or_exit(ctx: click.Context, site_service: SiteService, site: str | int) -> int:
    """Resolve site name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_site(site_service, site)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
