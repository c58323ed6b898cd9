"""Site management commands."""

import click
from sitebook.cli.date_filters import parse_date_or_exit
from sitebook.cli.error_handling import handle_domain_error
from sitebook.cli.site_resolution import resolve_site_or_exit
from sitebook.domain.site import SiteService
from sitebook.utils.amount_parser import parse_amount
from sitebook.utils.formatting import format_currency, format_date


def _parse_funds_or_exit(ctx, value: str):
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


@click.group()
def site_group():
    """Manage construction sites."""
    pass


@site_group.command("create")
@click.argument("name", metavar="SITE_NAME")
@click.option("--start-date", default="today", show_default=True, help="Date work started")
@click.option("--job", "job_name", help="Job name")
@click.option("--po", "pos_no", help="Purchase order number")
@click.option("--location", help="Site location")
@click.option("--funds", default="0", help="Funds allocated to the site")
@click.pass_context
def create_site(
    ctx,
    name: str,
    start_date: str,
    job_name: str | None,
    pos_no: str | None,
    location: str | None,
    funds: str,
):
    """Create a new site.

    Examples:
        sitebook site create "Tower B" --job "Foundation" --po PO-114 --start-date 2024-04-01
        sitebook site create "Warehouse" --funds 500000
    """
    db = ctx.obj["db"]
    service = SiteService(db)

    start = parse_date_or_exit(ctx, start_date, "start date")
    total_funds = _parse_funds_or_exit(ctx, funds)

    try:
        site_id = service.create_site(
            name=name,
            start_date=start,
            job_name=job_name,
            pos_no=pos_no,
            location=location,
            total_funds=total_funds,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created site '{name}' (ID: {site_id})")


@site_group.command("list")
@click.option("--active", is_flag=True, help="Only sites still in progress")
@click.pass_context
def list_sites(ctx, active: bool):
    """List sites."""
    db = ctx.obj["db"]
    service = SiteService(db)

    sites = service.list_sites(include_completed=not active)
    if not sites:
        click.echo("No sites found.")
        return

    click.echo("\nSites:")
    click.echo("-" * 80)
    for site in sites:
        status = "Completed" if site.is_completed else "In Progress"
        click.echo(
            f"ID: {site.id:3d} | {site.name:20s} | {(site.job_name or ''):20s} | "
            f"{format_date(site.start_date)} | {status}"
        )


@site_group.command("show")
@click.argument("site", metavar="SITE")
@click.pass_context
def show_site(ctx, site: str):
    """Show site details.

    SITE can be a site name or ID.
    """
    db = ctx.obj["db"]
    service = SiteService(db)
    site_id = resolve_site_or_exit(ctx, service, site)
    site_obj = service.require_site(site_id)

    click.echo(f"{site_obj.name} (ID: {site_obj.id})")
    click.echo(f"  Job:             {site_obj.job_name or '-'}")
    click.echo(f"  P.O. Number:     {site_obj.pos_no or '-'}")
    click.echo(f"  Location:        {site_obj.location or '-'}")
    click.echo(f"  Start Date:      {format_date(site_obj.start_date)}")
    if site_obj.completion_date:
        click.echo(f"  Completion Date: {format_date(site_obj.completion_date)}")
    click.echo(f"  Funds Allocated: {format_currency(site_obj.total_funds)}")
    click.echo(f"  Status:          {'Completed' if site_obj.is_completed else 'In Progress'}")


@site_group.command("update")
@click.argument("site", metavar="SITE")
@click.option("--name", help="New site name")
@click.option("--job", "job_name", help="New job name")
@click.option("--po", "pos_no", help="New purchase order number")
@click.option("--location", help="New location")
@click.option("--start-date", help="New start date")
@click.option("--funds", help="New allocated funds")
@click.pass_context
def update_site(
    ctx,
    site: str,
    name: str | None,
    job_name: str | None,
    pos_no: str | None,
    location: str | None,
    start_date: str | None,
    funds: str | None,
):
    """Update site details.

    Examples:
        sitebook site update "Tower B" --location "Pune"
        sitebook site update 3 --funds 750000
    """
    db = ctx.obj["db"]
    service = SiteService(db)
    site_id = resolve_site_or_exit(ctx, service, site)

    fields = {
        "name": name,
        "job_name": job_name,
        "pos_no": pos_no,
        "location": location,
    }
    if start_date:
        fields["start_date"] = parse_date_or_exit(ctx, start_date, "start date")
    if funds:
        fields["total_funds"] = _parse_funds_or_exit(ctx, funds)

    if all(value is None for value in fields.values()):
        click.echo("Nothing to update.")
        return

    try:
        service.update_site(site_id, **fields)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated site {site_id}")


@site_group.command("complete")
@click.argument("site", metavar="SITE")
@click.option("--date", "completion_date", default="today", show_default=True, help="Completion date")
@click.pass_context
def complete_site(ctx, site: str, completion_date: str):
    """Mark a site as completed."""
    db = ctx.obj["db"]
    service = SiteService(db)
    site_id = resolve_site_or_exit(ctx, service, site)
    completed_on = parse_date_or_exit(ctx, completion_date, "completion date")

    try:
        service.complete_site(site_id, completed_on)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Site marked as completed on {format_date(completed_on)}")


@site_group.command("delete")
@click.argument("site", metavar="SITE")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_site(ctx, site: str, yes: bool):
    """Delete a site.

    The site can only be deleted if it has no expenses, advances, funds or
    invoices recorded against it.
    """
    db = ctx.obj["db"]
    service = SiteService(db)
    site_id = resolve_site_or_exit(ctx, service, site)
    site_obj = service.require_site(site_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete site '{site_obj.name}' (ID: {site_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_site(site_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted site '{site_obj.name}'")


def register_commands(cli):
    """Register site commands with main CLI."""
    cli.add_command(site_group, name="site")
