"""Funds received commands."""

import click
from sitebook.cli.date_filters import parse_date_or_exit
from sitebook.cli.error_handling import handle_domain_error
from sitebook.cli.site_resolution import resolve_site_or_exit
from sitebook.domain.funds import FundsService
from sitebook.domain.site import SiteService
from sitebook.utils.amount_parser import parse_amount
from sitebook.utils.formatting import format_currency, format_date


@click.group()
def funds_group():
    """Record funds received from head office."""
    pass


@funds_group.command("add")
@click.option("--site", required=True, help="Site name or ID")
@click.option("--date", "received_date", default="today", show_default=True, help="Date received")
@click.option("--amount", required=True, help="Amount received")
@click.option("--reference", help="Transfer reference")
@click.pass_context
def add_funds(ctx, site: str, received_date: str, amount: str, reference: str | None):
    """Record funds received by a site."""
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site)
    received_on = parse_date_or_exit(ctx, received_date)

    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        funds_id = FundsService(db).add_funds(
            site_id=site_id, date=received_on, amount=value, reference=reference
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded funds {funds_id}: {format_currency(value)} on {format_date(received_on)}")


@funds_group.command("list")
@click.option("--site", help="Site name or ID")
@click.pass_context
def list_funds(ctx, site: str | None):
    """List funds received, newest first."""
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site) if site else None

    entries = FundsService(db).list_funds(site_id=site_id)
    if not entries:
        click.echo("No funds found.")
        return

    for entry in entries:
        click.echo(
            f"{entry.id:>4}  {format_date(entry.date):<12}  "
            f"{format_currency(entry.amount):>14}  {entry.reference or ''}"
        )


@funds_group.command("delete")
@click.argument("funds_id", type=int)
@click.pass_context
def delete_funds(ctx, funds_id: int):
    """Delete a funds received entry."""
    try:
        FundsService(ctx.obj["db"]).delete_funds(funds_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted funds entry {funds_id}")


def register_commands(cli):
    """Register funds commands with main CLI."""
    cli.add_command(funds_group, name="funds")
