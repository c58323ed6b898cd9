"""Advance and worker debit commands."""

import click
from sitebook.cli.date_filters import parse_date_or_exit, period_options, resolve_cli_date_range
from sitebook.cli.error_handling import handle_domain_error
from sitebook.cli.site_resolution import resolve_site_or_exit
from sitebook.domain.advance import AdvanceService
from sitebook.domain.classifier import classify_advance
from sitebook.domain.entities import AdvanceClass, AdvancePurpose, RecipientType
from sitebook.domain.site import SiteService
from sitebook.utils.amount_parser import parse_amount
from sitebook.utils.formatting import format_currency, format_date

CLASS_CHOICES = {
    "money": AdvanceClass.MONEY_ADVANCE,
    "debit": AdvanceClass.WORKER_DEBIT,
}


@click.group()
def advance_group():
    """Record advances and debits to workers."""
    pass


@advance_group.command("add")
@click.option("--site", required=True, help="Site name or ID")
@click.option("--date", "advance_date", default="today", show_default=True, help="Date handed out")
@click.option("--amount", required=True, help="Amount")
@click.option(
    "--purpose",
    default=AdvancePurpose.ADVANCE.value,
    show_default=True,
    help=f"One of: {', '.join(p.value for p in AdvancePurpose)}",
)
@click.option(
    "--recipient-type",
    default=RecipientType.WORKER.value,
    show_default=True,
    type=click.Choice([r.value for r in RecipientType], case_sensitive=False),
)
@click.option("--recipient", "recipient_name", required=True, help="Recipient name")
@click.option("--remarks", help="Remarks")
@click.pass_context
def add_advance(
    ctx,
    site: str,
    advance_date: str,
    amount: str,
    purpose: str,
    recipient_type: str,
    recipient_name: str,
    remarks: str | None,
):
    """Add an advance to a site.

    Advances for safety shoes, tools or other items are debited to the worker
    and do not reduce the site balance.

    Examples:
        sitebook advance add --site "Tower B" --amount 2000 --recipient "Ramesh"
        sitebook advance add --site 1 --amount 650 --purpose "Safety Shoes" --recipient "Suresh"
    """
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site)
    given_on = parse_date_or_exit(ctx, advance_date)

    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    service = AdvanceService(db)
    try:
        advance_id = service.add_advance(
            site_id=site_id,
            date=given_on,
            amount=value,
            purpose=purpose,
            recipient_type=recipient_type,
            recipient_name=recipient_name,
            remarks=remarks,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    advance = service.get_advance(advance_id)
    label = "worker debit" if classify_advance(advance) is AdvanceClass.WORKER_DEBIT else "advance"
    click.echo(f"Created {label} {advance_id}")
    click.echo(f"  Recipient: {advance.recipient_type.value}: {advance.recipient_name}")
    click.echo(f"  Amount: {format_currency(advance.amount)}")


@advance_group.command("list")
@click.option("--site", help="Site name or ID")
@click.option(
    "--class",
    "advance_class",
    type=click.Choice(sorted(CLASS_CHOICES)),
    help="Only money advances or only worker debits",
)
@period_options
@click.pass_context
def list_advances(
    ctx, site, advance_class, start_date, end_date, this_month, last_month, this_year
):
    """List advances, newest first."""
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site) if site else None
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month, "this-year": this_year},
    )

    advances = AdvanceService(db).list_advances(
        site_id=site_id,
        advance_class=CLASS_CHOICES.get(advance_class),
        start_date=start,
        end_date=end,
    )
    if not advances:
        click.echo("No advances found.")
        return

    click.echo(f"{'ID':>4}  {'Date':<12}  {'Recipient':<28}  {'Purpose':<13}  {'Amount':>14}")
    click.echo("-" * 80)
    for advance in advances:
        recipient = f"{advance.recipient_type.value}: {advance.recipient_name}"
        click.echo(
            f"{advance.id:>4}  {format_date(advance.date):<12}  {recipient:<28}  "
            f"{advance.purpose.value:<13}  {format_currency(advance.amount):>14}"
        )
        if advance.remarks:
            click.echo(f"      {advance.remarks}")


@advance_group.command("delete")
@click.argument("advance_id", type=int)
@click.pass_context
def delete_advance(ctx, advance_id: int):
    """Delete an advance."""
    try:
        AdvanceService(ctx.obj["db"]).delete_advance(advance_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted advance {advance_id}")


def register_commands(cli):
    """Register advance commands with main CLI."""
    cli.add_command(advance_group, name="advance")
