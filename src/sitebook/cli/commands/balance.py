"""Balance and dashboard commands."""

import click
from sitebook.cli.date_filters import period_options, resolve_cli_date_range
from sitebook.cli.error_handling import handle_domain_error
from sitebook.cli.site_resolution import resolve_site_or_exit
from sitebook.domain.balance import BalanceService
from sitebook.domain.site import SiteService
from sitebook.utils.formatting import format_currency

LABEL_WIDTH = 40
AMOUNT_WIDTH = 18


def _line(label: str, amount) -> str:
    return f"{label:<{LABEL_WIDTH}}{format_currency(amount):>{AMOUNT_WIDTH}}"


@click.command("balance")
@click.argument("site", metavar="SITE")
@period_options
@click.pass_context
def balance(ctx, site, start_date, end_date, this_month, last_month, this_year):
    """Show the financial summary of a site.

    Current balance = funds received - expenses - advances - invoices paid
    by the supervisor. Debits to workers and pending invoices are shown for
    information only.
    """
    db = ctx.obj["db"]
    site_service = SiteService(db)
    site_id = resolve_site_or_exit(ctx, site_service, site)
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month, "this-year": this_year},
    )

    try:
        summary = BalanceService(db).get_site_balance(site_id, start_date=start, end_date=end)
    except ValueError as e:
        handle_domain_error(ctx, e)

    site_obj = site_service.require_site(site_id)
    separator = "-" * (LABEL_WIDTH + AMOUNT_WIDTH)
    click.echo(f"Site Financial Summary: {site_obj.name}")
    click.echo(separator)
    click.echo(_line("Funds Received from HO:", summary.funds_received))
    click.echo(separator)
    click.echo(_line("Total Expenses paid by supervisor:", summary.total_expenditure))
    click.echo(_line("Total Advances paid by supervisor:", summary.total_advances))
    click.echo(_line("Debits TO worker:", summary.debits_to_worker))
    click.echo(_line("Invoices paid by supervisor:", summary.invoices_paid))
    click.echo(_line("  of which pending:", summary.pending_invoices))
    click.echo(separator)
    click.echo(_line("Current Balance:", summary.total_balance))


@click.command("overview")
@click.pass_context
def overview(ctx):
    """Show dashboard totals across all sites."""
    result = BalanceService(ctx.obj["db"]).get_overview()
    click.echo(f"{'Total Sites:':<{LABEL_WIDTH}}{result.total_sites:>{AMOUNT_WIDTH}}")
    click.echo(f"{'  In Progress:':<{LABEL_WIDTH}}{result.active_sites:>{AMOUNT_WIDTH}}")
    click.echo(f"{'  Completed:':<{LABEL_WIDTH}}{result.completed_sites:>{AMOUNT_WIDTH}}")
    click.echo(_line("Total Funds Allocated:", result.total_funds_allocated))
    click.echo(_line("Total Expenses:", result.total_expenses))


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(balance)
    cli.add_command(overview)
