"""Expense commands."""

import click
from sitebook.cli.date_filters import parse_date_or_exit, period_options, resolve_cli_date_range
from sitebook.cli.error_handling import handle_domain_error
from sitebook.cli.site_resolution import resolve_site_or_exit
from sitebook.domain.entities import ExpenseCategory
from sitebook.domain.expense import ExpenseService
from sitebook.domain.site import SiteService
from sitebook.utils.amount_parser import parse_amount
from sitebook.utils.formatting import format_currency, format_date


@click.group()
def expense_group():
    """Record site expenses."""
    pass


@expense_group.command("add")
@click.option("--site", required=True, help="Site name or ID")
@click.option("--date", "expense_date", default="today", show_default=True, help="Expense date")
@click.option("--amount", required=True, help="Amount paid (e.g., 1250 or ₹1,250.00)")
@click.option(
    "--category",
    required=True,
    help="Expense category, e.g. Material, Labor, 'DIESEL & FUEL CHARGES'",
)
@click.option("--description", help="Expense description")
@click.pass_context
def add_expense(
    ctx, site: str, expense_date: str, amount: str, category: str, description: str | None
):
    """Add an expense to a site.

    Examples:
        sitebook expense add --site "Tower B" --amount 1250 --category Material --description "Cement"
    """
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site)
    spent_on = parse_date_or_exit(ctx, expense_date)

    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        expense_id = ExpenseService(db).add_expense(
            site_id=site_id,
            date=spent_on,
            amount=value,
            category=category,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Date: {format_date(spent_on)}")
    click.echo(f"  Amount: {format_currency(value)}")


@expense_group.command("list")
@click.option("--site", help="Site name or ID")
@period_options
@click.pass_context
def list_expenses(ctx, site, start_date, end_date, this_month, last_month, this_year):
    """List expenses, newest first."""
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site) if site else None
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month, "this-year": this_year},
    )

    expenses = ExpenseService(db).list_expenses(site_id=site_id, start_date=start, end_date=end)
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"{'ID':>4}  {'Date':<12}  {'Category':<30}  {'Amount':>14}  Description")
    click.echo("-" * 90)
    for expense in expenses:
        click.echo(
            f"{expense.id:>4}  {format_date(expense.date):<12}  {expense.category.value:<30}  "
            f"{format_currency(expense.amount):>14}  {expense.description or ''}"
        )


@expense_group.command("categories")
def list_categories():
    """List expense categories."""
    for category in ExpenseCategory:
        click.echo(category.value)


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense."""
    try:
        ExpenseService(ctx.obj["db"]).delete_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
