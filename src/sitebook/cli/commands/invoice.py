"""Invoice commands."""

import click
from sitebook.cli.date_filters import parse_date_or_exit
from sitebook.cli.error_handling import handle_domain_error
from sitebook.cli.site_resolution import resolve_site_or_exit
from sitebook.domain.entities import ApproverType, PaymentStatus
from sitebook.domain.invoice import InvoiceService
from sitebook.domain.site import SiteService
from sitebook.utils.amount_parser import parse_amount
from sitebook.utils.formatting import format_currency, format_date

APPROVER_LABELS = {
    ApproverType.HO: "Head Office",
    ApproverType.SUPERVISOR: "Supervisor",
}


def _amount_or_exit(ctx, value: str | None, label: str):
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group()
def invoice_group():
    """Record supplier invoices."""
    pass


@invoice_group.command("add")
@click.option("--site", required=True, help="Site name or ID")
@click.option("--date", "invoice_date", default="today", show_default=True, help="Invoice date")
@click.option("--party", "party_name", required=True, help="Supplier name")
@click.option("--invoice-no", "party_id", help="Supplier invoice number")
@click.option("--material", help="Material supplied")
@click.option("--quantity", default="0", help="Quantity")
@click.option("--rate", default="0", help="Rate per unit")
@click.option("--gst", default="0", help="GST percentage")
@click.option("--net", "net_amount", help="Net amount (calculated from quantity, rate and GST if omitted)")
@click.option(
    "--paid-by",
    "approver_type",
    type=click.Choice([a.value for a in ApproverType]),
    default=ApproverType.HO.value,
    show_default=True,
    help="Who pays the invoice; only supervisor-paid invoices reduce the site balance",
)
@click.option(
    "--status",
    type=click.Choice([s.value for s in PaymentStatus]),
    default=PaymentStatus.PENDING.value,
    show_default=True,
)
@click.option("--bill-url", help="Link to the scanned bill")
@click.pass_context
def add_invoice(
    ctx,
    site,
    invoice_date,
    party_name,
    party_id,
    material,
    quantity,
    rate,
    gst,
    net_amount,
    approver_type,
    status,
    bill_url,
):
    """Add an invoice to a site.

    Examples:
        sitebook invoice add --site "Tower B" --party "Shree Traders" --material Cement \\
            --quantity 50 --rate 380 --gst 18 --paid-by supervisor
    """
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site)
    dated = parse_date_or_exit(ctx, invoice_date)

    service = InvoiceService(db)
    try:
        invoice_id = service.add_invoice(
            site_id=site_id,
            date=dated,
            party_name=party_name,
            party_id=party_id,
            material=material,
            quantity=_amount_or_exit(ctx, quantity, "quantity"),
            rate=_amount_or_exit(ctx, rate, "rate"),
            gst_percentage=_amount_or_exit(ctx, gst, "GST percentage"),
            net_amount=_amount_or_exit(ctx, net_amount, "net amount"),
            approver_type=approver_type,
            payment_status=status,
            bill_url=bill_url,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    invoice = service.get_invoice(invoice_id)
    click.echo(f"Created invoice {invoice_id}")
    click.echo(f"  Gross: {format_currency(invoice.gross_amount)}")
    click.echo(f"  Net: {format_currency(invoice.net_amount)}")
    click.echo(f"  Payment By: {APPROVER_LABELS[invoice.approver_type]}")


@invoice_group.command("list")
@click.option("--site", help="Site name or ID")
@click.option(
    "--paid-by",
    "approver_type",
    type=click.Choice([a.value for a in ApproverType]),
    help="Only invoices paid by head office or by the supervisor",
)
@click.pass_context
def list_invoices(ctx, site: str | None, approver_type: str | None):
    """List invoices, newest first."""
    db = ctx.obj["db"]
    site_id = resolve_site_or_exit(ctx, SiteService(db), site) if site else None

    invoices = InvoiceService(db).list_invoices(
        site_id=site_id,
        approver_type=ApproverType(approver_type) if approver_type else None,
    )
    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo(
        f"{'ID':>4}  {'Date':<12}  {'Party':<22}  {'Invoice No.':<12}  "
        f"{'Payment By':<11}  {'Status':<8}  {'Amount':>14}"
    )
    click.echo("-" * 96)
    for invoice in invoices:
        click.echo(
            f"{invoice.id:>4}  {format_date(invoice.date):<12}  {invoice.party_name:<22}  "
            f"{(invoice.party_id or '-'):<12}  {APPROVER_LABELS[invoice.approver_type]:<11}  "
            f"{invoice.payment_status.value:<8}  {format_currency(invoice.net_amount):>14}"
        )


@invoice_group.command("mark-paid")
@click.argument("invoice_id", type=int)
@click.pass_context
def mark_paid(ctx, invoice_id: int):
    """Mark an invoice as paid."""
    try:
        InvoiceService(ctx.obj["db"]).mark_paid(invoice_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Invoice {invoice_id} marked as paid")


@invoice_group.command("delete")
@click.argument("invoice_id", type=int)
@click.pass_context
def delete_invoice(ctx, invoice_id: int):
    """Delete an invoice."""
    try:
        InvoiceService(ctx.obj["db"]).delete_invoice(invoice_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted invoice {invoice_id}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
