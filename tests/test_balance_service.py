"""Tests for BalanceService."""

import pytest
from datetime import date
from decimal import Decimal

from sitebook.domain.entities import BalanceSummary, DashboardOverview
from sitebook.domain.errors import NotFoundError


@pytest.fixture
def populated_site(
    sample_site, expense_service, advance_service, funds_service, invoice_service
):
    """Site with the standard worked example recorded against it."""
    site_id = sample_site.id
    funds_service.add_funds(site_id=site_id, date=date(2024, 4, 2), amount=Decimal("2000"))
    expense_service.add_expense(
        site_id=site_id, date=date(2024, 4, 3), amount=Decimal("1000"), category="Material"
    )
    advance_service.add_advance(
        site_id=site_id,
        date=date(2024, 4, 4),
        amount=Decimal("500"),
        purpose="Advance",
        recipient_type="worker",
        recipient_name="Ramesh",
    )
    advance_service.add_advance(
        site_id=site_id,
        date=date(2024, 4, 4),
        amount=Decimal("200"),
        purpose="Tools",
        recipient_type="worker",
        recipient_name="Ramesh",
    )
    invoice_service.add_invoice(
        site_id=site_id,
        date=date(2024, 4, 5),
        party_name="Shree Traders",
        net_amount=Decimal("300"),
        approver_type="supervisor",
        payment_status="paid",
    )
    return sample_site


def test_site_balance(balance_service, populated_site):
    summary = balance_service.get_site_balance(populated_site.id)

    assert summary == BalanceSummary(
        funds_received=Decimal("2000"),
        total_expenditure=Decimal("1000"),
        total_advances=Decimal("500"),
        debits_to_worker=Decimal("200"),
        invoices_paid=Decimal("300"),
        pending_invoices=Decimal("0"),
        total_balance=Decimal("200"),
    )


def test_head_office_invoices_do_not_reduce_balance(
    balance_service, invoice_service, populated_site
):
    invoice_service.add_invoice(
        site_id=populated_site.id,
        date=date(2024, 4, 6),
        party_name="Head Office Supplier",
        net_amount=Decimal("5000"),
        approver_type="ho",
    )

    summary = balance_service.get_site_balance(populated_site.id)

    assert summary.invoices_paid == Decimal("300")
    assert summary.total_balance == Decimal("200")


def test_pending_supervisor_invoice_reported(balance_service, invoice_service, populated_site):
    invoice_service.add_invoice(
        site_id=populated_site.id,
        date=date(2024, 4, 6),
        party_name="Kumar Hardware",
        net_amount=Decimal("50"),
        approver_type="supervisor",
    )

    summary = balance_service.get_site_balance(populated_site.id)

    assert summary.pending_invoices == Decimal("50")
    assert summary.invoices_paid == Decimal("350")
    assert summary.total_balance == Decimal("150")


def test_other_sites_are_ignored(balance_service, site_service, funds_service, populated_site):
    other_id = site_service.create_site(name="Warehouse", start_date=date(2024, 4, 1))
    funds_service.add_funds(site_id=other_id, date=date(2024, 4, 2), amount=Decimal("9999"))

    assert balance_service.get_site_balance(populated_site.id).funds_received == Decimal("2000")
    assert balance_service.get_site_balance(other_id).total_balance == Decimal("9999")


def test_date_window(balance_service, populated_site):
    summary = balance_service.get_site_balance(
        populated_site.id, start_date=date(2024, 4, 3), end_date=date(2024, 4, 4)
    )

    assert summary.funds_received == Decimal("0")
    assert summary.total_expenditure == Decimal("1000")
    assert summary.invoices_paid == Decimal("0")
    assert summary.total_balance == Decimal("-1500")


def test_empty_site_balance(balance_service, sample_site):
    summary = balance_service.get_site_balance(sample_site.id)

    assert summary.total_balance == Decimal("0")
    assert summary.funds_received == Decimal("0")


def test_missing_site(balance_service):
    with pytest.raises(NotFoundError):
        balance_service.get_site_balance(999)


def test_overview(balance_service, site_service, populated_site):
    other_id = site_service.create_site(
        name="Warehouse", start_date=date(2024, 1, 1), total_funds=Decimal("100000")
    )
    site_service.complete_site(other_id, date(2024, 3, 31))

    overview = balance_service.get_overview()

    assert overview == DashboardOverview(
        total_sites=2,
        active_sites=1,
        completed_sites=1,
        total_funds_allocated=Decimal("600000"),
        total_expenses=Decimal("1000"),
    )


def test_overview_empty(balance_service):
    overview = balance_service.get_overview()

    assert overview.total_sites == 0
    assert overview.total_funds_allocated == Decimal("0")
