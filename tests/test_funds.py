"""Tests for funds received service and commands."""

import pytest
from datetime import date
from decimal import Decimal

from sitebook.cli.main import cli
from sitebook.domain.errors import InvalidAmountError, NotFoundError


def test_add_funds(funds_service, sample_site):
    funds_id = funds_service.add_funds(
        site_id=sample_site.id,
        date=date(2024, 4, 2),
        amount=Decimal("100000"),
        reference="NEFT-889",
    )

    entry = funds_service.get_funds(funds_id)
    assert entry.amount == Decimal("100000")
    assert entry.reference == "NEFT-889"


def test_add_funds_negative(funds_service, sample_site):
    with pytest.raises(InvalidAmountError):
        funds_service.add_funds(site_id=sample_site.id, date=date(2024, 4, 2), amount=Decimal("-5"))


@pytest.mark.parametrize(
    "amount", [Decimal("12345678901234567.89"), Decimal("10000000000"), Decimal("100.125")]
)
def test_add_funds_rejects_amount_column_cannot_hold(funds_service, sample_site, amount):
    with pytest.raises(InvalidAmountError):
        funds_service.add_funds(site_id=sample_site.id, date=date(2024, 4, 2), amount=amount)
    assert funds_service.list_funds(site_id=sample_site.id) == []


def test_add_funds_trailing_zeros_allowed(funds_service, sample_site):
    funds_id = funds_service.add_funds(
        site_id=sample_site.id, date=date(2024, 4, 2), amount=Decimal("2500.000")
    )

    assert funds_service.get_funds(funds_id).amount == Decimal("2500")


def test_add_funds_missing_site(funds_service):
    with pytest.raises(NotFoundError):
        funds_service.add_funds(site_id=999, date=date(2024, 4, 2), amount=Decimal("5"))


def test_list_funds_per_site(funds_service, site_service, sample_site):
    other_id = site_service.create_site(name="Warehouse", start_date=date(2024, 4, 1))
    funds_service.add_funds(site_id=sample_site.id, date=date(2024, 4, 2), amount=Decimal("10"))
    funds_service.add_funds(site_id=other_id, date=date(2024, 4, 3), amount=Decimal("20"))

    entries = funds_service.list_funds(site_id=other_id)

    assert [e.amount for e in entries] == [Decimal("20")]
    assert len(funds_service.list_funds()) == 2


def test_delete_funds(funds_service, sample_site):
    funds_id = funds_service.add_funds(
        site_id=sample_site.id, date=date(2024, 4, 2), amount=Decimal("10")
    )

    funds_service.delete_funds(funds_id)

    assert funds_service.get_funds(funds_id) is None
    with pytest.raises(NotFoundError):
        funds_service.delete_funds(funds_id)


def test_funds_add_command(cli_runner, temp_db, sample_site):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "funds",
            "add",
            "--site",
            "Tower B",
            "--date",
            "2024-04-02",
            "--amount",
            "Rs. 1,00,000",
            "--reference",
            "NEFT-889",
        ],
    )

    assert result.exit_code == 0
    assert "Recorded funds" in result.output
    assert "₹100,000.00 on Apr 02, 2024" in result.output


def test_funds_list_command(cli_runner, temp_db, sample_site, funds_service):
    funds_service.add_funds(
        site_id=sample_site.id, date=date(2024, 4, 2), amount=Decimal("2500"), reference="UTR-1"
    )

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "funds", "list", "--site", "Tower B"]
    )

    assert result.exit_code == 0
    assert "UTR-1" in result.output
    assert "₹2,500.00" in result.output


def test_funds_delete_missing(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "funds", "delete", "3"])

    assert result.exit_code == 1
    assert "Funds entry 3 not found" in result.output
