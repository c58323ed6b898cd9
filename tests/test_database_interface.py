"""Tests for Database interface returning domain models."""

import logging

import pytest
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.exc import OperationalError

from sitebook.database.factories import create_sqlite_database
from sitebook.domain import entities
from sitebook.domain.errors import ConflictError, NotFoundError, StorageError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_site_returns_domain_model(self, temp_db):
        site_id = temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))

        site = temp_db.get_site(site_id)

        assert isinstance(site, entities.Site)
        assert site.id == site_id
        assert site.is_completed is False
        assert site.total_funds == Decimal("0")
        assert isinstance(site.created_at, datetime)

    def test_create_site_duplicate_name(self, temp_db):
        temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))

        with pytest.raises(ConflictError):
            temp_db.create_site(name="Tower B", start_date=date(2024, 4, 2))

    def test_update_site_rejects_unknown_field(self, temp_db):
        site_id = temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))

        with pytest.raises(ValueError):
            temp_db.update_site(site_id, {"id": 99})

    def test_list_expenses_filters_and_orders(self, temp_db):
        site_a = temp_db.create_site(name="A", start_date=date(2024, 1, 1))
        site_b = temp_db.create_site(name="B", start_date=date(2024, 1, 1))
        temp_db.create_expense(site_a, date(2024, 1, 10), Decimal("10"), entities.ExpenseCategory.FOOD)
        temp_db.create_expense(site_a, date(2024, 2, 10), Decimal("20"), entities.ExpenseCategory.FOOD)
        temp_db.create_expense(site_b, date(2024, 3, 10), Decimal("30"), entities.ExpenseCategory.FOOD)

        expenses = temp_db.list_expenses(site_id=site_a)

        assert [e.amount for e in expenses] == [Decimal("20"), Decimal("10")]
        assert all(isinstance(e, entities.Expense) for e in expenses)

        ranged = temp_db.list_expenses(start_date=date(2024, 2, 1), end_date=date(2024, 2, 28))
        assert [e.amount for e in ranged] == [Decimal("20")]

    def test_amounts_round_trip_as_decimal(self, temp_db):
        site_id = temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))
        funds_id = temp_db.create_funds_received(site_id, date(2024, 4, 2), Decimal("1234.56"))

        entry = temp_db.get_funds_received(funds_id)

        assert isinstance(entry.amount, Decimal)
        assert entry.amount == Decimal("1234.56")

    def test_invoice_payment_status_update(self, temp_db):
        site_id = temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))
        invoice_id = temp_db.create_invoice(
            site_id=site_id,
            date=date(2024, 4, 3),
            party_name="Shree Traders",
            gross_amount=Decimal("100"),
            net_amount=Decimal("118"),
            approver_type=entities.ApproverType.SUPERVISOR,
        )

        temp_db.update_invoice_payment_status(invoice_id, entities.PaymentStatus.PAID)

        invoice = temp_db.get_invoice(invoice_id)
        assert invoice.payment_status is entities.PaymentStatus.PAID
        assert invoice.approver_type is entities.ApproverType.SUPERVISOR

    def test_record_counts(self, temp_db):
        site_id = temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))
        temp_db.create_advance(
            site_id,
            date(2024, 4, 2),
            Decimal("500"),
            entities.AdvancePurpose.ADVANCE,
            entities.RecipientType.WORKER,
            "Ramesh",
        )

        counts = temp_db.get_site_record_counts(site_id)

        assert counts == {"expense": 0, "advance": 1, "funds entry": 0, "invoice": 0}

    def test_delete_missing_record(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.delete_expense(404)

    def test_failed_commit_rolls_back_and_raises_storage_error(
        self, temp_db, monkeypatch, caplog
    ):
        site_id = temp_db.create_site(name="Tower B", start_date=date(2024, 4, 1))
        session = temp_db._get_session()
        rollbacks = []
        real_rollback = session.rollback

        def failing_commit():
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

        def tracking_rollback():
            rollbacks.append(True)
            real_rollback()

        monkeypatch.setattr(session, "commit", failing_commit)
        monkeypatch.setattr(session, "rollback", tracking_rollback)

        with caplog.at_level(logging.ERROR, logger="sitebook"):
            with pytest.raises(StorageError) as exc_info:
                temp_db.create_expense(
                    site_id, date(2024, 4, 2), Decimal("10"), entities.ExpenseCategory.FOOD
                )

        assert str(exc_info.value) == "Failed to add expense. Please try again."
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert rollbacks == [True]
        assert "Failed to add expense" in caplog.text

        monkeypatch.undo()
        expense_id = temp_db.create_expense(
            site_id, date(2024, 4, 3), Decimal("20"), entities.ExpenseCategory.FOOD
        )
        assert [e.id for e in temp_db.list_expenses(site_id=site_id)] == [expense_id]


def test_factory_uses_environment_path(tmp_path, monkeypatch):
    """SITEBOOK_DB_PATH selects the database file."""
    db_file = tmp_path / "env.db"
    monkeypatch.setenv("SITEBOOK_DB_PATH", str(db_file))

    db = create_sqlite_database()

    assert db.database_url == f"sqlite:///{db_file}"
    db.disconnect()
