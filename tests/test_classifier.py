"""Tests for advance classification."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from sitebook.domain import classifier
from sitebook.domain.classifier import (
    ADVANCE_CLASSIFICATION,
    classify_advance,
    classify_purpose,
    split_advances,
)
from sitebook.domain.entities import Advance, AdvanceClass, AdvancePurpose, RecipientType
from sitebook.domain.errors import UnknownPurposeError, ValidationError


def _advance(advance_id, purpose, amount="100"):
    return Advance(
        id=advance_id,
        site_id=1,
        date=date(2024, 5, 1),
        amount=Decimal(amount),
        purpose=purpose,
        recipient_type=RecipientType.WORKER,
        recipient_name="Ramesh",
        remarks=None,
        created_at=datetime.now(UTC),
    )


def test_classification_covers_every_purpose():
    """Every purpose has an explicit classification."""
    assert set(ADVANCE_CLASSIFICATION) == set(AdvancePurpose)


@pytest.mark.parametrize(
    "purpose", [AdvancePurpose.SAFETY_SHOES, AdvancePurpose.TOOLS, AdvancePurpose.OTHER]
)
def test_item_purposes_are_worker_debits(purpose):
    assert classify_purpose(purpose) is AdvanceClass.WORKER_DEBIT


def test_advance_purpose_is_money_advance():
    assert classify_purpose(AdvancePurpose.ADVANCE) is AdvanceClass.MONEY_ADVANCE


def test_classify_accepts_stored_value():
    assert classify_purpose("Safety Shoes") is AdvanceClass.WORKER_DEBIT
    assert classify_purpose("Advance") is AdvanceClass.MONEY_ADVANCE


def test_unknown_purpose_raises():
    """Unknown purposes are not silently counted as money advances."""
    with pytest.raises(UnknownPurposeError) as exc_info:
        classify_purpose("Helmet")
    assert "Helmet" in str(exc_info.value)
    assert isinstance(exc_info.value, ValidationError)


def test_purpose_missing_from_table_raises(monkeypatch):
    """A purpose without an entry forces an explicit decision."""
    table = dict(ADVANCE_CLASSIFICATION)
    del table[AdvancePurpose.TOOLS]
    monkeypatch.setattr(classifier, "ADVANCE_CLASSIFICATION", table)

    with pytest.raises(UnknownPurposeError):
        classify_purpose(AdvancePurpose.TOOLS)


def test_classify_advance_uses_purpose():
    assert classify_advance(_advance(1, AdvancePurpose.TOOLS)) is AdvanceClass.WORKER_DEBIT


def test_split_advances_partitions_and_keeps_order():
    advances = [
        _advance(1, AdvancePurpose.ADVANCE),
        _advance(2, AdvancePurpose.TOOLS),
        _advance(3, AdvancePurpose.ADVANCE),
        _advance(4, AdvancePurpose.SAFETY_SHOES),
        _advance(5, AdvancePurpose.OTHER),
    ]

    money, debits = split_advances(advances)

    assert [a.id for a in money] == [1, 3]
    assert [a.id for a in debits] == [2, 4, 5]
    assert len(advances) == 5


def test_split_advances_empty():
    assert split_advances([]) == ([], [])
