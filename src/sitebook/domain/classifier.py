"""Advance classification.

Every advance is either a money advance, which is netted against the site
balance, or a worker debit (safety shoes, tools and the like), which is
tracked separately and never enters the balance.
"""

from typing import Iterable, Union

from sitebook.domain.entities import Advance, AdvanceClass, AdvancePurpose
from sitebook.domain.errors import UnknownPurposeError, unknown_purpose


# Must name every AdvancePurpose member; see tests/test_classifier.py.
ADVANCE_CLASSIFICATION: dict[AdvancePurpose, AdvanceClass] = {
    AdvancePurpose.ADVANCE: AdvanceClass.MONEY_ADVANCE,
    AdvancePurpose.SAFETY_SHOES: AdvanceClass.WORKER_DEBIT,
    AdvancePurpose.TOOLS: AdvanceClass.WORKER_DEBIT,
    AdvancePurpose.OTHER: AdvanceClass.WORKER_DEBIT,
}


def classify_purpose(purpose: Union[AdvancePurpose, str]) -> AdvanceClass:
    """Return the ledger class for an advance purpose.

    Args:
        purpose: AdvancePurpose member or its stored string value

    Returns:
        AdvanceClass for the purpose

    Raises:
        UnknownPurposeError: If the purpose is not a known value or has no
            classification entry
    """
    try:
        member = AdvancePurpose(purpose)
    except ValueError as e:
        raise UnknownPurposeError(unknown_purpose(purpose)) from e

    advance_class = ADVANCE_CLASSIFICATION.get(member)
    if advance_class is None:
        raise UnknownPurposeError(unknown_purpose(member.value))
    return advance_class


def classify_advance(advance: Advance) -> AdvanceClass:
    """Return the ledger class of an advance."""
    return classify_purpose(advance.purpose)


def split_advances(advances: Iterable[Advance]) -> tuple[list[Advance], list[Advance]]:
    """Partition advances into (money_advances, worker_debits).

    Input order is preserved within each partition.
    """
    money_advances: list[Advance] = []
    worker_debits: list[Advance] = []
    for advance in advances:
        if classify_advance(advance) is AdvanceClass.WORKER_DEBIT:
            worker_debits.append(advance)
        else:
            money_advances.append(advance)
    return money_advances, worker_debits
