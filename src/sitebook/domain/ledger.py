"""Site ledger aggregation.

Current balance is::

    funds received - expenditure - money advances - supervisor-paid invoices

Worker debits and pending invoices are reported alongside but never enter the
balance. All arithmetic is done in Decimal.
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence

from sitebook.domain.classifier import split_advances
from sitebook.domain.entities import (
    Advance,
    ApproverType,
    BalanceSummary,
    Expense,
    FundsReceived,
    Invoice,
    PaymentStatus,
)
from sitebook.domain.errors import InvalidAmountError, invalid_amount

ZERO = Decimal("0")


def to_amount(value: object) -> Decimal:
    """Coerce a ledger amount to a finite, non-negative Decimal.

    Floats go through ``str`` so 0.1 stays 0.1.

    Raises:
        InvalidAmountError: If the value is not numeric, not finite or negative
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(invalid_amount(value, "not a number"))

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidAmountError(invalid_amount(value, "not a number")) from e
    else:
        raise InvalidAmountError(invalid_amount(value, "not a number"))

    if not amount.is_finite():
        raise InvalidAmountError(invalid_amount(value, "must be finite"))
    if amount < 0:
        raise InvalidAmountError(invalid_amount(value, "must not be negative"))
    return amount


def to_stored_amount(value: object, places: int = 2, integer_digits: int = 10) -> Decimal:
    """Coerce an amount that must fit a ``Numeric`` column exactly.

    Defaults match the money columns (``Numeric(12, 2)``). Values are never
    rounded; anything the column cannot hold as given is rejected.

    Raises:
        InvalidAmountError: As ``to_amount``, or if the value has more
            decimal places or integer digits than the column holds
    """
    amount = to_amount(value)
    if amount >= Decimal(10) ** integer_digits:
        raise InvalidAmountError(
            invalid_amount(value, f"more than {integer_digits} integer digits")
        )
    if amount != amount.quantize(Decimal(1).scaleb(-places)):
        raise InvalidAmountError(invalid_amount(value, f"more than {places} decimal places"))
    return amount


def _total(amounts: Iterable[object]) -> Decimal:
    return sum((to_amount(amount) for amount in amounts), ZERO)


def supervisor_invoices(invoices: Iterable[Invoice]) -> list[Invoice]:
    """Return the invoices approved and paid by the site supervisor."""
    return [inv for inv in invoices if inv.approver_type == ApproverType.SUPERVISOR]


def compute_balance_summary(
    expenses: Sequence[Expense],
    advances: Sequence[Advance],
    funds_received: Sequence[FundsReceived],
    supervisor_approved_invoices: Sequence[Invoice],
) -> BalanceSummary:
    """Build the balance summary for one site.

    Args:
        expenses: Site expenses
        advances: Site advances, unclassified
        funds_received: Funds received from head office
        supervisor_approved_invoices: Only the supervisor-approved invoices;
            see ``supervisor_invoices``

    Returns:
        BalanceSummary for the given snapshot

    Raises:
        InvalidAmountError: If any amount is negative or not a finite number
        UnknownPurposeError: If an advance purpose has no classification
    """
    money_advances, worker_debits = split_advances(advances)

    total_funds = _total(fund.amount for fund in funds_received)
    total_expenses = _total(expense.amount for expense in expenses)
    total_money_advances = _total(advance.amount for advance in money_advances)
    total_worker_debits = _total(advance.amount for advance in worker_debits)
    invoices_paid = _total(inv.net_amount for inv in supervisor_approved_invoices)
    pending = _total(
        inv.net_amount
        for inv in supervisor_approved_invoices
        if inv.payment_status == PaymentStatus.PENDING
    )

    return BalanceSummary(
        funds_received=total_funds,
        total_expenditure=total_expenses,
        total_advances=total_money_advances,
        debits_to_worker=total_worker_debits,
        invoices_paid=invoices_paid,
        pending_invoices=pending,
        total_balance=total_funds - total_expenses - total_money_advances - invoices_paid,
    )
