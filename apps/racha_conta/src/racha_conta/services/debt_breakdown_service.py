"""Expense-level provenance of the debt between two participants."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from racha_conta.domain.models import NO_DESCRIPTION, DebtBreakdownItem, Expense
from racha_conta.domain.money import quiet_context


def _sort_key(item: DebtBreakdownItem) -> date:
    return item.date or date.min


def _share(expense: Expense) -> Decimal:
    with quiet_context():
        return expense.share()


def get_debt_breakdown(
    user1_id: str,
    user2_id: str,
    expenses: Iterable[Expense],
) -> list[DebtBreakdownItem]:
    """List expenses where one of the two ids paid and the other took part.

    ``is_payer`` is seen from ``user1_id``: True when user1 paid and user2 owes
    a share, False when user2 paid. Swapping the ids flips every ``is_payer``
    and selects the same expenses. Items are sorted newest first with undated
    expenses last; input order breaks ties.
    """

    items: list[DebtBreakdownItem] = []
    for expense in expenses:
        if not expense.participant_ids:
            continue

        if expense.paid_by_id == user1_id and user2_id in expense.participant_ids:
            is_payer = True
        elif expense.paid_by_id == user2_id and user1_id in expense.participant_ids:
            is_payer = False
        else:
            continue

        items.append(
            DebtBreakdownItem(
                expense_id=expense.id,
                description=(expense.description or "").strip() or NO_DESCRIPTION,
                date=expense.date,
                total_amount=expense.amount,
                owe_amount=_share(expense),
                is_payer=is_payer,
            )
        )

    return sorted(items, key=_sort_key, reverse=True)
