from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from racha_conta.domain.errors import NoOutstandingDebtError, ParticipantNotFoundError
from racha_conta.domain.models import PairwiseDebt
from racha_conta.services.settlement_service import (
    build_settlement_expense,
    find_pairwise_debt,
    settle_pair,
)


def test_settlement_expense_pays_creditor_as_sole_participant() -> None:
    debt = PairwiseDebt(debtor_id="A", creditor_id="B", amount=Decimal("40"))

    expense = build_settlement_expense(debt, expense_id="s1", on=date(2026, 2, 28))

    assert expense.id == "s1"
    assert expense.paid_by_id == "A"
    assert expense.participant_ids == frozenset({"B"})
    assert expense.amount == Decimal("40")
    assert expense.is_settlement is True
    assert expense.date == date(2026, 2, 28)
    assert expense.description == "Settlement"


def test_settlement_expense_gets_generated_id() -> None:
    debt = PairwiseDebt(debtor_id="A", creditor_id="B", amount=Decimal("1"))

    first = build_settlement_expense(debt)
    second = build_settlement_expense(debt)

    assert first.id
    assert first.id != second.id


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5")])
def test_settlement_rejects_non_positive_amount(amount: Decimal) -> None:
    debt = PairwiseDebt(debtor_id="A", creditor_id="B", amount=amount)

    with pytest.raises(NoOutstandingDebtError) as exc_info:
        build_settlement_expense(debt)

    assert exc_info.value.code == "NO_OUTSTANDING_DEBT"
    assert exc_info.value.details["debtor_id"] == "A"


def test_find_pairwise_debt_is_directional(two_participants, make_expense) -> None:
    expenses = [make_expense(100, "B", ["A"])]

    assert find_pairwise_debt(
        two_participants, expenses, debtor_id="A", creditor_id="B"
    ) == PairwiseDebt(debtor_id="A", creditor_id="B", amount=Decimal("100"))
    assert (
        find_pairwise_debt(two_participants, expenses, debtor_id="B", creditor_id="A")
        is None
    )


def test_settle_pair_uses_current_netted_debt(two_participants, make_expense) -> None:
    expenses = [make_expense(100, "B", ["A"]), make_expense(60, "A", ["B"])]

    settlement = settle_pair(
        two_participants, expenses, debtor_id="A", creditor_id="B"
    )

    assert settlement.amount == Decimal("40")
    assert settlement.paid_by_id == "A"


def test_settle_pair_rejects_wrong_direction(two_participants, make_expense) -> None:
    with pytest.raises(NoOutstandingDebtError):
        settle_pair(
            two_participants,
            [make_expense(100, "B", ["A"])],
            debtor_id="B",
            creditor_id="A",
        )


def test_settle_pair_rejects_unknown_participant(two_participants) -> None:
    with pytest.raises(ParticipantNotFoundError) as exc_info:
        settle_pair(two_participants, [], debtor_id="A", creditor_id="ghost")

    assert exc_info.value.details == {"participant_ids": ["ghost"]}
