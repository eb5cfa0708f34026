from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal

import pytest

from racha_conta.domain.models import Expense, Participant

ExpenseFactory = Callable[..., Expense]


@pytest.fixture
def two_participants() -> list[Participant]:
    return [Participant(id="A", name="Alice"), Participant(id="B", name="Bob")]


@pytest.fixture
def three_participants() -> list[Participant]:
    return [
        Participant(id="A", name="Alice"),
        Participant(id="B", name="Bob"),
        Participant(id="C", name="Charlie"),
    ]


@pytest.fixture
def make_expense() -> ExpenseFactory:
    counter = {"next": 0}

    def factory(
        amount: str | int,
        paid_by: str,
        participants: Iterable[str],
        *,
        expense_id: str | None = None,
        description: str | None = "Despesa",
        on: date | None = None,
        is_settlement: bool = False,
    ) -> Expense:
        counter["next"] += 1
        return Expense(
            id=expense_id or f"e{counter['next']}",
            amount=Decimal(amount),
            paid_by_id=paid_by,
            participant_ids=frozenset(participants),
            description=description,
            date=on,
            is_settlement=is_settlement,
        )

    return factory
