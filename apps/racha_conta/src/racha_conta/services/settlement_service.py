"""Settlement expenses that cancel a resolved pairwise debt."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from uuid import uuid4

from racha_conta.domain.errors import (
    NoOutstandingDebtError,
    ParticipantNotFoundError,
    compose_error_message,
)
from racha_conta.domain.models import Expense, PairwiseDebt, Participant
from racha_conta.domain.money import ZERO, format_money
from racha_conta.services.pairwise_debt_service import compute_pairwise_debts

logger = logging.getLogger(__name__)

SETTLEMENT_DESCRIPTION = "Settlement"


def build_settlement_expense(
    debt: PairwiseDebt,
    *,
    expense_id: str | None = None,
    on: date | None = None,
    description: str | None = None,
) -> Expense:
    """Build the expense the debtor pays to the creditor as sole participant."""

    if debt.amount <= ZERO:
        raise NoOutstandingDebtError(
            message=compose_error_message(
                cause="Settlement amount must be greater than zero.",
                action="Settle only debts listed as outstanding.",
            ),
            details={
                "debtor_id": debt.debtor_id,
                "creditor_id": debt.creditor_id,
                "amount": str(debt.amount),
            },
        )

    return Expense(
        id=expense_id or uuid4().hex,
        amount=debt.amount,
        paid_by_id=debt.debtor_id,
        participant_ids=frozenset({debt.creditor_id}),
        description=description or SETTLEMENT_DESCRIPTION,
        date=on,
        is_settlement=True,
    )


def find_pairwise_debt(
    participants: Sequence[Participant],
    expenses: Sequence[Expense],
    *,
    debtor_id: str,
    creditor_id: str,
) -> PairwiseDebt | None:
    """Return the current debt from debtor to creditor, if any."""

    return next(
        (
            debt
            for debt in compute_pairwise_debts(participants, expenses)
            if debt.debtor_id == debtor_id and debt.creditor_id == creditor_id
        ),
        None,
    )


def settle_pair(
    participants: Sequence[Participant],
    expenses: Sequence[Expense],
    *,
    debtor_id: str,
    creditor_id: str,
    expense_id: str | None = None,
    on: date | None = None,
) -> Expense:
    """Resolve the current debt of a pair and return its settlement expense."""

    known_ids = {participant.id for participant in participants}
    missing = [pid for pid in (debtor_id, creditor_id) if pid not in known_ids]
    if missing:
        raise ParticipantNotFoundError(details={"participant_ids": missing})

    debt = find_pairwise_debt(
        participants,
        expenses,
        debtor_id=debtor_id,
        creditor_id=creditor_id,
    )
    if debt is None:
        raise NoOutstandingDebtError(
            details={"debtor_id": debtor_id, "creditor_id": creditor_id}
        )

    settlement = build_settlement_expense(debt, expense_id=expense_id, on=on)
    logger.info(
        "settlement_built",
        extra={
            "expense_id": settlement.id,
            "debtor_id": debtor_id,
            "creditor_id": creditor_id,
            "amount": format_money(debt.amount),
        },
    )
    return settlement
