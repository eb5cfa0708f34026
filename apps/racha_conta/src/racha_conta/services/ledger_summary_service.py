"""Business service for the group balance summary."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal

from racha_conta.domain.models import Expense, PairwiseDebt, Participant
from racha_conta.domain.money import is_settled, to_brl
from racha_conta.services.balance_service import compute_balances
from racha_conta.services.pairwise_debt_service import compute_pairwise_debts

logger = logging.getLogger(__name__)

ALL_SETTLED_MESSAGE = "Todos quite!"


@dataclass(frozen=True, slots=True)
class ParticipantBalance:
    """Computed balance line for one participant."""

    participant_id: str
    name: str
    balance: Decimal


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Balances and outstanding pairwise transfers for a ledger snapshot."""

    participants: list[ParticipantBalance]
    transfers: list[PairwiseDebt]

    @property
    def all_settled(self) -> bool:
        return not self.transfers


def describe_transfer(transfer: PairwiseDebt, names: Mapping[str, str]) -> str:
    """Render a transfer as a human readable payment suggestion."""

    debtor = names.get(transfer.debtor_id, transfer.debtor_id)
    creditor = names.get(transfer.creditor_id, transfer.creditor_id)
    return f"{debtor} deve pagar {to_brl(transfer.amount)} para {creditor}"


def find_unknown_references(
    participants: Sequence[Participant],
    expenses: Sequence[Expense],
) -> dict[str, set[str]]:
    """Map expense id to the ids it references outside the participant list."""

    known_ids = {participant.id for participant in participants}
    unknown: dict[str, set[str]] = {}
    for expense in expenses:
        referenced = {expense.paid_by_id, *expense.participant_ids}
        missing = referenced - known_ids
        if missing:
            unknown[expense.id] = missing
    return unknown


class LedgerSummaryService:
    """Composes balances and pairwise debts for display."""

    def __init__(self, *, settled_epsilon: Decimal) -> None:
        self._settled_epsilon = settled_epsilon

    def get_summary(
        self,
        participants: Sequence[Participant],
        expenses: Sequence[Expense],
    ) -> LedgerSummary:
        if logger.isEnabledFor(logging.DEBUG):
            for expense_id, missing in find_unknown_references(
                participants, expenses
            ).items():
                logger.debug(
                    "expense_references_unknown_participant",
                    extra={"expense_id": expense_id, "participant_ids": sorted(missing)},
                )

        balances = compute_balances(participants, expenses)
        participant_balances = [
            ParticipantBalance(
                participant_id=participant.id,
                name=participant.name,
                balance=balances[participant.id],
            )
            for participant in participants
        ]
        transfers = [
            debt
            for debt in compute_pairwise_debts(participants, expenses)
            if not is_settled(debt.amount, self._settled_epsilon)
        ]

        logger.info(
            "ledger_summary_built",
            extra={
                "participant_count": len(participants),
                "expense_count": len(expenses),
                "transfer_count": len(transfers),
            },
        )
        return LedgerSummary(participants=participant_balances, transfers=transfers)

    def render_lines(self, summary: LedgerSummary) -> list[str]:
        """Return one suggestion line per transfer, or the all-settled message."""

        if summary.all_settled:
            return [ALL_SETTLED_MESSAGE]
        names = {line.participant_id: line.name for line in summary.participants}
        return [describe_transfer(transfer, names) for transfer in summary.transfers]
