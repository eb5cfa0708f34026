"""Directed debt per pair of participants, netted in both directions."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from decimal import Decimal

from racha_conta.domain.models import Expense, PairwiseDebt, Participant
from racha_conta.domain.money import ZERO, quiet_context


def accumulate_owed(expenses: Iterable[Expense]) -> dict[tuple[str, str], Decimal]:
    """Sum what each id owes each payer, keyed by ``(debtor_id, creditor_id)``.

    Ids are not filtered here, unknown participants included.
    """

    owed: defaultdict[tuple[str, str], Decimal] = defaultdict(lambda: ZERO)
    with quiet_context():
        for expense in expenses:
            if not expense.participant_ids:
                continue

            share = expense.share()
            for participant_id in expense.participant_ids:
                if participant_id == expense.paid_by_id:
                    continue
                owed[(participant_id, expense.paid_by_id)] += share
    return dict(owed)


def compute_pairwise_debts(
    participants: Sequence[Participant],
    expenses: Iterable[Expense],
) -> list[PairwiseDebt]:
    """Return at most one positive debt per pair of known participants.

    Pairs are visited in participant order. Debts are never rerouted through a
    third participant: A owing B and B owing C stay two separate entries.
    A pair whose totals cannot be ordered (NaN, or equal infinities) gets no
    entry.
    """

    owed = accumulate_owed(expenses)
    debts: list[PairwiseDebt] = []
    with quiet_context():
        for index, first in enumerate(participants):
            for second in participants[index + 1 :]:
                first_owes = owed.get((first.id, second.id), ZERO)
                second_owes = owed.get((second.id, first.id), ZERO)
                if first_owes > second_owes:
                    debts.append(
                        PairwiseDebt(
                            debtor_id=first.id,
                            creditor_id=second.id,
                            amount=first_owes - second_owes,
                        )
                    )
                elif second_owes > first_owes:
                    debts.append(
                        PairwiseDebt(
                            debtor_id=second.id,
                            creditor_id=first.id,
                            amount=second_owes - first_owes,
                        )
                    )
    return debts
