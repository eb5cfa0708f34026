"""Net balance per participant."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from racha_conta.domain.models import Expense, Participant
from racha_conta.domain.money import ZERO, quiet_context


def compute_balances(
    participants: Sequence[Participant],
    expenses: Iterable[Expense],
) -> dict[str, Decimal]:
    """Return signed balance per participant id, positive meaning is owed.

    Every participant gets an entry, zero when untouched. Expense ids missing
    from ``participants`` are skipped one by one: an unknown participant's
    share is neither debited nor credited to the payer, and an unknown payer
    receives nothing. Such ledgers do not sum to zero. Non-finite amounts do
    not raise: opposite infinities meet as NaN.
    """

    balances: dict[str, Decimal] = {participant.id: ZERO for participant in participants}

    with quiet_context():
        for expense in expenses:
            if not expense.participant_ids:
                continue

            share = expense.share()
            for participant_id in expense.participant_ids:
                if participant_id not in balances:
                    continue
                if participant_id == expense.paid_by_id:
                    continue
                if expense.paid_by_id in balances:
                    balances[expense.paid_by_id] += share
                balances[participant_id] -= share

    return balances
