"""Domain records consumed and produced by the debt-netting engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

NO_DESCRIPTION = "no description"


@dataclass(frozen=True, slots=True)
class Participant:
    """Group member; identity is the id, name is presentational."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Expense:
    """Amount paid by one participant and split equally among participant_ids.

    Ids are not checked against any participant list. Engine components decide
    how unknown ids are treated.
    """

    id: str
    amount: Decimal
    paid_by_id: str
    participant_ids: frozenset[str] = field(default_factory=frozenset)
    description: str | None = None
    date: date | None = None
    is_settlement: bool = False

    def share(self) -> Decimal:
        """Return the equal share of each participant.

        Callers must skip expenses without participants before asking for it.
        """
        return self.amount / len(self.participant_ids)


@dataclass(frozen=True, slots=True)
class PairwiseDebt:
    """Net amount debtor owes creditor after netting both directions."""

    debtor_id: str
    creditor_id: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class DebtBreakdownItem:
    """One expense linking the two queried participants."""

    expense_id: str
    description: str
    date: date | None
    total_amount: Decimal
    owe_amount: Decimal
    is_payer: bool
