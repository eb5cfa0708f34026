"""Pydantic schemas for ledger documents and engine results."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from racha_conta.domain.errors import InvalidRequestError, compose_error_message
from racha_conta.domain.models import (
    DebtBreakdownItem,
    Expense,
    PairwiseDebt,
    Participant,
)
from racha_conta.domain.money import to_brl
from racha_conta.services.ledger_summary_service import ParticipantBalance


class ParticipantInput(BaseModel):
    """Participant entry of a ledger document."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Value cannot be blank.")
        return trimmed

    def to_domain(self) -> Participant:
        return Participant(id=self.id, name=self.name)


class ExpenseInput(BaseModel):
    """Expense entry of a ledger document.

    Ids are free-form: they may reference participants removed from the
    ledger, which the engine ignores.
    """

    id: str = Field(min_length=1)
    description: str | None = None
    amount: Decimal = Field(ge=0, allow_inf_nan=False)
    paid_by_id: str = Field(min_length=1)
    participant_ids: list[str] = Field(default_factory=list)
    date: dt.date | None = None
    is_settlement: bool = False

    def to_domain(self) -> Expense:
        return Expense(
            id=self.id,
            amount=self.amount,
            paid_by_id=self.paid_by_id,
            participant_ids=frozenset(self.participant_ids),
            description=self.description,
            date=self.date,
            is_settlement=self.is_settlement,
        )

    @classmethod
    def from_model(cls, expense: Expense) -> ExpenseInput:
        return cls(
            id=expense.id,
            description=expense.description,
            amount=expense.amount,
            paid_by_id=expense.paid_by_id,
            participant_ids=sorted(expense.participant_ids),
            date=expense.date,
            is_settlement=expense.is_settlement,
        )


class LedgerInput(BaseModel):
    """Participants and expenses snapshot fed to the engine."""

    participants: list[ParticipantInput] = Field(default_factory=list)
    expenses: list[ExpenseInput] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_participants(self) -> LedgerInput:
        seen: set[str] = set()
        for participant in self.participants:
            if participant.id in seen:
                raise ValueError(f"Duplicated participant id: {participant.id}.")
            seen.add(participant.id)
        return self

    def to_domain(self) -> tuple[list[Participant], list[Expense]]:
        return (
            [participant.to_domain() for participant in self.participants],
            [expense.to_domain() for expense in self.expenses],
        )


def load_ledger(payload: Mapping[str, Any]) -> LedgerInput:
    """Validate a raw ledger payload, raising InvalidRequestError on failure."""

    try:
        return LedgerInput.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRequestError(
            message=compose_error_message(
                cause="Ledger document validation failed.",
                action="Fix the invalid fields and load the ledger again.",
            ),
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc


class BalanceResponse(BaseModel):
    """Serialized balance of one participant."""

    participant_id: str
    name: str
    balance: str
    balance_brl: str

    @classmethod
    def from_model(cls, line: ParticipantBalance) -> BalanceResponse:
        return cls(
            participant_id=line.participant_id,
            name=line.name,
            balance=str(line.balance),
            balance_brl=to_brl(line.balance),
        )


class PairwiseDebtResponse(BaseModel):
    """Serialized pairwise debt."""

    debtor_id: str
    creditor_id: str
    amount: str
    amount_brl: str

    @classmethod
    def from_model(cls, debt: PairwiseDebt) -> PairwiseDebtResponse:
        return cls(
            debtor_id=debt.debtor_id,
            creditor_id=debt.creditor_id,
            amount=str(debt.amount),
            amount_brl=to_brl(debt.amount),
        )


class DebtBreakdownItemResponse(BaseModel):
    """Serialized breakdown line."""

    expense_id: str
    description: str
    date: dt.date | None
    total_amount: str
    owe_amount: str
    owe_amount_brl: str
    is_payer: bool

    @classmethod
    def from_model(cls, item: DebtBreakdownItem) -> DebtBreakdownItemResponse:
        return cls(
            expense_id=item.expense_id,
            description=item.description,
            date=item.date,
            total_amount=str(item.total_amount),
            owe_amount=str(item.owe_amount),
            owe_amount_brl=to_brl(item.owe_amount),
            is_payer=item.is_payer,
        )
