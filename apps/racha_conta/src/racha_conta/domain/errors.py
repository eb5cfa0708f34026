"""Domain exceptions used by the input boundary, services and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidRequestError(DomainError):
    """Raised when a ledger document or query is semantically invalid."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_REQUEST",
            message=message
            or compose_error_message(
                cause="Ledger data violates input rules.",
                action="Adjust the input fields and try again.",
            ),
            details=details or {},
        )


class ParticipantNotFoundError(DomainError):
    """Raised when a command references an id outside the participant list."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="PARTICIPANT_NOT_FOUND",
            message=message
            or compose_error_message(
                cause="Participant is not part of this ledger.",
                action="Use one of the participant ids listed in the ledger.",
            ),
            details=details or {},
        )


class NoOutstandingDebtError(DomainError):
    """Raised when a settlement is requested for a pair that owes nothing."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="NO_OUTSTANDING_DEBT",
            message=message
            or compose_error_message(
                cause="There is no outstanding debt in this direction.",
                action="Check debtor and creditor ids against the current debts.",
            ),
            details=details or {},
        )
