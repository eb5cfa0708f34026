from racha_conta.domain.errors import (
    InvalidRequestError,
    NoOutstandingDebtError,
    ParticipantNotFoundError,
    compose_error_message,
)


def test_compose_error_message() -> None:
    assert (
        compose_error_message(cause="Bad input.", action="Fix it.")
        == "Cause: Bad input. Action: Fix it."
    )


def test_default_messages_and_codes() -> None:
    errors = [InvalidRequestError(), ParticipantNotFoundError(), NoOutstandingDebtError()]

    assert [error.code for error in errors] == [
        "INVALID_REQUEST",
        "PARTICIPANT_NOT_FOUND",
        "NO_OUTSTANDING_DEBT",
    ]
    assert all(str(error).startswith("Cause: ") for error in errors)
    assert all(error.details == {} for error in errors)


def test_details_are_kept() -> None:
    error = ParticipantNotFoundError(details={"participant_ids": ["x"]})

    assert error.details == {"participant_ids": ["x"]}
