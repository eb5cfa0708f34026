"""CLI for running the debt-netting engine over a JSON ledger file."""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import typer

from racha_conta.application.schemas.ledger import (
    BalanceResponse,
    DebtBreakdownItemResponse,
    ExpenseInput,
    LedgerInput,
    PairwiseDebtResponse,
    load_ledger,
)
from racha_conta.core.logging import configure_logging
from racha_conta.core.settings import get_settings
from racha_conta.domain.errors import (
    DomainError,
    InvalidRequestError,
    ParticipantNotFoundError,
    compose_error_message,
)
from racha_conta.domain.money import to_brl
from racha_conta.services.debt_breakdown_service import get_debt_breakdown
from racha_conta.services.ledger_summary_service import LedgerSummaryService
from racha_conta.services.settlement_service import settle_pair

app = typer.Typer(help="CLI for settling shared expenses inside a group.")
INPUT_FILE_OPTION = typer.Option(..., exists=True, dir_okay=False)
JSON_OPTION = typer.Option(False, "--json", help="Print JSON instead of text.")


@contextmanager
def _report_domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1) from exc


def _read_ledger(path: Path) -> LedgerInput:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidRequestError(
            message=compose_error_message(
                cause=f"{path.name} is not valid UTF-8 JSON.",
                action="Fix the ledger file syntax and try again.",
            )
        ) from exc
    return load_ledger(payload)


def _summary_service() -> LedgerSummaryService:
    return LedgerSummaryService(settled_epsilon=get_settings().settled_epsilon)


@app.callback()
def main_callback() -> None:
    """Settle shared expenses: balances, pairwise debts and breakdowns."""
    configure_logging(get_settings().log_level)


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("racha-conta is ready")


@app.command("balances")
def balances(input: Path = INPUT_FILE_OPTION, as_json: bool = JSON_OPTION) -> None:
    """Print the net balance of every participant."""
    with _report_domain_errors():
        participants, expenses = _read_ledger(input).to_domain()
        summary = _summary_service().get_summary(participants, expenses)

    if as_json:
        payload = [
            BalanceResponse.from_model(line).model_dump(mode="json")
            for line in summary.participants
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    for line in summary.participants:
        typer.echo(f"{line.name}: {to_brl(line.balance)}")


@app.command("debts")
def debts(input: Path = INPUT_FILE_OPTION, as_json: bool = JSON_OPTION) -> None:
    """Print who should pay whom, one line per pair."""
    with _report_domain_errors():
        participants, expenses = _read_ledger(input).to_domain()
        service = _summary_service()
        summary = service.get_summary(participants, expenses)

    if as_json:
        payload = [
            PairwiseDebtResponse.from_model(transfer).model_dump(mode="json")
            for transfer in summary.transfers
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    for line in service.render_lines(summary):
        typer.echo(line)


@app.command("breakdown")
def breakdown(
    input: Path = INPUT_FILE_OPTION,
    user1: str = typer.Option(..., help="Participant seen as the payer side."),
    user2: str = typer.Option(..., help="Counterpart participant."),
    as_json: bool = JSON_OPTION,
) -> None:
    """Explain which expenses make up the debt between two participants."""
    if user1 == user2:
        raise typer.BadParameter("--user1 and --user2 must differ.")

    with _report_domain_errors():
        participants, expenses = _read_ledger(input).to_domain()
        known_ids = {participant.id for participant in participants}
        missing = [pid for pid in (user1, user2) if pid not in known_ids]
        if missing:
            raise ParticipantNotFoundError(details={"participant_ids": missing})
        items = get_debt_breakdown(user1, user2, expenses)

    if as_json:
        payload = [
            DebtBreakdownItemResponse.from_model(item).model_dump(mode="json")
            for item in items
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    if not items:
        typer.echo("Nenhuma despesa entre os participantes.")
        return
    for item in items:
        sign = "+" if item.is_payer else "-"
        day = item.date.isoformat() if item.date else "sem data"
        typer.echo(
            f"{day} {item.description}: {sign}{to_brl(item.owe_amount)}"
            f" (total {to_brl(item.total_amount)})"
        )


@app.command("settle")
def settle(
    input: Path = INPUT_FILE_OPTION,
    debtor: str = typer.Option(..., help="Participant who pays."),
    creditor: str = typer.Option(..., help="Participant who receives."),
    on: datetime | None = typer.Option(
        None, "--date", formats=["%Y-%m-%d"], help="Settlement date."
    ),
    write: bool = typer.Option(False, "--write", help="Append to the ledger file."),
) -> None:
    """Record a settlement expense that cancels the debt of a pair."""
    with _report_domain_errors():
        ledger = _read_ledger(input)
        participants, expenses = ledger.to_domain()
        settlement = settle_pair(
            participants,
            expenses,
            debtor_id=debtor,
            creditor_id=creditor,
            on=on.date() if on else None,
        )

    settlement_input = ExpenseInput.from_model(settlement)
    if write:
        ledger.expenses.append(settlement_input)
        input.write_text(
            json.dumps(ledger.model_dump(mode="json"), indent=2) + "\n",
            encoding="utf-8",
        )
    typer.echo(json.dumps(settlement_input.model_dump(mode="json"), indent=2))


def main() -> None:
    """Run the racha-conta CLI application."""
    app()


if __name__ == "__main__":
    main()
