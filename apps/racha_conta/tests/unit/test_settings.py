from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from racha_conta.core.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SETTLED_EPSILON", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.settled_epsilon == Decimal("0.01")
    assert settings.log_level == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SETTLED_EPSILON", "0.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.settled_epsilon == Decimal("0.5")
    assert settings.log_level == "DEBUG"


def test_rejects_non_positive_epsilon(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SETTLED_EPSILON", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
