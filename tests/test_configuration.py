"""Mini README: Tests for environment-driven settings and the launcher CLI.

Structure:
    * test_defaults - documented defaults without environment overrides.
    * test_environment_overrides - BUDGETAPP_ variables are read and normalised.
    * test_invalid_values_rejected - out-of-range and malformed values fail.
    * test_application_honours_seed_and_export_settings - settings reach the app factory.
    * test_launcher_passes_settings_to_uvicorn - CLI flags reach uvicorn.
"""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

import budget_app
from budgetapp.configuration import BudgetAppSettings, get_settings
from budgetapp.interface import create_application


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults() -> None:
    """Unset environment yields the documented defaults."""

    settings = BudgetAppSettings()

    assert settings.interface_port == 8000
    assert settings.export_filename == "transactions.json"
    assert settings.seed_demo_transactions is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables override defaults and are normalised."""

    monkeypatch.setenv("BUDGETAPP_INTERFACE_PORT", "9001")
    monkeypatch.setenv("BUDGETAPP_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.interface_port == 9001
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("BUDGETAPP_INTERFACE_PORT", "70000"),
        ("BUDGETAPP_LOG_LEVEL", "chatty"),
        ("BUDGETAPP_EXPORT_FILENAME", "transactions.csv"),
        ("BUDGETAPP_NOTIFICATION_HISTORY", "0"),
    ],
)
def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    """Out-of-range or malformed values fail validation."""

    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        BudgetAppSettings()


def test_application_honours_seed_and_export_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """The app factory seeds and names exports according to settings."""

    monkeypatch.setenv("BUDGETAPP_SEED_DEMO_TRANSACTIONS", "false")
    monkeypatch.setenv("BUDGETAPP_EXPORT_FILENAME", "session.json")

    client = TestClient(create_application())

    assert client.get("/transactions").json() == {"transactions": [], "balance": 0.0}
    assert 'filename="session.json"' in client.get("/export").headers["content-disposition"]


def test_launcher_passes_settings_to_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    """The CLI hands host, port and reload flags to uvicorn."""

    captured = {}
    monkeypatch.setattr(budget_app.uvicorn, "run", lambda target, **kwargs: captured.update(kwargs, target=target))

    result = CliRunner().invoke(budget_app.cli, ["--port", "8123", "--production"])

    assert result.exit_code == 0, result.output
    assert "http://127.0.0.1:8123" in result.output
    assert captured["target"] == "budgetapp.interface.web_app:create_application"
    assert captured["port"] == 8123
    assert captured["factory"] is True
    assert captured["reload"] is False
