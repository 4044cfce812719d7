"""Mini README: Tests for the FastAPI dashboard and JSON routes.

Structure:
    * dashboard tests - rendering, edit mode and fallback messages.
    * mutation tests - create, update and delete routes with their failures.
    * read tests - single transaction, balance and export download.

Each test builds its own application around a fresh seeded ledger so the
in-memory session state never leaks between tests.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from budgetapp.finance import Ledger
from budgetapp.interface import create_application

BILLS = {"date": "2023-02-01", "amount": "200", "type": "expense", "category": "bills"}


@pytest.fixture()
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture()
def client(ledger: Ledger) -> TestClient:
    return TestClient(create_application(ledger=ledger))


def test_dashboard_renders_transactions_and_balance(client: TestClient) -> None:
    """The dashboard lists seeded entries and the formatted balance."""

    response = client.get("/")

    assert response.status_code == 200
    assert "Add Transaction" in response.text
    assert "groceries" in response.text
    assert "Total Balance: $950.00" in response.text


def test_dashboard_edit_mode_prefills_form(client: TestClient) -> None:
    """Edit mode fills the form from the chosen transaction."""

    response = client.get("/", params={"edit": 2})

    assert response.status_code == 200
    assert "Update Transaction" in response.text
    assert 'value="2023-01-10"' in response.text


def test_dashboard_unknown_edit_falls_back_to_create(client: TestClient) -> None:
    """Unknown edit ids show a message and keep create mode."""

    response = client.get("/", params={"edit": 99})

    assert response.status_code == 200
    assert "Add Transaction" in response.text
    assert "Transaction 99 not found" in response.text


def test_create_transaction_returns_notification(client: TestClient, ledger: Ledger) -> None:
    """Creating returns the new entry, its notification and the balance."""

    response = client.post("/transactions", data=BILLS)

    assert response.status_code == 201
    body = response.json()
    assert body["transaction"]["id"] == 3
    assert body["notification"]["kind"] == "added"
    assert body["balance"] == pytest.approx(750.0)
    assert len(ledger) == 3
    assert "Transaction Added" in client.get("/").text


def test_create_transaction_rejects_missing_field(client: TestClient, ledger: Ledger) -> None:
    """Empty fields are rejected with 400, stored nowhere, and reported on the dashboard."""

    response = client.post("/transactions", data={**BILLS, "category": ""})

    assert response.status_code == 400
    assert "category" in response.json()["detail"]
    assert len(ledger) == 2
    # Jinja escapes the quotes around the field name.
    assert "Field &#39;category&#39; is required." in client.get("/").text


def test_update_transaction(client: TestClient) -> None:
    """Updating keeps the id and table order while moving the balance."""

    response = client.put(
        "/transactions/1",
        data={"date": "2023-01-01", "amount": "1100", "type": "income", "category": "salary"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["transaction"]["id"] == 1
    assert body["notification"]["kind"] == "updated"
    assert body["balance"] == pytest.approx(1050.0)
    assert [entry["id"] for entry in client.get("/transactions").json()["transactions"]] == [1, 2]


def test_update_unknown_transaction_is_404(client: TestClient) -> None:
    """Updating an unknown id answers 404."""

    response = client.put("/transactions/99", data=BILLS)

    assert response.status_code == 404


def test_delete_transaction(client: TestClient) -> None:
    """Deleting removes the entry and reports the new balance."""

    response = client.delete("/transactions/2")

    assert response.status_code == 200
    assert response.json()["notification"]["kind"] == "deleted"
    listing = client.get("/transactions").json()
    assert [entry["id"] for entry in listing["transactions"]] == [1]
    assert listing["balance"] == pytest.approx(1000.0)


def test_delete_unknown_transaction_is_404(client: TestClient) -> None:
    """Deleting an unknown id answers 404 and tells the dashboard why."""

    response = client.delete("/transactions/42")

    assert response.status_code == 404
    assert response.json()["detail"] == "Transaction 42 not found"
    assert "Transaction 42 not found" in client.get("/").text


def test_get_transaction(client: TestClient) -> None:
    """Single transactions are served by id, unknown ids answer 404."""

    assert client.get("/transactions/1").json()["category"] == "salary"
    assert client.get("/transactions/7").status_code == 404


def test_balance_route(client: TestClient) -> None:
    """The balance route reports the balance and totals."""

    body = client.get("/balance").json()

    assert body["balance"] == pytest.approx(950.0)
    assert body["summary"]["transaction_count"] == 2


def test_export_download(client: TestClient, ledger: Ledger) -> None:
    """The export route serves the ledger as a JSON attachment."""

    response = client.get("/export")

    assert response.status_code == 200
    assert response.headers["content-disposition"] == 'attachment; filename="transactions.json"'
    assert response.headers["content-type"].startswith("application/json")
    assert json.loads(response.content) == [
        transaction.as_dict() for transaction in ledger.list_transactions()
    ]
