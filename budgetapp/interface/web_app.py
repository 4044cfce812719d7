"""Mini README: FastAPI-powered dashboard for the budgeting app.

Structure:
    * create_application - application factory wiring routes and templates.
    * Dashboard state - in-memory message feed fed by ledger notifications.

The dashboard renders the transaction form (create or edit mode), the
transaction table, the running balance and an export button. JSON routes
mirror each ledger operation so the page script (and tests) can drive the
ledger directly. One ledger lives for the lifetime of the process.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Deque, Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..export import TransactionExporter
from ..finance import (
    SUGGESTED_CATEGORIES,
    Ledger,
    LedgerError,
    NotFoundError,
    Notification,
    NotificationBus,
    Transaction,
    TransactionType,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

EMPTY_FORM = {"date": "", "amount": "", "type": "income", "category": "salary"}


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application with routes and a session ledger."""

    settings = get_settings()
    app = FastAPI(title="Budgeting App", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    if ledger is None:
        ledger = Ledger(
            transactions=None if settings.seed_demo_transactions else [],
            notifications=NotificationBus(max_history=settings.notification_history),
            exporter=TransactionExporter(filename=settings.export_filename),
        )

    dashboard_state: Dict[str, Deque[str]] = {
        "messages": deque(
            ["Record income or expenses with the form to begin."],
            maxlen=settings.notification_history,
        )
    }

    def _surface(notification: Notification) -> None:
        dashboard_state["messages"].appendleft(notification.title)

    ledger.notifications.subscribe(_surface)

    def _reject(error: LedgerError) -> HTTPException:
        """Surface a failed operation to the user and map it to an HTTP status."""

        status_code = 404 if isinstance(error, NotFoundError) else 400
        dashboard_state["messages"].appendleft(str(error))
        return HTTPException(status_code=status_code, detail=str(error))

    def _mutation_payload(transaction: Transaction) -> Dict[str, object]:
        latest = ledger.notifications.latest()
        return {
            "transaction": transaction.as_dict(),
            "notification": latest.as_dict() if latest else None,
            "balance": ledger.balance(),
        }

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request, edit: Optional[int] = None) -> HTMLResponse:
        """Render the dashboard, pre-filling the form when editing."""

        form = dict(EMPTY_FORM)
        editing_id: Optional[int] = None
        if edit is not None:
            try:
                record = ledger.get_transaction(edit).as_dict()
            except NotFoundError as error:
                LOGGER.warning("Edit requested for unknown transaction %s", edit)
                dashboard_state["messages"].appendleft(str(error))
            else:
                editing_id = edit
                form = {name: str(record[name]) for name in EMPTY_FORM}
        summary = ledger.summarise()
        LOGGER.debug(
            "Rendering dashboard with %s transactions, balance %.2f",
            summary["transaction_count"],
            summary["balance"],
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "transactions": [transaction.as_dict() for transaction in ledger.list_transactions()],
                "form": form,
                "editing_id": editing_id,
                "transaction_types": [member.value for member in TransactionType],
                "categories": SUGGESTED_CATEGORIES,
                "summary": summary,
                "messages": list(dashboard_state["messages"]),
                "currency_symbol": settings.currency_symbol,
            },
        )

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return every transaction in display order with the balance."""

        return JSONResponse(
            {
                "transactions": [transaction.as_dict() for transaction in ledger.list_transactions()],
                "balance": ledger.balance(),
            }
        )

    @app.get("/transactions/{transaction_id}")
    async def get_transaction(transaction_id: int) -> JSONResponse:
        """Return one transaction, used to pre-fill the edit form."""

        try:
            transaction = ledger.get_transaction(transaction_id)
        except NotFoundError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(transaction.as_dict())

    @app.post("/transactions")
    async def create_transaction(
        date: str = Form(""),
        amount: str = Form(""),
        transaction_type: str = Form("", alias="type"),
        category: str = Form(""),
    ) -> JSONResponse:
        """Add a transaction from the submitted form."""

        fields = {"date": date, "amount": amount, "type": transaction_type, "category": category}
        try:
            transaction = ledger.add(fields)
        except LedgerError as error:
            raise _reject(error) from error
        return JSONResponse(_mutation_payload(transaction), status_code=201)

    @app.put("/transactions/{transaction_id}")
    async def update_transaction(
        transaction_id: int,
        date: str = Form(""),
        amount: str = Form(""),
        transaction_type: str = Form("", alias="type"),
        category: str = Form(""),
    ) -> JSONResponse:
        """Replace an existing transaction with the submitted form."""

        fields = {"date": date, "amount": amount, "type": transaction_type, "category": category}
        try:
            transaction = ledger.update(transaction_id, fields)
        except LedgerError as error:
            raise _reject(error) from error
        return JSONResponse(_mutation_payload(transaction))

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: int) -> JSONResponse:
        """Remove a transaction from the ledger."""

        try:
            transaction = ledger.delete(transaction_id)
        except LedgerError as error:
            raise _reject(error) from error
        return JSONResponse(_mutation_payload(transaction))

    @app.get("/balance")
    async def balance() -> JSONResponse:
        """Return the running balance and the dashboard totals."""

        return JSONResponse({"balance": ledger.balance(), "summary": ledger.summarise()})

    @app.get("/export")
    async def export_transactions() -> Response:
        """Deliver the ledger as a ``transactions.json`` download."""

        payload = ledger.export()
        return Response(
            content=payload.content,
            media_type=payload.media_type,
            headers={"Content-Disposition": payload.content_disposition()},
        )

    return app
