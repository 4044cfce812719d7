"""Mini README: In-memory finance ledger supporting income and expenses.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable record of one income or expense event.
    * Ledger - ordered collection offering add, update, delete, balance and export.

The ledger lives for one session and is never persisted. Form input arrives
as string-valued mappings (``date``, ``amount``, ``type``, ``category``)
which are validated and coerced before anything is stored, so a failed
operation leaves the ledger exactly as it was. Each successful mutation
publishes a notification on the ledger's bus for the UI to surface.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional

from ..export import ExportPayload, TransactionExporter
from ..logging_utils import get_logger
from .errors import NotFoundError, ValidationError
from .notifications import Notification, NotificationBus, NotificationKind

LOGGER = get_logger(__name__)

FIELD_NAMES = ("date", "amount", "type", "category")
SUGGESTED_CATEGORIES = ("salary", "groceries", "bills")


class TransactionType(str, Enum):
    """Enumerate the supported transaction types."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValidationError(
                f"Unsupported transaction type: {value}", field="type"
            ) from error


@dataclass(slots=True, frozen=True)
class Transaction:
    """Represent a single income or expense entry."""

    transaction_id: int
    occurred_on: str
    amount: float
    transaction_type: TransactionType
    category: str

    @property
    def signed_amount(self) -> float:
        """Contribution of this entry to the balance."""

        if self.transaction_type is TransactionType.INCOME:
            return self.amount
        return -self.amount

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the public field names."""

        return {
            "id": self.transaction_id,
            "date": self.occurred_on,
            "amount": self.amount,
            "type": self.transaction_type.value,
            "category": self.category,
        }


def _coerce_fields(fields: Mapping[str, object]) -> Dict[str, object]:
    """Validate form input and return constructor keyword arguments."""

    unsupported = sorted(set(fields) - set(FIELD_NAMES))
    if unsupported:
        raise ValidationError(
            f"Field '{unsupported[0]}' is not supported.", field=unsupported[0]
        )
    for name in FIELD_NAMES:
        value = fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"Field '{name}' is required.", field=name)

    category = fields["category"]
    occurred_on = fields["date"]
    for name, value in (("date", occurred_on), ("category", category)):
        if not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be provided as text.", field=name)
    return {
        "occurred_on": occurred_on.strip(),
        "amount": _parse_amount(fields["amount"]),
        "transaction_type": TransactionType.from_str(str(fields["type"])),
        "category": category.strip(),
    }


def _parse_amount(value: object) -> float:
    """Parse numbers or numeric strings into a non-negative finite float."""

    if isinstance(value, bool):
        raise ValidationError("Amount must be a number.", field="amount")
    try:
        amount = float(value.strip() if isinstance(value, str) else value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as error:
        raise ValidationError(f"Amount '{value}' is not a number.", field="amount") from error
    if not math.isfinite(amount):
        raise ValidationError("Amount must be a finite number.", field="amount")
    if amount < 0:
        raise ValidationError("Amount must not be negative.", field="amount")
    return amount


class Ledger:
    """Manage the session's ordered collection of transactions."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        notifications: Optional[NotificationBus] = None,
        exporter: Optional[TransactionExporter] = None,
    ) -> None:
        # Keyed by id; dict order doubles as display order.
        self._transactions: Dict[int, Transaction] = {}
        self.notifications = notifications or NotificationBus()
        self._exporter = exporter or TransactionExporter()
        if transactions is None:
            self._seed_demo_transactions()
        else:
            for transaction in transactions:
                self._register(transaction)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def _seed_demo_transactions(self) -> None:
        """Populate the ledger with the deterministic demo entries."""

        demo_transactions = [
            Transaction(
                transaction_id=1,
                occurred_on="2023-01-01",
                amount=1000.0,
                transaction_type=TransactionType.INCOME,
                category="salary",
            ),
            Transaction(
                transaction_id=2,
                occurred_on="2023-01-10",
                amount=50.0,
                transaction_type=TransactionType.EXPENSE,
                category="groceries",
            ),
        ]
        for transaction in demo_transactions:
            self._register(transaction)

    def _register(self, transaction: Transaction) -> None:
        """Store a transaction ensuring identifiers remain unique."""

        if transaction.transaction_id in self._transactions:
            raise ValidationError(
                f"Transaction {transaction.transaction_id} already exists.", field="id"
            )
        self._transactions[transaction.transaction_id] = transaction

    def _next_id(self) -> int:
        """One past the highest id in use; an empty ledger starts at 1."""

        return max(self._transactions, default=0) + 1

    def _notify(self, kind: NotificationKind, transaction_id: int) -> None:
        self.notifications.publish(Notification(kind=kind, transaction_id=transaction_id))

    def __len__(self) -> int:
        return len(self._transactions)

    def list_transactions(self) -> List[Transaction]:
        """Return transactions in insertion order."""

        return list(self._transactions.values())

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        if transaction_id not in self._transactions:
            raise NotFoundError(transaction_id)
        return self._transactions[transaction_id]

    def add(self, fields: Mapping[str, object]) -> Transaction:
        """Validate form fields and append a new transaction."""

        try:
            coerced = _coerce_fields(fields)
        except ValidationError as error:
            LOGGER.warning("Rejected new transaction: %s", error)
            raise
        transaction = Transaction(transaction_id=self._next_id(), **coerced)
        self._register(transaction)
        LOGGER.info(
            "Added %s transaction %s for %.2f",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.amount,
        )
        self._notify(NotificationKind.ADDED, transaction.transaction_id)
        return transaction

    def update(self, transaction_id: int, fields: Mapping[str, object]) -> Transaction:
        """Replace the transaction with ``transaction_id`` keeping its position."""

        try:
            self.get_transaction(transaction_id)
            coerced = _coerce_fields(fields)
        except (NotFoundError, ValidationError) as error:
            LOGGER.warning("Rejected update of transaction %s: %s", transaction_id, error)
            raise
        updated = Transaction(transaction_id=transaction_id, **coerced)
        self._transactions[transaction_id] = updated
        LOGGER.info("Updated transaction %s", transaction_id)
        self._notify(NotificationKind.UPDATED, transaction_id)
        return updated

    def delete(self, transaction_id: int) -> Transaction:
        """Remove and return the transaction with ``transaction_id``."""

        try:
            removed = self.get_transaction(transaction_id)
        except NotFoundError as error:
            LOGGER.warning("Rejected deletion: %s", error)
            raise
        del self._transactions[transaction_id]
        LOGGER.info("Deleted transaction %s", transaction_id)
        self._notify(NotificationKind.DELETED, transaction_id)
        return removed

    def balance(self) -> float:
        """Income minus expenses across every transaction, computed on demand."""

        return sum(
            (transaction.signed_amount for transaction in self._transactions.values()), 0.0
        )

    def summarise(self) -> Dict[str, object]:
        """Aggregate totals for dashboard display."""

        income = 0.0
        expense = 0.0
        for transaction in self._transactions.values():
            if transaction.transaction_type is TransactionType.INCOME:
                income += transaction.amount
            else:
                expense += transaction.amount
        return {
            "transaction_count": len(self._transactions),
            "total_income": income,
            "total_expense": expense,
            "balance": income - expense,
        }

    def export(self) -> ExportPayload:
        """Serialise the full ordered ledger for download."""

        return self._exporter.render(self.list_transactions())
