"""Mini README: Finance core for the budgeting app.

This package holds the session ledger that records income and expense
transactions, the errors its operations raise, and the notification bus it
publishes to. Everything here is in-memory and free of web dependencies so
it can be driven directly from tests or scripts.
"""

from .errors import LedgerError, NotFoundError, ValidationError
from .ledger import SUGGESTED_CATEGORIES, Ledger, Transaction, TransactionType
from .notifications import Notification, NotificationBus, NotificationKind

__all__ = [
    "Ledger",
    "LedgerError",
    "NotFoundError",
    "Notification",
    "NotificationBus",
    "NotificationKind",
    "SUGGESTED_CATEGORIES",
    "Transaction",
    "TransactionType",
    "ValidationError",
]
