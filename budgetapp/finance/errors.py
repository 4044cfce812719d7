"""Mini README: Exceptions raised by ledger operations.

Both concrete errors also derive from the builtin the ledger historically
raised (``ValueError`` for bad input, ``LookupError`` for unknown ids), so
callers catching the builtins keep working.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for failures of a single ledger operation."""


class ValidationError(LedgerError, ValueError):
    """A transaction field is missing, empty, malformed or unsupported."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(LedgerError, LookupError):
    """An operation referenced a transaction id the ledger does not hold."""

    def __init__(self, transaction_id: int) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id
