"""Mini README: Serialise ledger transactions into a downloadable JSON file.

Structure:
    * ExportPayload - bytes plus the filename and media type to deliver them with.
    * TransactionExporter - renders transactions as pretty-printed UTF-8 JSON.

The exporter is a pure transform. Delivering the payload (an HTTP download,
a file on disk) belongs to the caller, which keeps the ledger usable from
tests and scripts without a browser.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from ..logging_utils import get_logger

if TYPE_CHECKING:
    from ..finance.ledger import Transaction

LOGGER = get_logger(__name__)

DEFAULT_EXPORT_FILENAME = "transactions.json"


@dataclass(slots=True, frozen=True)
class ExportPayload:
    """Serialised export ready to hand to a download mechanism."""

    filename: str
    content: bytes
    media_type: str = "application/json"

    def content_disposition(self) -> str:
        """Header value prompting browsers to save the payload as a file."""

        return f'attachment; filename="{self.filename}"'


class TransactionExporter:
    """Render transactions as an ordered, pretty-printed JSON array."""

    def __init__(self, filename: str = DEFAULT_EXPORT_FILENAME, indent: int = 2) -> None:
        self.filename = filename
        self.indent = indent

    def render(self, transactions: Iterable["Transaction"]) -> ExportPayload:
        """Serialise transactions in the order given."""

        records = [transaction.as_dict() for transaction in transactions]
        document = json.dumps(records, indent=self.indent, ensure_ascii=False)
        content = document.encode("utf-8")
        LOGGER.info(
            "Rendered export %s with %s transactions (%s bytes)",
            self.filename,
            len(records),
            len(content),
        )
        return ExportPayload(filename=self.filename, content=content)
