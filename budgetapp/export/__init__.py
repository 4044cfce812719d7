"""Mini README: Export utilities for budgeting data.

Exposes the JSON exporter that turns the ledger into a ``transactions.json``
download. Further formats (CSV, spreadsheets) can live alongside it.
"""

from .json_exporter import DEFAULT_EXPORT_FILENAME, ExportPayload, TransactionExporter

__all__ = ["DEFAULT_EXPORT_FILENAME", "ExportPayload", "TransactionExporter"]
