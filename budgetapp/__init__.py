"""Mini README: Core package initializer for the budgeting app.

This module exposes convenience imports so other parts of the application
can reach shared helpers without knowing the exact module structure. It
stays lightweight so importing the ledger never pulls in the web stack.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
