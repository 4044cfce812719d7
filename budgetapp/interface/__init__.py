"""Mini README: Interactive interfaces for the budgeting app.

Exports the FastAPI application factory that powers the browser-based
dashboard. Future interface modules should live alongside this module.
"""

from .web_app import create_application

__all__ = ["create_application"]
