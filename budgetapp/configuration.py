"""Mini README: Centralised configuration models and helpers for the budgeting app.

Structure:
    * BudgetAppSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``BUDGETAPP_*`` environment variables (or a
    local ``.env`` file), choose the service address, and control demo seeding
    and export naming. The configuration is cached so validation runs once per
    process; tests call ``get_settings.cache_clear()`` after patching the
    environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgetAppSettings(BaseSettings):
    """Runtime configuration for the budgeting app."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web dashboard exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the launcher.",
    )
    seed_demo_transactions: bool = Field(
        True,
        description="Start each session with the two demo transactions (ids 1 and 2).",
    )
    export_filename: str = Field(
        "transactions.json",
        description="Suggested filename for the JSON export download.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts on the dashboard. Display only.",
    )
    notification_history: int = Field(
        5,
        description="Number of recent notifications kept for the dashboard.",
        ge=1,
    )

    class Config:
        env_prefix = "BUDGETAPP_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing of the standard logging level names."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown logging level: {value}")
        return normalised

    @validator("export_filename")
    def _require_json_suffix(cls, value: str) -> str:
        """Exports are JSON documents, so the suggested name must say so."""

        value = value.strip()
        if not value.lower().endswith(".json") or "/" in value or "\\" in value:
            raise ValueError("Export filename must be a bare name ending in .json")
        return value


@lru_cache()
def get_settings() -> BudgetAppSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetAppSettings()
