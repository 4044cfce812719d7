"""Mini README: Entry point CLI for launching the budgeting app dashboard.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags. It configures logging at the
level drawn from settings and reads defaults from ``BUDGETAPP_*``
environment variables when available.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from budgetapp.configuration import get_settings
from budgetapp.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the budgeting app web dashboard.")


@cli.command()
def run(
    host: Optional[str] = typer.Option(None, help="Host interface to bind."),
    port: Optional[int] = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the wildcard bind address, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Budgeting App on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    if not production:
        typer.echo("Auto-reload is on; transactions reset whenever the server restarts.")
    uvicorn.run(
        "budgetapp.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    cli()
