"""Mini README: Entry point CLI for launching the Atlas route planner.

This script exposes a Typer CLI that starts the FastAPI planner with
configurable host, port, and production flags. Unset options fall back to
``ATLAS_*`` environment variables through the shared settings model.
"""

from __future__ import annotations

import typer
import uvicorn

from atlas.configuration import get_settings
from atlas.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the Atlas flight-route planner.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the 0.0.0.0 wildcard, so point at loopback.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Atlas on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "atlas.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
