"""Server command for the cliauth CLI."""

from __future__ import annotations

import logging

import typer

from cliauth.config import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT


def serve(
    host: str = typer.Option(DEFAULT_HOST, envvar="CLIAUTH_HOST", help="Interface to bind"),
    port: int = typer.Option(DEFAULT_PORT, envvar="CLIAUTH_PORT", help="Port to listen on"),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, envvar="CLIAUTH_LOG_LEVEL", help="Logging level"),
) -> None:
    """Serve the status endpoints over HTTP."""
    import uvicorn

    from cliauth.server import app

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
