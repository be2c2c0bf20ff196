"""CLI command modules."""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console

from cliauth.exceptions import APIError

_console = Console()


def fetch_remote(url: str, fetch: Any) -> Any:
    """Call ``fetch(client)`` against a cliauth server, or exit with an error message."""
    import httpx

    from cliauth.client import CliAuthClient

    try:
        with CliAuthClient(url) as client:
            return fetch(client)
    except (APIError, httpx.HTTPError) as e:
        _console.print(f"[red]Could not reach cliauth server at {url}: {e}[/red]")
        raise typer.Exit(1)
