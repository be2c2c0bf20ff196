"""Status commands for the cliauth CLI."""

from __future__ import annotations

import json
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from cliauth.auth import build_claude_diagnostics, check_auth_status
from cliauth.auth.types import AuthStatus, Provider

from . import fetch_remote

console = Console()


def _local_row(result: AuthStatus) -> dict[str, Any]:
    # Same field names as the server response.
    row = result.to_dict()
    row["email"] = row.pop("identity")
    return row


def _collect(providers: list[Provider], url: Optional[str]) -> dict[str, dict[str, Any]]:
    if url:
        return fetch_remote(url, lambda client: {p.value: client.get_status(p) for p in providers})
    return {p.value: _local_row(check_auth_status(p)) for p in providers}


def status(
    provider: Optional[Provider] = typer.Argument(None, help="Provider to check (default: all)"),
    url: Optional[str] = typer.Option(None, "--url", help="Ask a running cliauth server instead of checking locally"),
    raw: bool = typer.Option(False, "--raw", help="Show raw CLI output where available"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Show which coding CLIs are logged in."""
    providers = [provider] if provider else list(Provider)
    rows = _collect(providers, url)

    if as_json:
        if not raw:
            for row in rows.values():
                row.pop("raw_output", None)
        typer.echo(json.dumps(rows, indent=2))
    else:
        table = Table()
        table.add_column("Provider", style="cyan")
        table.add_column("Status")
        table.add_column("Account")
        table.add_column("Detail", max_width=50)

        for name, row in rows.items():
            if row.get("authenticated"):
                table.add_row(name, "[green]authenticated[/green]", row.get("email") or "", row.get("method") or "")
            else:
                table.add_row(name, "[yellow]not authenticated[/yellow]", "", row.get("error") or "")
        console.print(table)

        if raw:
            for name, row in rows.items():
                if row.get("raw_output"):
                    console.print(f"\n[bold]{name} output:[/bold]")
                    console.print(row["raw_output"].rstrip(), markup=False)

    if provider and not rows[provider.value].get("authenticated"):
        raise typer.Exit(1)


def debug_auth(
    url: Optional[str] = typer.Option(None, "--url", help="Ask a running cliauth server instead of checking locally"),
) -> None:
    """Show how Claude credentials are resolved (no secrets)."""
    if url:
        report = fetch_remote(url, lambda client: client.get_diagnostics())
    else:
        report = build_claude_diagnostics()
    typer.echo(json.dumps(report, indent=2))
