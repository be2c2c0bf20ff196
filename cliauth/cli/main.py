"""Main entry point for the cliauth CLI."""

from __future__ import annotations

try:
    import typer
except ImportError:
    import sys

    print("cliauth CLI requires extras: pip install cliauth[cli]")
    sys.exit(1)

from .commands import serve, status

app = typer.Typer(
    name="cliauth",
    help="cliauth - Check which coding CLIs are logged in",
    no_args_is_help=True,
)

app.command(name="status")(status.status)
app.command(name="debug-auth")(status.debug_auth)
app.command(name="serve")(serve.serve)


def _version_callback(value: bool) -> None:
    """Handle --version and exit early."""
    if value:
        from cliauth import __version__

        typer.echo(f"cliauth {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the CLI version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """cliauth CLI root callback."""
    _ = version


@app.command()
def version() -> None:
    """Show the CLI version."""
    from cliauth import __version__

    typer.echo(f"cliauth {__version__}")


if __name__ == "__main__":
    app()
