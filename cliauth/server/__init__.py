"""HTTP status endpoints for cliauth."""

from .app import app, create_app

__all__ = ["app", "create_app"]
