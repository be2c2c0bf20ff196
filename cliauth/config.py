"""Configuration helpers for the cliauth server and client."""

from __future__ import annotations

import os

# Server settings are read from the environment by the serve command.
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_SERVER_URL = os.environ.get("CLIAUTH_SERVER_URL", f"http://{DEFAULT_HOST}:{DEFAULT_PORT}")

# Must exceed the Cursor probe timeout so the server can answer first.
DEFAULT_TIMEOUT_SECONDS = 10.0


def sanitize_base_url(url: str) -> str:
    """Ensure the base URL never ends with a trailing slash."""

    return url.rstrip("/")
