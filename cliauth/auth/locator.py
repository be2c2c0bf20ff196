"""Credential file locations for each provider.

Paths follow the conventions of the tools that own the files:
``~/.claude/.credentials.json`` (overridable with ``CLAUDE_CREDENTIALS_PATH``)
and ``~/.codex/auth.json``. The environment is read on every call.
"""

from __future__ import annotations

import os
from pathlib import Path

from .constants import (
    CLAUDE_CONFIG_DIR,
    CLAUDE_CREDENTIALS_FILE,
    CLAUDE_CREDENTIALS_PATH_ENV,
    CODEX_AUTH_FILE,
    CODEX_CONFIG_DIR,
    HOME_SHORTHAND,
)
from .types import Provider


def claude_credentials_source() -> str:
    """Return ``"env"`` when the path override is set, else ``"default"``."""
    return "env" if os.environ.get(CLAUDE_CREDENTIALS_PATH_ENV) else "default"


def claude_credentials_path() -> Path:
    override = os.environ.get(CLAUDE_CREDENTIALS_PATH_ENV)
    if override:
        if override.startswith(HOME_SHORTHAND):
            return Path.home() / override[len(HOME_SHORTHAND):]
        return Path(override)
    return Path.home() / CLAUDE_CONFIG_DIR / CLAUDE_CREDENTIALS_FILE


def codex_auth_path() -> Path:
    return Path.home() / CODEX_CONFIG_DIR / CODEX_AUTH_FILE


def locate(provider: Provider | str) -> Path:
    """Resolve the credential file path for a file-based provider.

    Raises:
        ValueError: If the provider does not keep a credential file.
    """
    provider = Provider(provider)
    if provider is Provider.CLAUDE:
        return claude_credentials_path()
    if provider is Provider.CODEX:
        return codex_auth_path()
    raise ValueError(f"Provider {provider.value!r} has no credential file")
