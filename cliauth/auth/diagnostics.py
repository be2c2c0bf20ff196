"""Secret-free introspection of how the Claude credential file is resolved.

Only booleans, paths and JSON key names are reported. Values from the
environment or the credential file never appear in the report.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from ..exceptions import CredentialError
from .constants import (
    ANTHROPIC_API_KEY_ENV,
    CLAUDE_CREDENTIALS_PATH_ENV,
    CLAUDE_ENV_BLOCK,
    CLAUDE_LEGACY_TOKEN_KEY,
    CLAUDE_OAUTH_BLOCK,
)
from .credentials import read_credential_file
from .locator import claude_credentials_path, claude_credentials_source

logger = logging.getLogger(__name__)


def _file_content_report(data: dict[str, Any]) -> dict[str, Any]:
    oauth = data.get(CLAUDE_OAUTH_BLOCK)
    report: dict[str, Any] = {
        "keys": list(data.keys()),
        "has_claude_ai_oauth": bool(oauth),
        "has_access_token": bool(data.get(CLAUDE_LEGACY_TOKEN_KEY)),
        "has_env_block": isinstance(data.get(CLAUDE_ENV_BLOCK), dict),
    }
    if isinstance(oauth, dict):
        report["claude_ai_oauth_keys"] = list(oauth.keys())
    return report


def build_claude_diagnostics() -> dict[str, Any]:
    """Describe each stage of the Claude credential lookup.

    A failing stage records its own ``error`` and later stages are skipped;
    the report itself is always returned.
    """
    diagnostics: dict[str, Any] = {
        "env": {
            "claude_credentials_path_set": bool(os.environ.get(CLAUDE_CREDENTIALS_PATH_ENV)),
            "anthropic_api_key_set": bool(os.environ.get(ANTHROPIC_API_KEY_ENV)),
            "home": "",
        },
        "resolution": {},
        "file_access": {},
        "file_content": {},
    }

    try:
        diagnostics["env"]["home"] = str(Path.home())

        try:
            path = claude_credentials_path()
            diagnostics["resolution"]["source"] = claude_credentials_source()
            diagnostics["resolution"]["resolved_path"] = str(path)
        except (OSError, RuntimeError) as e:
            diagnostics["resolution"]["error"] = str(e)
            return diagnostics

        file_access = diagnostics["file_access"]
        try:
            file_access["exists"] = path.exists()
            file_access["readable"] = file_access["exists"] and os.access(path, os.R_OK)
            data = read_credential_file(path)
            diagnostics["file_content"] = _file_content_report(data)
        except (OSError, CredentialError) as e:
            file_access["error"] = str(e)
    except Exception as e:
        logger.exception("Error building Claude diagnostics")
        diagnostics["error"] = str(e) or type(e).__name__

    return diagnostics
