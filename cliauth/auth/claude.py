"""Claude Code login status, read from its credential file."""

from __future__ import annotations

import logging
import time
from typing import Any

from ..exceptions import CredentialFileMalformed, CredentialFileUnreadable
from .constants import (
    CLAUDE_ENV_BLOCK,
    CLAUDE_ENV_TOKEN_KEYS,
    CLAUDE_OAUTH_BLOCK,
    IDENTITY_SETTINGS_JSON,
)
from .credentials import read_credential_file
from .locator import claude_credentials_path
from .types import AuthStatus, ClaudeCredentialState, ClaudeEvaluation

logger = logging.getLogger(__name__)


def _is_expired(expires_at: Any, now_ms: float) -> bool:
    # A missing or zero expiry means the token does not expire.
    if not expires_at:
        return False
    if isinstance(expires_at, str):
        try:
            expires_at = float(expires_at)
        except ValueError:
            return False
    if not isinstance(expires_at, (int, float)):
        return False
    # NaN compares false, so it never expires either.
    return now_ms >= expires_at


def evaluate_claude_credentials(data: dict[str, Any], now_ms: float | None = None) -> ClaudeEvaluation:
    """Classify a parsed Claude credential file.

    Rules are applied in order and the first match wins: operator supplied
    tokens in the ``env`` block, then a non-expired OAuth access token.
    ``expiresAt`` may be a number or a numeric string; any other value is
    treated as no expiry.
    """
    env = data.get(CLAUDE_ENV_BLOCK)
    if isinstance(env, dict) and any(env.get(key) for key in CLAUDE_ENV_TOKEN_KEYS):
        return ClaudeEvaluation(ClaudeCredentialState.ENV_CONFIGURED, identity=IDENTITY_SETTINGS_JSON)

    oauth = data.get(CLAUDE_OAUTH_BLOCK)
    if isinstance(oauth, dict) and oauth.get("accessToken"):
        if now_ms is None:
            now_ms = time.time() * 1000
        if _is_expired(oauth.get("expiresAt"), now_ms):
            return ClaudeEvaluation(ClaudeCredentialState.OAUTH_EXPIRED)

        identity = data.get("email") or data.get("user")
        if not isinstance(identity, str):
            identity = None
        return ClaudeEvaluation(ClaudeCredentialState.OAUTH_VALID, identity=identity)

    return ClaudeEvaluation(ClaudeCredentialState.NO_TOKEN)


def load_claude_evaluation() -> ClaudeEvaluation:
    """Locate, read and classify the Claude credential file."""
    path = claude_credentials_path()
    logger.info("Checking Claude credentials at: %s", path)

    try:
        data = read_credential_file(path)
        return evaluate_claude_credentials(data)
    except CredentialFileUnreadable as e:
        logger.warning("Claude credentials unreadable: %s", e)
        return ClaudeEvaluation(ClaudeCredentialState.UNREADABLE, error=str(e))
    except CredentialFileMalformed as e:
        logger.warning("Claude credentials malformed: %s", e)
        return ClaudeEvaluation(ClaudeCredentialState.PARSE_ERROR, error=str(e))


def check_claude_status() -> AuthStatus:
    """Check whether Claude Code is authenticated.

    Returns an AuthStatus and never raises.
    """
    try:
        return load_claude_evaluation().to_status()
    except Exception as e:
        logger.exception("Error checking Claude credentials")
        return AuthStatus(authenticated=False, error=str(e) or type(e).__name__)
