"""Codex CLI login status, read from ``~/.codex/auth.json``."""

from __future__ import annotations

import logging

from ..exceptions import CredentialError, CredentialFileUnreadable
from .constants import (
    CODEX_API_KEY_FIELD,
    CODEX_TOKENS_BLOCK,
    ERROR_CODEX_NOT_CONFIGURED,
    ERROR_NO_VALID_TOKENS,
    IDENTITY_API_KEY,
    IDENTITY_AUTHENTICATED,
)
from .credentials import identity_from_id_token, read_credential_file
from .locator import codex_auth_path
from .types import AuthStatus

logger = logging.getLogger(__name__)


def _codex_status() -> AuthStatus:
    path = codex_auth_path()
    logger.info("Checking Codex credentials at: %s", path)

    try:
        auth = read_credential_file(path)
    except CredentialFileUnreadable as e:
        if e.missing:
            return AuthStatus(authenticated=False, error=ERROR_CODEX_NOT_CONFIGURED)
        logger.warning("Codex credentials unreadable: %s", e)
        return AuthStatus(authenticated=False, error=str(e))
    except CredentialError as e:
        logger.warning("Codex credentials malformed: %s", e)
        return AuthStatus(authenticated=False, error=str(e))

    tokens = auth.get(CODEX_TOKENS_BLOCK)
    if not isinstance(tokens, dict):
        tokens = {}

    id_token = tokens.get("id_token")
    if id_token or tokens.get("access_token"):
        identity = identity_from_id_token(id_token) if id_token else IDENTITY_AUTHENTICATED
        return AuthStatus(authenticated=True, identity=identity)

    if auth.get(CODEX_API_KEY_FIELD):
        return AuthStatus(authenticated=True, identity=IDENTITY_API_KEY)

    return AuthStatus(authenticated=False, error=ERROR_NO_VALID_TOKENS)


def check_codex_status() -> AuthStatus:
    """Check whether the Codex CLI is authenticated.

    ChatGPT logins store an ID token (a JWT whose claims carry the email)
    and an access token under ``tokens``; API key logins store the key at
    the top level. Returns an AuthStatus and never raises.
    """
    try:
        return _codex_status()
    except Exception as e:
        logger.exception("Error checking Codex credentials")
        return AuthStatus(authenticated=False, error=str(e) or type(e).__name__)
