"""Read-only access to credential files owned by external CLI tools.

The files are written by other programs and may be missing, truncated
mid-write, or not JSON at all. Nothing here ever writes to them, and error
messages never include file content.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from pathlib import Path
from typing import Any

from ..exceptions import CredentialFileMalformed, CredentialFileUnreadable, TokenDecodeFailed
from .constants import IDENTITY_AUTHENTICATED

logger = logging.getLogger(__name__)


def read_credential_file(path: Path) -> dict[str, Any]:
    """Load a credential file as a JSON object.

    Raises:
        CredentialFileUnreadable: The file is missing or cannot be opened.
        CredentialFileMalformed: The content is not a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CredentialFileUnreadable(
            f"Credential file not found: {path}", path=str(path), missing=True
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialFileUnreadable(str(e), path=str(path)) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise CredentialFileMalformed(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise CredentialFileMalformed(f"Expected a JSON object in {path}", path=str(path))
    return data


def _b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def decode_jwt_payload(token: str) -> dict[str, Any]:
    """Decode the claims segment of a JWT without verifying its signature.

    Raises:
        TokenDecodeFailed: The token is not a three-part JWT or its payload
            is not a base64url-encoded JSON object.
    """
    if not isinstance(token, str):
        raise TokenDecodeFailed("Token is not a string")
    parts = token.split(".")
    if len(parts) != 3:
        raise TokenDecodeFailed(f"Expected 3 token segments, got {len(parts)}")

    try:
        payload = json.loads(_b64url_decode(parts[1]).decode("utf-8"))
    except (binascii.Error, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise TokenDecodeFailed(f"Could not decode token payload: {e}") from e

    if not isinstance(payload, dict):
        raise TokenDecodeFailed("Token payload is not a JSON object")
    return payload


def identity_from_id_token(token: str) -> str:
    """Best-effort display label from an ID token, never raises."""
    try:
        payload = decode_jwt_payload(token)
    except TokenDecodeFailed as e:
        logger.debug("Ignoring undecodable ID token: %s", e)
        return IDENTITY_AUTHENTICATED

    identity = payload.get("email") or payload.get("user")
    if isinstance(identity, str) and identity:
        return identity
    return IDENTITY_AUTHENTICATED
