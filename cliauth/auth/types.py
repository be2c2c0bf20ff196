"""Typed return values for authentication status checks."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from .constants import IDENTITY_AUTHENTICATED


class Provider(str, Enum):
    """External CLI tools whose login state can be checked."""

    CLAUDE = "claude"
    CURSOR = "cursor"
    CODEX = "codex"


@dataclass
class AuthStatus:
    """Authentication status of one provider.

    ``identity`` is a display label (usually an email), never a secret.
    ``raw_output`` is only set by checkers that run an external command.
    """

    authenticated: bool
    identity: str | None = None
    error: str | None = None
    raw_output: str | None = None

    def __post_init__(self) -> None:
        if self.authenticated:
            if self.error is not None:
                raise ValueError("an authenticated status cannot carry an error")
            if not self.identity:
                self.identity = IDENTITY_AUTHENTICATED
        elif self.identity is not None:
            raise ValueError("an unauthenticated status cannot carry an identity")

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if data["raw_output"] is None:
            del data["raw_output"]
        return data


class ClaudeCredentialState(Enum):
    """Outcome of reading the Claude credential file, in evaluation order."""

    ENV_CONFIGURED = "env_configured"
    OAUTH_VALID = "oauth_valid"
    OAUTH_EXPIRED = "oauth_expired"
    NO_TOKEN = "no_token"
    PARSE_ERROR = "parse_error"
    UNREADABLE = "unreadable"


@dataclass
class ClaudeEvaluation:
    """Intermediate result of the Claude credential evaluation."""

    state: ClaudeCredentialState
    identity: str | None = None
    error: str | None = None

    def to_status(self) -> AuthStatus:
        if self.state in (ClaudeCredentialState.ENV_CONFIGURED, ClaudeCredentialState.OAUTH_VALID):
            return AuthStatus(authenticated=True, identity=self.identity)
        # Expired tokens are reported exactly like a missing token.
        return AuthStatus(authenticated=False, error=self.error)
