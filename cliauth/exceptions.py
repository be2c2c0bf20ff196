"""Custom exceptions raised by cliauth."""

from __future__ import annotations

from typing import Any, Optional


class CliAuthError(Exception):
    """Base exception for all cliauth specific failures."""


class CredentialError(CliAuthError):
    """Raised when a provider credential file cannot be used."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class CredentialFileUnreadable(CredentialError):
    """Raised when a credential file is missing or cannot be opened."""

    def __init__(self, message: str, path: Optional[str] = None, missing: bool = False):
        super().__init__(message, path)
        self.missing = missing


class CredentialFileMalformed(CredentialError):
    """Raised when a credential file is not a well-formed JSON object."""


class TokenDecodeFailed(CliAuthError):
    """Raised when a JWT payload cannot be decoded. Callers swallow it."""


class ProbeError(CliAuthError):
    """Base class for failures of an external status command."""


class ProcessSpawnFailed(ProbeError):
    """Raised when the status command cannot be started."""


class ProcessTimeout(ProbeError):
    """Raised when the status command does not finish in time."""


class ProcessNonZeroExit(ProbeError):
    """Raised when the status command exits with a non-zero code."""

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


class APIError(CliAuthError):
    """Raised when a cliauth server returns a non-successful response."""

    def __init__(self, message: str, status_code: int, response: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:  # pragma: no cover - repr helper
        return f"{self.status_code}: {self.message}"
