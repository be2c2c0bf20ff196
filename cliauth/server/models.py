"""Response models for the cliauth HTTP API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..auth.types import AuthStatus


class StatusResponse(BaseModel):
    """Authentication status of one provider."""

    authenticated: bool
    email: Optional[str] = Field(None, description="Display label of the logged in account")
    error: Optional[str] = Field(None, description="Why the provider is not authenticated")
    method: Optional[str] = Field(None, description="How a positive result was verified")

    @classmethod
    def from_status(
        cls,
        status: AuthStatus,
        method: str,
        default_error: Optional[str] = None,
    ) -> "StatusResponse":
        if status.authenticated:
            return cls(authenticated=True, email=status.identity, method=method)
        return cls(authenticated=False, error=status.error or default_error)


class HealthStatus(BaseModel):
    """Server liveness response."""

    status: str
    version: str
