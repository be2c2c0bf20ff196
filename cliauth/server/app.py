"""FastAPI application exposing provider authentication status.

Endpoints are plain ``def`` functions so FastAPI runs them in its
threadpool; the Cursor probe can block for several seconds.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, FastAPI, status
from fastapi.responses import JSONResponse

from .. import auth
from ..auth.constants import (
    ERROR_INTERNAL,
    ERROR_NOT_AUTHENTICATED,
    METHOD_CLI_STATUS,
    METHOD_CREDENTIALS_FILE,
)
from ..auth.types import Provider
from .models import HealthStatus, StatusResponse

logger = logging.getLogger(__name__)

METHOD_TAGS: dict[Provider, str] = {
    Provider.CLAUDE: METHOD_CREDENTIALS_FILE,
    Provider.CURSOR: METHOD_CLI_STATUS,
    Provider.CODEX: METHOD_CREDENTIALS_FILE,
}

# Claude's checker reports a bare negative result for missing or expired tokens.
DEFAULT_ERRORS: dict[Provider, Optional[str]] = {
    Provider.CLAUDE: ERROR_NOT_AUTHENTICATED,
}

router = APIRouter()


def dispatch_status(provider: Provider) -> Any:
    """Run one provider's checker and translate the result.

    Negative results are normal responses; only an exception escaping the
    checker produces a 500.
    """
    try:
        result = auth.check_auth_status(provider)
        return StatusResponse.from_status(
            result,
            method=METHOD_TAGS[provider],
            default_error=DEFAULT_ERRORS.get(provider),
        )
    except Exception:
        logger.exception("Error checking %s auth status", provider.value)
        fault = StatusResponse(authenticated=False, error=ERROR_INTERNAL)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=fault.model_dump(),
        )


@router.get("/claude/status", response_model=StatusResponse, tags=["Status"])
def claude_status():
    """Claude Code status from its credential file."""
    return dispatch_status(Provider.CLAUDE)


@router.get("/cursor/status", response_model=StatusResponse, tags=["Status"])
def cursor_status():
    """Cursor Agent status from ``cursor-agent status``."""
    return dispatch_status(Provider.CURSOR)


@router.get("/codex/status", response_model=StatusResponse, tags=["Status"])
def codex_status():
    """Codex CLI status from its auth file."""
    return dispatch_status(Provider.CODEX)


@router.get("/debug-auth", tags=["Diagnostics"])
def debug_auth() -> dict[str, Any]:
    """Secret-free report of how Claude credentials are resolved."""
    return auth.build_claude_diagnostics()


@router.get("/health", response_model=HealthStatus, tags=["System"])
def health():
    from cliauth import __version__

    return HealthStatus(status="ok", version=__version__)


def create_app() -> FastAPI:
    application = FastAPI(
        title="cliauth",
        description="Authentication status of locally installed coding CLIs.",
    )
    application.include_router(router)
    return application


app = create_app()
