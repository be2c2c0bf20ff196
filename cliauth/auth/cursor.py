"""Cursor Agent login status, observed by running ``cursor-agent status``."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from ..exceptions import ProcessNonZeroExit, ProcessSpawnFailed, ProcessTimeout
from .constants import (
    CURSOR_LOGGED_IN_MARKER,
    CURSOR_STATUS_COMMAND,
    CURSOR_TIMEOUT_SECONDS,
    ERROR_COMMAND_TIMEOUT,
    ERROR_CURSOR_NOT_INSTALLED,
    ERROR_NOT_LOGGED_IN,
    IDENTITY_LOGGED_IN,
)
from .probe import ProbeOutcome, run_probe
from .types import AuthStatus

logger = logging.getLogger(__name__)

LOGGED_IN_AS_RE = re.compile(
    r"Logged in as ([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})",
    re.IGNORECASE,
)


def interpret_cursor_output(outcome: ProbeOutcome) -> AuthStatus:
    """Map the output of ``cursor-agent status`` to an AuthStatus."""
    try:
        outcome.check_returncode()
    except ProcessNonZeroExit:
        return AuthStatus(authenticated=False, error=outcome.stderr or ERROR_NOT_LOGGED_IN)

    match = LOGGED_IN_AS_RE.search(outcome.stdout)
    if match:
        return AuthStatus(authenticated=True, identity=match.group(1), raw_output=outcome.stdout)
    if CURSOR_LOGGED_IN_MARKER in outcome.stdout:
        return AuthStatus(authenticated=True, identity=IDENTITY_LOGGED_IN, raw_output=outcome.stdout)
    return AuthStatus(authenticated=False, error=ERROR_NOT_LOGGED_IN)


def check_cursor_status(
    command: Sequence[str] = CURSOR_STATUS_COMMAND,
    timeout: float = CURSOR_TIMEOUT_SECONDS,
) -> AuthStatus:
    """Check whether Cursor Agent is logged in.

    Returns an AuthStatus and never raises.
    """
    try:
        outcome = run_probe(command, timeout=timeout)
    except ProcessSpawnFailed:
        return AuthStatus(authenticated=False, error=ERROR_CURSOR_NOT_INSTALLED)
    except ProcessTimeout:
        return AuthStatus(authenticated=False, error=ERROR_COMMAND_TIMEOUT)
    except Exception as e:
        logger.exception("Error checking Cursor status")
        return AuthStatus(authenticated=False, error=str(e) or type(e).__name__)

    return interpret_cursor_output(outcome)
