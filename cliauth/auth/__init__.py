"""Authentication status checks for external coding CLIs.

Each checker takes no arguments, reads current on-disk or process state,
and returns an :class:`AuthStatus` without ever raising.
"""

from __future__ import annotations

from typing import Callable

from .claude import check_claude_status
from .codex import check_codex_status
from .cursor import check_cursor_status
from .diagnostics import build_claude_diagnostics
from .locator import locate
from .types import AuthStatus, Provider

Checker = Callable[[], AuthStatus]

_CHECKER_NAMES: dict[Provider, str] = {
    Provider.CLAUDE: "check_claude_status",
    Provider.CURSOR: "check_cursor_status",
    Provider.CODEX: "check_codex_status",
}


def get_checker(provider: Provider | str) -> Checker:
    """Return the checker for ``provider``.

    Resolved through this module's namespace on every call, so patching
    ``cliauth.auth.check_<provider>_status`` affects all callers.

    Raises:
        ValueError: If ``provider`` is not a known provider name.
    """
    return globals()[_CHECKER_NAMES[Provider(provider)]]


def check_auth_status(provider: Provider | str) -> AuthStatus:
    return get_checker(provider)()


__all__ = [
    "build_claude_diagnostics",
    "check_auth_status",
    "check_claude_status",
    "check_codex_status",
    "check_cursor_status",
    "get_checker",
    "locate",
    "AuthStatus",
    "Checker",
    "Provider",
]
