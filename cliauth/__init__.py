"""cliauth - Authentication status of locally installed coding CLIs."""

from importlib.metadata import PackageNotFoundError, version

from .auth import AuthStatus, Provider, check_auth_status
from .client import CliAuthClient
from .exceptions import APIError, CliAuthError

__all__ = [
    "AuthStatus",
    "Provider",
    "check_auth_status",
    "CliAuthClient",
    "CliAuthError",
    "APIError",
]

try:
    __version__ = version("cliauth")
except PackageNotFoundError:
    __version__ = "0.1.0"
