"""Synchronous HTTP client for a running cliauth server."""

from __future__ import annotations

from typing import Any

import httpx

from ._http import handle_response
from .auth.types import Provider
from .config import DEFAULT_SERVER_URL, DEFAULT_TIMEOUT_SECONDS, sanitize_base_url


class CliAuthClient:
    """Client for the cliauth status API.

    Example:
        >>> from cliauth import CliAuthClient
        >>> with CliAuthClient("http://127.0.0.1:3001") as client:
        ...     print(client.get_status("cursor"))
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server URL. Defaults to CLIAUTH_SERVER_URL or
                http://127.0.0.1:3001.
            timeout: Request timeout in seconds (default: 10).
            transport: Optional httpx transport, mainly for tests.
        """
        self._base_url = sanitize_base_url(base_url or DEFAULT_SERVER_URL)
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def get_status(self, provider: Provider | str) -> dict[str, Any]:
        """Get ``{authenticated, email, error, method}`` for one provider."""
        provider = Provider(provider)
        response = self._client.get(f"{self._base_url}/{provider.value}/status")
        return handle_response(response)

    def get_diagnostics(self) -> dict[str, Any]:
        response = self._client.get(f"{self._base_url}/debug-auth")
        return handle_response(response)

    def health(self) -> dict[str, Any]:
        response = self._client.get(f"{self._base_url}/health")
        return handle_response(response)

    def close(self) -> None:
        """Release the underlying HTTP client resources."""
        self._client.close()

    def __enter__(self) -> CliAuthClient:
        return self

    def __exit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        self.close()
