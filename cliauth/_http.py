"""Shared HTTP response handling for the cliauth client."""

from __future__ import annotations

from typing import Any

import httpx

from .exceptions import APIError


def handle_response(response: httpx.Response) -> dict[str, Any]:
    """Process an HTTP response, raising APIError for failures.

    A 500 from a status endpoint still carries a well-formed status body;
    that body is returned so callers see ``authenticated: false``.
    """
    if response.status_code >= 500 and _is_status_body(response):
        return response.json()

    if response.status_code >= 400:
        raise APIError(
            message=response.text or "cliauth API call failed",
            status_code=response.status_code,
            response=response,
        )

    if response.content:
        return response.json()
    return {}


def _is_status_body(response: httpx.Response) -> bool:
    try:
        data = response.json()
    except ValueError:
        return False
    return isinstance(data, dict) and "authenticated" in data
