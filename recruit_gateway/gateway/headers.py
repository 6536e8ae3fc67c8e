"""Request header composition."""

from __future__ import annotations

from collections.abc import Mapping

# Read-only verbs skip Content-Type so browsers do not issue a CORS preflight.
_BODYLESS_METHODS = frozenset({"GET", "HEAD"})


def merge_headers(
    method: str | None,
    token: str | None,
    custom: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build the headers for one request.

    ``Content-Type: application/json`` is set for every verb except GET/HEAD,
    ``Authorization: Bearer <token>`` whenever a token is present. Caller
    supplied headers win over both.
    """
    headers: dict[str, str] = {}

    if (method or "GET").upper() not in _BODYLESS_METHODS:
        headers["Content-Type"] = "application/json"

    if token:
        headers["Authorization"] = f"Bearer {token}"

    if custom:
        headers.update(custom)

    return headers
