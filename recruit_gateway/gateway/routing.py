"""Endpoint classification and URL construction.

Pure functions over a request path and the configured ``RoutePolicies``.
Nothing here holds state; every decision is derived from the path string at
request time.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from recruit_gateway.config.route_policies import RoutePolicies


class UnauthorizedAction(str, Enum):
    """How a 401 response is handled."""

    AUTH_FLOW = "auth_flow"  # Credential rejection, surfaced as-is
    EXPECTED = "expected"  # Optional-auth read, no session present
    SESSION_EXPIRED = "session_expired"  # Clear token and send the user to login


def is_absolute_url(path: str) -> bool:
    return path.startswith(("http://", "https://"))


def build_api_url(path: str, base_url: str, policies: RoutePolicies) -> str:
    """Resolve a request path to the URL that is actually requested.

    Absolute URLs and same-origin paths are returned unchanged. Everything
    else is prefixed with ``base_url`` when one is configured.
    """
    if is_absolute_url(path):
        return path

    if any(path.startswith(prefix) for prefix in policies.same_origin_paths):
        return path

    if base_url:
        return f"{base_url}{path if path.startswith('/') else '/' + path}"

    return path


def is_public_endpoint(path: str, policies: RoutePolicies) -> bool:
    return any(path.startswith(prefix) for prefix in policies.public_endpoints)


def is_public_page(page_path: str, policies: RoutePolicies) -> bool:
    """Prefix match against the public pages; ``/`` only matches the home page itself."""
    return any(
        page_path == prefix or (prefix != "/" and page_path.startswith(prefix))
        for prefix in policies.public_pages
    )


def is_auth_flow(path: str, policies: RoutePolicies) -> bool:
    return any(marker in path for marker in policies.auth_flow_endpoints)


def classify_unauthorized(
    endpoint: str, page_path: str, policies: RoutePolicies
) -> UnauthorizedAction:
    """Decide what a 401 on ``endpoint`` means while the user is on ``page_path``."""
    if is_auth_flow(endpoint, policies):
        return UnauthorizedAction.AUTH_FLOW
    if is_public_endpoint(endpoint, policies) or is_public_page(page_path, policies):
        return UnauthorizedAction.EXPECTED
    return UnauthorizedAction.SESSION_EXPIRED


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def append_query(path: str, params: Mapping[str, Any] | None) -> str:
    """Serialize GET parameters onto ``path``.

    ``None`` values are dropped, booleans render as ``true``/``false`` and
    list/tuple values repeat the key.
    """
    if not params:
        return path

    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _query_value(value)))

    if not pairs:
        return path

    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(pairs)}"
