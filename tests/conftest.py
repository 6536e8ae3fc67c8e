"""Shared test fixtures and hypothesis strategies for the gateway test suite."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from hypothesis import strategies as st

from recruit_gateway.config.route_policies import RoutePolicies
from recruit_gateway.config.settings import GatewaySettings
from recruit_gateway.credentials.store import MemoryCredentialStore
from recruit_gateway.gateway.client import ApiClient

API_BASE_URL = "https://api.example.com"
APP_ORIGIN = "https://app.example.com"


# ---------------------------------------------------------------------------
# Keep the host environment out of GatewaySettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_gateway_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any GATEWAY_* variables so settings start from their defaults."""
    for key in list(os.environ):
        if key.startswith("GATEWAY_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------

class RecordingBackend:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else {"success": True, "data": {}}
        self.content = content
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class SessionExpiredRecorder:
    """Stands in for the host's navigation to the login page."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


# ---------------------------------------------------------------------------
# Settings and component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> GatewaySettings:
    """Test settings with a configured API base URL."""
    return GatewaySettings(api_base_url=API_BASE_URL, origin=APP_ORIGIN)


@pytest.fixture
def policies() -> RoutePolicies:
    return RoutePolicies()


@pytest.fixture
def store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture
def session_expired() -> SessionExpiredRecorder:
    return SessionExpiredRecorder()


@pytest.fixture
def make_client(
    settings: GatewaySettings,
    policies: RoutePolicies,
    store: MemoryCredentialStore,
    session_expired: SessionExpiredRecorder,
) -> Callable[..., ApiClient]:
    """Factory building an ApiClient wired to a RecordingBackend."""

    def _make(
        backend: RecordingBackend,
        *,
        page: str = "/dashboard",
        gateway_settings: GatewaySettings | None = None,
    ) -> ApiClient:
        http = httpx.AsyncClient(
            transport=httpx.MockTransport(backend),
            base_url=APP_ORIGIN,
        )
        return ApiClient(
            gateway_settings or settings,
            credential_store=store,
            policies=policies,
            on_session_expired=session_expired,
            current_page=lambda: page,
            http_client=http,
        )

    return _make


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

_segment = st.from_regex(r"[a-z0-9][a-z0-9-]{0,11}", fullmatch=True)

# Relative API paths under a prefix no allow-list covers
protected_paths = st.lists(_segment, min_size=1, max_size=4).map(
    lambda parts: "/api/v1/" + "/".join(parts)
)

# Protected pages (not under any public page prefix, never the home page)
protected_pages = st.lists(_segment, min_size=1, max_size=3).map(
    lambda parts: "/app/" + "/".join(parts)
)

same_origin_prefixes = st.sampled_from(["/api/auth/register", "/api/auth/forgot-password"])
public_endpoint_prefixes = st.sampled_from(
    ["/api/auth/me", "/api/v2/jobs", "/api/vms/bureau-rankings"]
)
public_page_prefixes = st.sampled_from(
    ["/login", "/register", "/jobs", "/reset-password", "/confirm-email"]
)
auth_flow_paths = st.sampled_from(
    ["/api/auth/login", "/api/auth/register", "/api/auth/forgot-password"]
)

base_urls = st.from_regex(r"https://[a-z]{3,10}\.[a-z]{2,4}(/api-gw)?", fullmatch=True)

tokens = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.",
    min_size=1,
    max_size=64,
)

http_methods = st.sampled_from(["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
method_casings = st.sampled_from([str.upper, str.lower, str.capitalize])
