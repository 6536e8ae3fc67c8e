"""Session-based API client.

Single entry point for every HTTP call to the backend. Requests carry the
session cookies held by one long-lived ``httpx.AsyncClient`` and, when a
session token is stored, an ``Authorization: Bearer`` header. Responses are
returned as the raw JSON envelope; every failure is raised as ``ApiError``.

A 401 is handled one of three ways:

- authentication flows (login/register/forgot-password) surface it as-is so
  forms can show the precise rejection;
- public endpoints, or any request made while on a public page, treat it as
  the expected absence of a session;
- anything else clears the stored token and calls ``on_session_expired``
  before raising.

The client performs no retries.
"""

from __future__ import annotations

import inspect
import json
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from recruit_gateway.config.route_policies import RoutePolicies, load_route_policies
from recruit_gateway.config.settings import GatewaySettings
from recruit_gateway.credentials.store import CredentialStore, create_credential_store
from recruit_gateway.gateway.errors import (
    NETWORK_ERROR_STATUS,
    ApiError,
    envelope_error_message,
    error_from_envelope,
)
from recruit_gateway.gateway.headers import merge_headers
from recruit_gateway.gateway.routing import (
    UnauthorizedAction,
    append_query,
    build_api_url,
    classify_unauthorized,
)

logger = logging.getLogger(__name__)

SessionExpiredHandler = Callable[[], Any]
PageProvider = Callable[[], str]


class ApiClient:
    """Async gateway for the recruitment API.

    Parameters
    ----------
    settings:
        Gateway configuration. Loaded from the environment when omitted.
    credential_store:
        Where the session token is read from and cleared. Defaults to the
        store selected by ``settings.token_storage_path``.
    policies:
        Route allow-lists. Loaded from ``settings.route_policies_path`` when
        omitted.
    on_session_expired:
        Called (and awaited, if it returns an awaitable) after a protected
        request is rejected with 401 and the token has been cleared. The host
        application decides how to navigate to the login page.
    current_page:
        Returns the path of the page the user is on. Defaults to ``""``,
        which is never a public page.
    http_client:
        Pre-built ``httpx.AsyncClient``. The gateway only closes clients it
        created itself.
    """

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        *,
        credential_store: CredentialStore | None = None,
        policies: RoutePolicies | None = None,
        on_session_expired: SessionExpiredHandler | None = None,
        current_page: PageProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or GatewaySettings()
        self._credential_store = credential_store or create_credential_store(
            self._settings.token_storage_path
        )
        self._policies = policies or load_route_policies(self._settings.route_policies_path)
        self._on_session_expired = on_session_expired or self._log_session_expired
        self._current_page = current_page or (lambda: "")

        if http_client is None:
            self._http = httpx.AsyncClient(
                base_url=self._settings.origin,
                timeout=self._settings.request_timeout_seconds,
            )
            self._owns_http = True
        else:
            self._http = http_client
            self._owns_http = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def settings(self) -> GatewaySettings:
        return self._settings

    @property
    def policies(self) -> RoutePolicies:
        return self._policies

    @property
    def credential_store(self) -> CredentialStore:
        return self._credential_store

    def build_url(self, path: str) -> str:
        return build_api_url(path, self._settings.api_base_url, self._policies)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", append_query(path, params))

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, content=_json_body(body))

    async def patch(self, path: str, body: Any = None) -> Any:
        return await self.request("PATCH", path, content=_json_body(body))

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, content=_json_body(body))

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and interpret the envelope.

        Returns
        -------
        Any
            The parsed JSON body of a 2xx response, unmodified.

        Raises
        ------
        ApiError
            For every non-2xx response, and with ``status=0`` when the request
            could not complete or the body was not JSON.
        """
        url = self.build_url(path)
        request_headers = merge_headers(method, self._credential_store.get(), headers)
        started = time.monotonic()

        try:
            response = await self._http.request(
                method, url, content=content, headers=request_headers
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "Request %s %s failed: %s",
                method,
                url,
                exc,
                extra={"method": method, "url": url, "error_reason": exc},
            )
            raise ApiError(str(exc) or exc.__class__.__name__, status=NETWORK_ERROR_STATUS) from exc

        duration_ms = round((time.monotonic() - started) * 1000, 2)
        logger.debug(
            "%s %s -> %d",
            method,
            url,
            response.status_code,
            extra={
                "method": method,
                "url": url,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        try:
            body = response.json()
        except ValueError as exc:
            logger.warning(
                "Unparsable response body from %s %s (status %d)",
                method,
                url,
                response.status_code,
                extra={"method": method, "url": url, "status": response.status_code},
            )
            raise ApiError(str(exc) or "Invalid JSON response", status=NETWORK_ERROR_STATUS) from exc

        if response.is_success:
            return body

        envelope = body if isinstance(body, dict) else {}

        if response.status_code == 401:
            await self._handle_unauthorized(path, envelope)

        error = error_from_envelope(response.status_code, envelope)
        logger.warning(
            "%s %s failed with status %d: %s",
            method,
            url,
            response.status_code,
            error.message,
            extra={"method": method, "url": url, "status": response.status_code},
        )
        raise error

    async def _handle_unauthorized(self, path: str, envelope: dict[str, Any]) -> None:
        """Apply the 401 policy for ``path``; always raises."""
        message = envelope_error_message(envelope)
        page = self._current_page()
        action = classify_unauthorized(path, page, self._policies)

        if action is UnauthorizedAction.AUTH_FLOW:
            raise ApiError(message or "Unauthorized", status=401, code=envelope.get("error"))

        expired_message = message or "Session expired. Please log in again."

        if action is UnauthorizedAction.SESSION_EXPIRED:
            logger.info(
                "Session rejected for %s, clearing stored token",
                path,
                extra={"url": path, "status": 401, "page": page},
            )
            self._credential_store.clear()
            try:
                result = self._on_session_expired()
                if inspect.isawaitable(result):
                    await result
            except Exception as exc:
                logger.exception("Session-expired handler failed")
                raise ApiError(expired_message, status=401) from exc

        raise ApiError(expired_message, status=401)

    def _log_session_expired(self) -> None:
        logger.warning(
            "Session expired, user should be sent to %s",
            self._settings.login_path,
            extra={"page": self._settings.login_path},
        )


def _json_body(body: Any) -> bytes | None:
    if body is None:
        return None
    return json.dumps(body).encode("utf-8")
