"""Authentication flows layered on the gateway.

Login stores the session token returned by the backend, logout always clears
it, and ``current_user`` treats a rejected session as "not logged in" rather
than an error.

SECURITY: Never logs passwords or token values.
"""

from __future__ import annotations

import logging
from typing import Any

from recruit_gateway.gateway.client import ApiClient
from recruit_gateway.gateway.errors import ApiError

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "/api/auth/login"
LOGOUT_ENDPOINT = "/api/auth/logout"
REGISTER_ENDPOINT = "/api/auth/register"
FORGOT_PASSWORD_ENDPOINT = "/api/auth/forgot-password"
CURRENT_USER_ENDPOINT = "/api/auth/me"


def _extract_token(envelope: Any) -> str | None:
    """Token from ``data.token`` or, for older responses, top-level ``token``."""
    if not isinstance(envelope, dict):
        return None
    data = envelope.get("data")
    if isinstance(data, dict) and data.get("token"):
        return data["token"]
    return envelope.get("token") or None


class SessionManager:
    """Login, logout and current-user lookups for one ``ApiClient``."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    @property
    def is_authenticated(self) -> bool:
        return self._api.credential_store.get() is not None

    async def login(self, email: str, password: str) -> Any:
        """Authenticate and store the returned session token.

        Credential rejections surface as ``ApiError`` with ``status=401`` and
        the backend's own message.
        """
        envelope = await self._api.post(LOGIN_ENDPOINT, {"email": email, "password": password})
        token = _extract_token(envelope)
        if token:
            self._api.credential_store.set(token)
            logger.info("Login succeeded, session token stored")
        else:
            logger.warning("Login response carried no session token")
        return envelope

    async def register(self, **fields: Any) -> Any:
        return await self._api.post(REGISTER_ENDPOINT, fields)

    async def forgot_password(self, email: str) -> Any:
        return await self._api.post(FORGOT_PASSWORD_ENDPOINT, {"email": email})

    async def current_user(self) -> Any | None:
        """Return the logged-in user, or ``None`` when there is no valid session."""
        if not self.is_authenticated:
            return None

        try:
            envelope = await self._api.get(CURRENT_USER_ENDPOINT)
        except ApiError as exc:
            if exc.status != 401:
                raise
            logger.info("Stored session token was rejected, clearing it")
            self._api.credential_store.clear()
            return None

        if not isinstance(envelope, dict):
            return None
        data = envelope.get("data")
        if isinstance(data, dict):
            return data.get("user", data)
        return envelope.get("user")

    async def logout(self) -> None:
        """End the session server-side when possible; the local token is always cleared.

        A 401 means the server already dropped the session and counts as a
        successful logout.
        """
        try:
            if self.is_authenticated:
                await self._api.post(LOGOUT_ENDPOINT)
        except ApiError as exc:
            if exc.status != 401:
                logger.warning("Logout request failed: %s", exc.message, extra={"status": exc.status})
                raise
            logger.info("Session already ended server-side")
        finally:
            self._api.credential_store.clear()
