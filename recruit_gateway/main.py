"""Gateway composition root.

Startup: load settings, configure logging, build the API client and the
integrations on top of it.
Shutdown: close the HTTP client.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from recruit_gateway.config.settings import GatewaySettings
from recruit_gateway.credentials.store import CredentialStore
from recruit_gateway.gateway.client import ApiClient, PageProvider, SessionExpiredHandler
from recruit_gateway.integration.budgets import BudgetApi
from recruit_gateway.integration.session import SessionManager
from recruit_gateway.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class Gateway:
    """Wired gateway components sharing one API client."""

    settings: GatewaySettings
    api: ApiClient
    session: SessionManager
    budgets: BudgetApi


@asynccontextmanager
async def open_gateway(
    settings: GatewaySettings | None = None,
    *,
    credential_store: CredentialStore | None = None,
    on_session_expired: SessionExpiredHandler | None = None,
    current_page: PageProvider | None = None,
    http_client: httpx.AsyncClient | None = None,
    setup_logging: bool = True,
) -> AsyncIterator[Gateway]:
    """Build the gateway for the lifetime of the ``async with`` block."""
    settings = settings or GatewaySettings()

    if setup_logging:
        configure_logging(settings.log_level)

    logger.info(
        "Starting API gateway (base URL %s)",
        settings.api_base_url or "same-origin",
    )

    api = ApiClient(
        settings,
        credential_store=credential_store,
        on_session_expired=on_session_expired,
        current_page=current_page,
        http_client=http_client,
    )
    try:
        yield Gateway(
            settings=settings,
            api=api,
            session=SessionManager(api),
            budgets=BudgetApi(api),
        )
    finally:
        await api.aclose()
        logger.info("API gateway closed")
