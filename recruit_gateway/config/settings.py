"""Pydantic Settings for the API gateway.

All environment variables use the GATEWAY_ prefix.
Example: GATEWAY_API_BASE_URL=https://api.example.com, GATEWAY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_ROUTE_POLICIES_PATH = str(Path(__file__).with_name("route_policies.yaml"))


class GatewaySettings(BaseSettings):
    """Gateway configuration validated from environment variables."""

    # Backend
    api_base_url: str = ""  # Empty means same-origin (relative paths)
    origin: str = ""  # Used to resolve relative URLs, e.g. "https://app.example.com"
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = "INFO"

    # Session token persistence
    token_storage_path: str | None = None  # None keeps tokens in memory

    # Routing
    route_policies_path: str = DEFAULT_ROUTE_POLICIES_PATH
    login_path: str = "/login"

    model_config = {"env_prefix": "GATEWAY_"}
