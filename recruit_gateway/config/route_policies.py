"""Route policy model and YAML loader.

Provides the typed allow-lists the gateway classifies paths against and a
loader that parses the YAML config into that model.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class RoutePolicies(BaseModel):
    """Prefix and substring allow-lists used for endpoint and page classification."""

    same_origin_paths: list[str] = Field(
        default_factory=lambda: ["/api/auth/register", "/api/auth/forgot-password"]
    )
    public_endpoints: list[str] = Field(
        default_factory=lambda: [
            "/api/auth/me",
            "/api/auth/logout",
            "/api/v2/jobs",
            "/api/v2/jobs/",
            "/api/vms/bureau-rankings",
        ]
    )
    public_pages: list[str] = Field(
        default_factory=lambda: [
            "/login",
            "/register",
            "/jobs",
            "/",
            "/reset-password",
            "/confirm-email",
        ]
    )
    auth_flow_endpoints: list[str] = Field(
        default_factory=lambda: [
            "/api/auth/login",
            "/api/auth/register",
            "/api/auth/forgot-password",
        ]
    )


def load_route_policies(yaml_path: str) -> RoutePolicies:
    """Parse a route policies YAML file into a RoutePolicies object.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        The parsed policies. Sections that are absent or invalid keep their
        built-in defaults; a missing or unparsable file yields all defaults.
    """
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Route policies file not found at %s, using built-in defaults", yaml_path)
        return RoutePolicies()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse route policies YAML at %s: %s", yaml_path, exc)
        return RoutePolicies()

    if not isinstance(raw, dict) or not isinstance(raw.get("routes"), dict):
        logger.warning("Route policies YAML missing 'routes' key, using built-in defaults")
        return RoutePolicies()

    sections: dict[str, list[str]] = {}
    for name, value in raw["routes"].items():
        if name not in RoutePolicies.model_fields:
            logger.warning("Unknown route policy section '%s', ignoring", name)
            continue
        try:
            RoutePolicies.model_validate({name: value})
        except ValidationError as exc:
            logger.error("Invalid route policy section '%s': %s, using default", name, exc)
            continue
        sections[name] = value

    return RoutePolicies.model_validate(sections)
