"""Configuration module: settings and route policies."""

from recruit_gateway.config.route_policies import RoutePolicies, load_route_policies
from recruit_gateway.config.settings import DEFAULT_ROUTE_POLICIES_PATH, GatewaySettings

__all__ = [
    "DEFAULT_ROUTE_POLICIES_PATH",
    "GatewaySettings",
    "RoutePolicies",
    "load_route_policies",
]
