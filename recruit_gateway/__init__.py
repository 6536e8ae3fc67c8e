"""Session-based API gateway for the recruitment and vendor-management backend."""

from recruit_gateway.config import GatewaySettings, RoutePolicies, load_route_policies
from recruit_gateway.credentials import (
    CredentialStore,
    FileCredentialStore,
    MemoryCredentialStore,
)
from recruit_gateway.gateway import ApiClient, ApiError, ErrorKind, classify_error
from recruit_gateway.integration import BudgetApi, SessionManager
from recruit_gateway.models import ApiResponse

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "BudgetApi",
    "CredentialStore",
    "ErrorKind",
    "FileCredentialStore",
    "GatewaySettings",
    "MemoryCredentialStore",
    "RoutePolicies",
    "SessionManager",
    "classify_error",
    "load_route_policies",
]
