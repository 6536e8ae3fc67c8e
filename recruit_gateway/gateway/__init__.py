"""API request gateway: dispatcher, routing rules, headers, and errors."""

from recruit_gateway.gateway.client import ApiClient
from recruit_gateway.gateway.errors import (
    NETWORK_ERROR_STATUS,
    ApiError,
    ErrorKind,
    classify_error,
    get_error_message,
    is_auth_error,
    is_not_found_error,
    is_validation_error,
)
from recruit_gateway.gateway.headers import merge_headers
from recruit_gateway.gateway.routing import (
    UnauthorizedAction,
    append_query,
    build_api_url,
    classify_unauthorized,
    is_auth_flow,
    is_public_endpoint,
    is_public_page,
)

__all__ = [
    "NETWORK_ERROR_STATUS",
    "ApiClient",
    "ApiError",
    "ErrorKind",
    "UnauthorizedAction",
    "append_query",
    "build_api_url",
    "classify_error",
    "classify_unauthorized",
    "get_error_message",
    "is_auth_error",
    "is_auth_flow",
    "is_not_found_error",
    "is_public_endpoint",
    "is_public_page",
    "is_validation_error",
    "merge_headers",
]
