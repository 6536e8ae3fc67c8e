"""Gateway error type and error classification helpers.

Every failure the gateway reports is an ``ApiError`` carrying the HTTP status
(``0`` for transport and parse failures), an optional error code and an
optional field name, so callers can branch on ``status``/``code`` without
type-checking.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

NETWORK_ERROR_STATUS = 0


class ApiError(Exception):
    """Typed failure raised by every gateway operation."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        code: str | None = None,
        field: str | None = None,
    ) -> None:
        self.message = message
        self.status = status
        self.code = code
        self.field = field
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"ApiError(message={self.message!r}, status={self.status!r}, "
            f"code={self.code!r}, field={self.field!r})"
        )


class ErrorKind(str, Enum):
    """Error taxonomy callers branch on."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    GENERIC = "generic"


# ---------------------------------------------------------------------------
# Envelope interpretation
# ---------------------------------------------------------------------------


def _first_error(body: dict[str, Any]) -> dict[str, Any]:
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0]
    return {}


def envelope_error_message(body: dict[str, Any]) -> str | None:
    """Pick the message of a failed envelope: ``error``, ``message``, then ``errors[0]``."""
    return body.get("error") or body.get("message") or _first_error(body).get("message")


def error_from_envelope(status: int, body: dict[str, Any]) -> ApiError:
    """Build the ApiError for a non-2xx, non-401 response."""
    first = _first_error(body)
    return ApiError(
        envelope_error_message(body) or "Request failed",
        status=status,
        code=first.get("code") or body.get("error"),
        field=first.get("field"),
    )


# ---------------------------------------------------------------------------
# Caller-side helpers
# ---------------------------------------------------------------------------


def get_error_message(error: object) -> str:
    """Extract a human-readable message from any raised value."""
    if isinstance(error, ApiError):
        return error.message
    if isinstance(error, Exception):
        return str(error)
    if isinstance(error, str):
        return error
    return "An unknown error occurred"


def is_auth_error(error: object) -> bool:
    if isinstance(error, ApiError):
        return error.status == 401 or error.code == "UNAUTHORIZED"
    return False


def is_validation_error(error: object) -> bool:
    if isinstance(error, ApiError):
        return error.status == 400 or error.code == "VALIDATION_ERROR"
    return False


def is_not_found_error(error: object) -> bool:
    if isinstance(error, ApiError):
        return error.status == 404 or error.code == "NOT_FOUND"
    return False


def classify_error(error: ApiError) -> ErrorKind:
    """Map an ApiError onto the error taxonomy."""
    if error.status == NETWORK_ERROR_STATUS:
        return ErrorKind.NETWORK
    if is_auth_error(error):
        return ErrorKind.UNAUTHORIZED
    if is_validation_error(error):
        return ErrorKind.VALIDATION
    if is_not_found_error(error):
        return ErrorKind.NOT_FOUND
    return ErrorKind.GENERIC
