"""Public models for the API gateway."""

from recruit_gateway.models.envelope import ApiResponse, ErrorDetail, PageMeta

__all__ = ["ApiResponse", "ErrorDetail", "PageMeta"]
