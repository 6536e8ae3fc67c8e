"""Generic API response envelope model.

Every backend response is wrapped in this envelope:
{ success: bool, data?: T, error?: str, errors?: [{code, message, field?}],
  meta?: {page, limit, total, totalPages} }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """A single structured error entry, e.g. a field validation failure."""

    code: str
    message: str
    field: str | None = None


class PageMeta(BaseModel):
    """Pagination metadata attached to list responses."""

    model_config = ConfigDict(populate_by_name=True)

    page: int | None = None
    limit: int | None = None
    total: int | None = None
    total_pages: int | None = Field(default=None, alias="totalPages")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all API responses.

    Servers may attach extra top-level keys (``message``, ``token``); they are
    kept on the model.
    """

    model_config = ConfigDict(extra="allow")

    success: bool
    data: T | None = None
    error: str | None = None
    errors: list[ErrorDetail] | None = None
    meta: PageMeta | None = None
