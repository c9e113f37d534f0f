"""Common schemas used across multiple API endpoints.

Every JSON response body is wrapped in the same envelope:

    {"success": bool, "message": str, "data": ..., "error": ...}

``data`` and ``error`` are omitted when empty.
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Standard response envelope.

    Attributes:
        success: Whether the request succeeded.
        message: Human-readable outcome.
        data: Payload on success.
        error: Error detail on failure (slug or field list).
    """

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable outcome")
    data: Any | None = Field(default=None, description="Response payload")
    error: Any | None = Field(default=None, description="Error detail")


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses."""

    page: int = Field(..., description="Current page number (1-indexed)")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total items available")
    total_pages: int = Field(..., description="Total number of pages")


def success_response(
    message: str,
    data: BaseModel | dict[str, Any] | None = None,
    status_code: int = 200,
) -> JSONResponse:
    """Build a success envelope response."""
    payload = data.model_dump(mode="json") if isinstance(data, BaseModel) else data
    body = ApiResponse(success=True, message=message, data=payload)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def error_response(
    status_code: int,
    message: str,
    error: Any | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a failure envelope response."""
    body = ApiResponse(success=False, message=message, error=error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )
