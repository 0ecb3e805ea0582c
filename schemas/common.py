"""
schemas/common.py

- Shared error response schemas (Pydantic v2)
- middlewares/error_handler.py builds every error body from ErrorResponse
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, ConfigDict


class ErrorDetail(BaseModel):
    """Smallest unit of an error: code + message"""
    code: str = Field(..., description="error code (e.g. VALIDATION_FAILED, SELECTION_MISSING)")
    message: str = Field(..., description="user-facing message, shown as a notification")

class ErrorResponse(BaseModel):
    """
    Standard error body returned by the global error handlers
    - success is always False so clients can branch on one key
    """
    success: bool = False
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="response creation time (UTC)"
    )

    model_config = ConfigDict(extra="ignore")
