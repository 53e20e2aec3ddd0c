"""
Base schemas shared by all API responses.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error code")
    detail: str = Field(..., description="Human-readable error message")
    timestamp: datetime = Field(..., description="When the error occurred")
