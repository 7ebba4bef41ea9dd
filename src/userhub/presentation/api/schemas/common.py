"""Common schemas shared across API endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    path: str = Field(..., description="Request path that failed")
    timestamp: int = Field(..., description="When the error occurred (epoch millis)")
    message: str = Field(..., description="Translated error message")
    validation_errors: Optional[dict[str, str]] = Field(
        None,
        alias="validationErrors",
        description="Translated message per offending field (400 only)",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "path": "/api/v1/users/5",
                "timestamp": 1700000000000,
                "message": "User not found",
            },
        },
    )


class MessageResponse(BaseModel):
    """Single translated confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
