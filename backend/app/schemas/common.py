"""
LexSite Backend: Shared Response Schemas
==========================================

What:  Error envelope and health check models used across all routes.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Please enter a valid claim amount",
            "details": {"field": "claim_value", "value": "-5"},
            "request_id": "3f9c1a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    Health check response.

    status is "healthy" when the database answers, "degraded" otherwise.
    The calculator keeps working without the database, so a database
    outage does not make the service unhealthy.
    """
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
