"""
Sample API: Shared Response Schemas
=====================================

What:  Envelopes shared by every resource: error bodies, mutation
       acknowledgements and the health report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned for every 4xx/5xx response.

    Example:
        {"error": "Missing required fields"}
    """
    error: str = Field(description="Human-readable error message")


class MessageResponse(BaseModel):
    """Acknowledgement returned by PATCH, PUT and DELETE."""
    message: str = Field(examples=["Agent updated successfully"])


class PoolStatus(BaseModel):
    size: Optional[int] = Field(default=None, description="Configured pool capacity")
    checked_out: Optional[int] = Field(default=None, description="Connections currently in use")


class HealthResponse(BaseModel):
    """
    Returned by GET /health.

    `status` is "healthy" when a trivial query succeeds, "unhealthy" otherwise.
    """
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    pool: PoolStatus = Field(description="Connection pool occupancy")
    uptime_seconds: float = Field(description="Seconds since service started")
