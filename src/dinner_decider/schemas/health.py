"""Health check schemas."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import Field

from dinner_decider.schemas.base import APIResponse


class HealthStatus(StrEnum):
    """Health status values."""

    OK = "ok"
    ERROR = "error"


class HealthResponse(APIResponse):
    """Liveness response."""

    status: HealthStatus = Field(..., description="Health status", examples=["ok"])
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )


class DependencyHealthResponse(APIResponse):
    """Result of probing a single dependency."""

    status: HealthStatus = Field(..., description="Dependency status")
    message: str | None = Field(default=None, description="Failure details")
