"""GET /health - Check health of the post store."""

from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import APP_CONFIG, get_settings
from db import FirestoreService
from dependencies import get_firestore_service

# --- Response Schemas ---


class ServiceStatus(BaseModel):
    """Status of an individual service."""

    name: str
    status: str = Field(..., description="healthy or unhealthy")
    latency_ms: float | None = Field(None, description="Response time in ms")
    error: str | None = Field(None, description="Error message if unhealthy")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy, unhealthy")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    services: list[ServiceStatus] = Field(
        ..., description="Individual service statuses"
    )
    timestamp: datetime


# --- Handler ---


async def check_health(
    firestore_service: FirestoreService = Depends(get_firestore_service),
) -> HealthResponse:
    """Check health of all services."""
    settings = get_settings()

    firestore_health = await firestore_service.health_check()

    services = [
        ServiceStatus(
            name="firestore",
            status=firestore_health["status"],
            latency_ms=firestore_health.get("latency_ms"),
            error=firestore_health.get("error"),
        ),
    ]

    overall = (
        "healthy" if all(s.status == "healthy" for s in services) else "unhealthy"
    )

    return HealthResponse(
        status=overall,
        version=APP_CONFIG["version"],
        environment=settings.environment,
        services=services,
        timestamp=datetime.now(UTC),
    )
