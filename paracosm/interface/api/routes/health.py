"""Health check route used by the container orchestrator."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from paracosm.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

SERVICE_NAME = "paracosm-api"
SERVICE_VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Liveness payload with build metadata."""

    status: str
    service: str
    version: str
    environment: str
    git_sha: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up, and which build is running."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
        timestamp=datetime.now(timezone.utc),
    )
