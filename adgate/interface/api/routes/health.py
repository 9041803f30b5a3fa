"""Liveness check route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from adgate.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the gateway is up, with the running build."""
    return HealthResponse(
        status="ok",
        message="API is running",
        timestamp=datetime.now(timezone.utc),
        version=settings.version,
        git_sha=settings.git_sha,
    )
