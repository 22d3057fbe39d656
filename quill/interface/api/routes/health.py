"""Liveness route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from quill.config import Settings
from quill.domain.value.common import WireModel
from quill.interface.api.envelope import Envelope, ok

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthStatus(WireModel):
    """Service liveness details."""

    status: str
    version: str
    environment: str
    cache_backend: str


@router.get("/health", response_model=Envelope[HealthStatus])
async def health_check(settings: FromDishka[Settings]) -> Envelope[HealthStatus]:
    """Report that the process is up.

    Does not touch the database or the cache.
    """
    return ok(
        HealthStatus(
            status="healthy",
            version="0.1.0",
            environment=settings.environment,
            cache_backend=settings.cache.backend,
        )
    )
