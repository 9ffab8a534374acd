"""Health check routes."""

import logging

from fastapi import APIRouter

from learning_patterns.core.dependencies import Storage
from learning_patterns.schemas.v1.health import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check."""
    return HealthResponse(status="ok")


@router.get("/health/live", response_model=HealthResponse)
async def liveness_check():
    return HealthResponse(status="alive")


@router.get("/health/ready", response_model=ReadyResponse)
async def readiness_check(storage: Storage):
    """Readiness check: every data directory must be writable."""
    dependencies: dict[str, bool] = {}
    for name, store in storage.all_stores().items():
        dependencies[name] = await store.is_writable()

    storage_ok = all(dependencies.values())
    if not storage_ok:
        logger.warning(
            "Health readiness storage check failed",
            extra={"route": "/api/v1/health/ready", "dependencies": dependencies},
        )
    return ReadyResponse(
        status="ready" if storage_ok else "degraded",
        storage=storage_ok,
        dependencies=dependencies,
    )
