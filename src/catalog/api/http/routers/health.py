"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "catalog"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 503 when the product store cannot be reached."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    store: dict[str, Any] = {"backend": app_deps.product_repository.backend}
    ready = True
    if app_deps.database_service is not None:
        db_healthy = app_deps.database_service.health_check()
        store["status"] = "healthy" if db_healthy else "unhealthy"
        ready = db_healthy
    else:
        store["status"] = "healthy"

    response = {
        "status": "ready" if ready else "not_ready",
        "environment": config.app.environment,
        "checks": {"store": store},
    }
    if not ready:
        return JSONResponse(status_code=503, content=response)
    return response
