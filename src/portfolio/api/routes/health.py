from fastapi import APIRouter, Depends, Response, status

from portfolio.api.dependencies import get_store
from portfolio.api.schemas import HealthResponse, ReadinessResponse
from portfolio.core.ports.store import ContentStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    store: ContentStore = Depends(get_store),
) -> ReadinessResponse:
    """Readiness probe: is the posts directory reachable?"""
    if store.ping():
        return ReadinessResponse(status="ok", content="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", content="down")
