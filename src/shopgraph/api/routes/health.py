from fastapi import APIRouter, Depends, Response, status

from shopgraph.api.dependencies import get_settings
from shopgraph.api.schemas import HealthResponse, ReadinessResponse
from shopgraph.config import ShopifySettings
from shopgraph.core.executor import resolve_endpoint

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    settings: ShopifySettings = Depends(get_settings),
) -> ReadinessResponse:
    """Readiness probe: checks the store endpoint and access token are configured."""
    endpoint_ok = resolve_endpoint(settings) is not None
    token_ok = bool(settings.access_token)
    if endpoint_ok and token_ok:
        return ReadinessResponse()
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(
        status="degraded",
        endpoint="configured" if endpoint_ok else "missing",
        access_token="configured" if token_ok else "missing",
    )
