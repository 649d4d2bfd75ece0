"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check endpoint.

    The converter has no external dependencies, so the service is healthy
    whenever it can answer.

    Returns:
        HealthResponse: Service status and available endpoints
    """
    endpoints = {
        "conversion": [
            "POST /api/v1/convert - Convert SBV subtitles to a WebVTT download",
        ],
        "health": [
            "GET /api/v1/health - Service health check",
        ],
    }

    return HealthResponse(
        service=settings.app_name,
        status="running",
        version=settings.app_version,
        authentication="enabled" if settings.api_key else "disabled",
        endpoints=endpoints,
    )
