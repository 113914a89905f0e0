"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from transcript_slicer import __version__
from transcript_slicer.api.models import HealthCheckResponse
from transcript_slicer.lib.config_manager import config
from transcript_slicer.services.youtube import get_default_service

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Report service liveness and caption source configuration."""
    source = get_default_service()

    return HealthCheckResponse(
        status="healthy",
        service=config.get("SERVICE_NAME"),
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks={
            "caption_source": {
                "status": "ok",
                "default_language": source.default_language,
                **source.get_proxy_info(),
            }
        },
    )
