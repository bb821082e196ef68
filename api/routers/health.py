"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.config import Settings, get_settings
from api.models.responses import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Report liveness and whether the model key is configured."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        openai_configured=settings.openai_configured,
    )
