from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.api import get_app_settings
from app.core.config import Settings
from app.models.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        environment=settings.environment,
        hotel_provider=settings.hotel_provider,
        has_places_key=bool(settings.google_maps_api_key),
        has_locationiq_key=bool(settings.locationiq_api_key),
        timestamp=datetime.now(timezone.utc),
    )
