import logging

from fastapi import APIRouter, Depends

from app.api import get_app_settings
from app.core.config import Settings
from app.core.errors import ConfigError, NetworkError, NotFoundError
from app.models.schemas import DirectionsRequest, DirectionsResponse, RouteInfoSchema
from app.services.formatting import build_directions_url
from app.tools.directions_tool import LocationIQDirectionsTool
from app.tools.distance import distance_km

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=DirectionsResponse)
def get_directions(
    request: DirectionsRequest,
    settings: Settings = Depends(get_app_settings),
) -> DirectionsResponse:
    origin = request.origin.to_domain()
    destination = request.destination.to_domain()
    route_info = None
    if settings.locationiq_api_key:
        tool = LocationIQDirectionsTool(
            api_key=settings.locationiq_api_key,
            timeout=settings.request_timeout_seconds,
        )
        try:
            summary = tool.route_summary(origin, destination)
            route_info = RouteInfoSchema(
                duration_minutes=summary.duration_minutes,
                distance_km=summary.distance_km,
                hotel_name=request.hotel_name,
            )
        except (NetworkError, NotFoundError, ConfigError) as exc:
            logger.warning("Route summary unavailable: %s", exc)

    return DirectionsResponse(
        directions_url=build_directions_url(origin, destination, settings.directions_provider),
        straight_line_km=round(distance_km(origin, destination), 1),
        route_info=route_info,
    )
