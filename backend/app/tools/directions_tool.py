from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.core.errors import ConfigError, NotFoundError
from app.models.domain import Coordinate
from app.tools.http import get_json

LOCATIONIQ_DIRECTIONS_URL = "https://eu1.locationiq.com/v1/directions/driving"


@dataclass(frozen=True)
class RouteSummary:
    duration_minutes: int
    distance_km: float


class LocationIQDirectionsTool:
    """Driving route summary (duration and road distance) from LocationIQ."""

    def __init__(self, api_key: Optional[str], timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout

    def route_summary(self, origin: Coordinate, destination: Coordinate) -> RouteSummary:
        if not self.api_key:
            raise ConfigError("LocationIQ API key not configured")
        url = (
            f"{LOCATIONIQ_DIRECTIONS_URL}/"
            f"{origin.lng},{origin.lat};{destination.lng},{destination.lat}"
        )
        data = get_json(
            url,
            params={"key": self.api_key, "overview": "false", "steps": "false"},
            timeout=self.timeout,
        )
        routes = data.get("routes") or []
        if not routes:
            raise NotFoundError("no driving route found")
        route = routes[0]
        return RouteSummary(
            duration_minutes=round(float(route.get("duration") or 0.0) / 60),
            distance_km=round(float(route.get("distance") or 0.0) / 1000, 1),
        )
