from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

from app.core.errors import ConfigError, NetworkError, NotFoundError
from app.models.domain import Coordinate
from app.tools.http import get_json

logger = logging.getLogger(__name__)

NEARBY_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"

DETAIL_FIELDS = (
    "name",
    "rating",
    "formatted_address",
    "formatted_phone_number",
    "website",
    "photos",
    "price_level",
    "reviews",
    "types",
    "opening_hours",
)


class PlacesTool(Protocol):
    """Nearby-search plus per-place details, as exposed by a places provider."""

    api_key: Optional[str]

    def nearby_search(
        self, coordinate: Coordinate, radius_meters: int, category: str = "lodging"
    ) -> List[dict]:
        ...

    def place_details(self, place_id: str) -> dict:
        ...


class GooglePlacesTool(PlacesTool):
    def __init__(self, api_key: Optional[str], timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout

    def _require_key(self) -> str:
        if not self.api_key:
            raise ConfigError("Google Places API key not configured")
        return self.api_key

    def nearby_search(
        self, coordinate: Coordinate, radius_meters: int, category: str = "lodging"
    ) -> List[dict]:
        params: Dict[str, str] = {
            "location": f"{coordinate.lat},{coordinate.lng}",
            "radius": str(radius_meters),
            "type": category,
            "key": self._require_key(),
        }
        data = get_json(NEARBY_SEARCH_URL, params=params, timeout=self.timeout)
        status = data.get("status")
        if status == "ZERO_RESULTS":
            raise NotFoundError("no places found nearby")
        if status != "OK":
            raise NetworkError(
                f"nearby search status {status}: {data.get('error_message', 'no message')}"
            )
        results = data.get("results") or []
        logger.debug("Nearby search returned %d stubs", len(results))
        return results

    def place_details(self, place_id: str) -> dict:
        params = {
            "place_id": place_id,
            "fields": ",".join(DETAIL_FIELDS),
            "key": self._require_key(),
        }
        data = get_json(DETAILS_URL, params=params, timeout=self.timeout)
        if data.get("status") not in (None, "OK"):
            raise NetworkError(f"details status {data.get('status')} for {place_id}")
        return data.get("result") or {}
