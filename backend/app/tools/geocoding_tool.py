from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

from app.core.errors import ConfigError, NetworkError, NotFoundError
from app.models.domain import Coordinate, ResolvedLocation
from app.tools.http import get_json

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

LOCALITY_TYPES = ("locality", "postal_town", "sublocality", "administrative_area_level_2")
REGION_TYPES = ("administrative_area_level_1",)


class GeocodingTool(Protocol):
    """Remote geocoding abstraction to allow swapping providers."""

    def geocode(self, query: str, country: Optional[str] = None) -> ResolvedLocation:
        ...

    def reverse_geocode(self, coordinate: Coordinate) -> ResolvedLocation:
        ...


def _component(components: List[dict], types: tuple) -> Optional[str]:
    for wanted in types:
        for comp in components:
            if wanted in comp.get("types", []):
                return comp.get("long_name")
    return None


def build_display_address(
    locality: Optional[str],
    region: Optional[str],
    country: Optional[str],
    coordinate: Coordinate,
) -> str:
    parts = [p for p in (locality, region, country) if p]
    # A locality that is also the region name (e.g. Singapore) reads badly twice
    deduped: List[str] = []
    for part in parts:
        if part not in deduped:
            deduped.append(part)
    if deduped:
        return ", ".join(deduped)
    return coordinate.as_text()


def parse_geocode_result(item: Dict) -> ResolvedLocation:
    loc = (item.get("geometry") or {}).get("location") or {}
    try:
        coordinate = Coordinate(lat=float(loc["lat"]), lng=float(loc["lng"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise NetworkError("geocode result without usable geometry") from exc

    components = item.get("address_components") or []
    locality = _component(components, LOCALITY_TYPES)
    region = _component(components, REGION_TYPES)
    country = _component(components, ("country",))
    return ResolvedLocation(
        coordinate=coordinate,
        display_address=build_display_address(locality, region, country, coordinate),
        country=country,
        formatted_address=item.get("formatted_address"),
    )


class GoogleGeocodingTool(GeocodingTool):
    """
    GeocodingTool backed by the Google Geocoding API.
    A missing key is reported as ConfigError on first use, never at construction.
    """

    def __init__(self, api_key: Optional[str], timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout

    def _request(self, params: Dict[str, str]) -> List[dict]:
        if not self.api_key:
            raise ConfigError("Google geocoding API key not configured")
        data = get_json(GEOCODE_URL, params={**params, "key": self.api_key}, timeout=self.timeout)
        status = data.get("status")
        if status == "ZERO_RESULTS":
            raise NotFoundError("geocoder returned no results")
        if status != "OK":
            raise NetworkError(
                f"geocoder status {status}: {data.get('error_message', 'no message')}"
            )
        results = data.get("results") or []
        if not results:
            raise NotFoundError("geocoder returned no results")
        return results

    def geocode(self, query: str, country: Optional[str] = None) -> ResolvedLocation:
        params = {"address": query}
        if country:
            params["components"] = f"country:{country}"
        results = self._request(params)
        logger.debug("Geocoder returned %d candidates for %r", len(results), query)
        return parse_geocode_result(results[0])

    def reverse_geocode(self, coordinate: Coordinate) -> ResolvedLocation:
        results = self._request({"latlng": f"{coordinate.lat},{coordinate.lng}"})
        parsed = parse_geocode_result(results[0])
        # Keep the caller's coordinate rather than the snapped address point
        return ResolvedLocation(
            coordinate=coordinate,
            display_address=parsed.display_address,
            country=parsed.country,
            formatted_address=parsed.formatted_address,
        )
