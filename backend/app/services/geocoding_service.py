import logging
import threading
from typing import Optional

import numpy as np

from app.core.config import Settings, settings as default_settings
from app.core.errors import ConfigError, GeocodeError, NetworkError, NotFoundError
from app.models.domain import Coordinate, ResolvedLocation
from app.tools.geocoding_tool import GeocodingTool, GoogleGeocodingTool
from app.tools.known_cities import KnownCitiesTool

logger = logging.getLogger(__name__)

REMOTE_ERRORS = (NetworkError, NotFoundError, ConfigError)


class GeocodingService:
    """
    Resolves free text to a location: remote geocoder first, then the static
    city table, then a jittered default coordinate. Only a blank query (or an
    unknown one when the default is disabled) raises GeocodeError.
    """

    def __init__(
        self,
        geocoding_tool: Optional[GeocodingTool] = None,
        known_cities: Optional[KnownCitiesTool] = None,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.settings = settings or default_settings
        self.geocoding_tool = geocoding_tool or GoogleGeocodingTool(
            api_key=self.settings.google_maps_api_key,
            timeout=self.settings.request_timeout_seconds,
        )
        self.known_cities = known_cities or KnownCitiesTool()
        self.rng = rng if rng is not None else np.random.default_rng()
        self._rng_lock = threading.Lock()

    def resolve(self, query: str, country: Optional[str] = None) -> ResolvedLocation:
        text = (query or "").strip()
        if not text:
            raise GeocodeError("Please enter a location to search near.")

        try:
            return self.geocoding_tool.geocode(text, country=country)
        except REMOTE_ERRORS as exc:
            logger.warning("Remote geocoding failed for %r, falling back: %s", text, exc)

        city = self.known_cities.lookup(text)
        if city:
            logger.info("Resolved %r from the known cities table", text)
            return ResolvedLocation(
                coordinate=Coordinate(lat=city.lat, lng=city.lng),
                display_address=city.name,
                country=city.country,
            )

        if not self.settings.allow_default_location:
            raise GeocodeError(f"Could not find '{text}'. Try a nearby city or address.")
        return self._default_location(text)

    def reverse_resolve(self, coordinate: Coordinate) -> ResolvedLocation:
        try:
            return self.geocoding_tool.reverse_geocode(coordinate)
        except REMOTE_ERRORS as exc:
            logger.warning("Reverse geocoding failed for %s: %s", coordinate.as_text(), exc)
        return ResolvedLocation(coordinate=coordinate, display_address=coordinate.as_text())

    def _default_location(self, text: str) -> ResolvedLocation:
        jitter = self.settings.default_jitter_degrees
        with self._rng_lock:
            d_lat, d_lng = self.rng.uniform(-jitter, jitter, size=2)
        coordinate = Coordinate(
            lat=min(max(self.settings.default_lat + float(d_lat), -90.0), 90.0),
            lng=min(max(self.settings.default_lng + float(d_lng), -180.0), 180.0),
        )
        logger.warning("Unknown location %r, using default near %s", text, coordinate.as_text())
        return ResolvedLocation(coordinate=coordinate, display_address=text)
