import logging
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.core.errors import ConfigError, NetworkError, NotFoundError
from app.models.domain import Coordinate, HotelSearchResult, ResolvedLocation, SearchOutcome
from app.services.geocoding_service import GeocodingService
from app.tools.hotel_tool import HotelAggregator, RemoteAggregator, SyntheticAggregator
from app.tools.places_tool import GooglePlacesTool

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = "Live hotel data is unavailable right now; showing sample hotels near {place}."


class HotelSearchService:
    def __init__(
        self,
        geocoding_service: Optional[GeocodingService] = None,
        aggregator: Optional[HotelAggregator] = None,
        fallback_aggregator: Optional[SyntheticAggregator] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.geocoding_service = geocoding_service or GeocodingService(settings=self.settings)
        self.fallback_aggregator = fallback_aggregator or SyntheticAggregator(
            roster_size=self.settings.synthetic_roster_size,
            seed=self.settings.synthetic_seed,
        )
        self.aggregator = aggregator or self._build_primary()

    def _build_primary(self) -> HotelAggregator:
        if self.settings.hotel_provider.lower() == "synthetic":
            return self.fallback_aggregator
        places_tool = GooglePlacesTool(
            api_key=self.settings.google_maps_api_key,
            timeout=self.settings.request_timeout_seconds,
        )
        return RemoteAggregator(
            places_tool=places_tool,
            max_results=self.settings.max_remote_results,
            workers=self.settings.detail_workers,
        )

    def find_hotels(self, location: ResolvedLocation, radius_meters: int) -> HotelSearchResult:
        """Hotels near the location, always sorted by distance; never raises for provider failures."""
        notice = None
        try:
            hotels = self.aggregator.find_hotels(location, radius_meters)
            if not hotels and self.aggregator is not self.fallback_aggregator:
                raise NotFoundError("remote provider returned no usable hotels")
            source = self.aggregator.source
        except (NetworkError, NotFoundError, ConfigError) as exc:
            logger.warning("Hotel lookup failed near %s, using synthetic data: %s",
                           location.display_address, exc)
            hotels = self.fallback_aggregator.find_hotels(location, radius_meters)
            source = self.fallback_aggregator.source
            notice = FALLBACK_NOTICE.format(place=location.display_address)

        ordered = tuple(sorted(hotels, key=lambda h: h.distance_km))
        return HotelSearchResult(
            hotels=ordered,
            source=source,
            degraded=notice is not None,
            notice=notice,
        )

    def search(
        self,
        query: Optional[str] = None,
        coordinate: Optional[Coordinate] = None,
        radius_meters: Optional[int] = None,
    ) -> SearchOutcome:
        radius = radius_meters or self.settings.default_radius_meters
        if coordinate is not None:
            location = self.geocoding_service.reverse_resolve(coordinate)
        else:
            location = self.geocoding_service.resolve(query or "")
        result = self.find_hotels(location, radius)
        logger.info(
            "Found %d %s hotels within %dm of %s",
            len(result.hotels),
            result.source.value,
            radius,
            location.display_address,
        )
        return SearchOutcome(location=location, result=result, radius_meters=radius)
