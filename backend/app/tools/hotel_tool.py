from __future__ import annotations

import logging
import math
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Protocol

import numpy as np

from app.core.errors import HotelFinderError
from app.models.domain import Coordinate, HotelRecord, HotelSource, ResolvedLocation, Review
from app.services.formatting import (
    PLACEHOLDER_IMAGE,
    clamp_price_level,
    format_price_band,
    select_photo_url,
)
from app.tools.distance import distance_km, distances_km, offset_coordinate
from app.tools.places_tool import PlacesTool
from app.tools.synthetic_hotels import (
    ROSTER,
    STREETS,
    TYPE_AMENITIES,
    TYPE_PRICE_LEVEL,
    TYPE_REVIEWS,
)

logger = logging.getLogger(__name__)

PLACE_TYPE_AMENITIES = {
    "spa": "Spa",
    "restaurant": "Restaurant",
    "bar": "Bar",
    "gym": "Fitness Center",
    "parking": "Parking",
    "cafe": "Cafe",
    "night_club": "Night Club",
    "casino": "Casino",
}


class HotelAggregator(Protocol):
    """Hotel lookup abstraction; implementations return records in no particular order."""

    source: HotelSource

    def find_hotels(self, location: ResolvedLocation, radius_meters: int) -> List[HotelRecord]:
        ...


class RemoteAggregator(HotelAggregator):
    """
    Lodging near a coordinate from a places provider. The nearest stubs (up
    to max_results) are each enriched with a details call; those calls run on
    a small thread pool, so the result is sorted by distance before it is
    returned.
    """

    source = HotelSource.remote

    def __init__(self, places_tool: PlacesTool, max_results: int = 20, workers: int = 8):
        self.places_tool = places_tool
        self.max_results = max_results
        self.workers = max(1, workers)

    def find_hotels(self, location: ResolvedLocation, radius_meters: int) -> List[HotelRecord]:
        stubs = self._nearest_stubs(
            location, self.places_tool.nearby_search(location.coordinate, radius_meters, "lodging")
        )
        if not stubs:
            return []

        with ThreadPoolExecutor(max_workers=min(self.workers, len(stubs))) as pool:
            enriched = list(pool.map(lambda stub: self._enrich(location, stub), stubs))

        hotels = [h for h in enriched if h is not None]
        logger.info(
            "Remote lookup near %s: %d stubs, %d enriched",
            location.display_address,
            len(stubs),
            len(hotels),
        )
        return sorted(hotels, key=lambda h: h.distance_km)

    def _nearest_stubs(self, location: ResolvedLocation, stubs: List[dict]) -> List[dict]:
        """Drop stubs without a usable position and keep the closest max_results."""
        located: List[dict] = []
        points: List[Coordinate] = []
        for stub in stubs:
            if not isinstance(stub, dict):
                logger.debug("Skipping malformed place stub %r", stub)
                continue
            geometry = stub.get("geometry")
            geo = geometry.get("location") if isinstance(geometry, dict) else None
            if not isinstance(geo, dict):
                logger.debug("Skipping place %s without geometry", stub.get("place_id"))
                continue
            try:
                points.append(Coordinate(lat=float(geo["lat"]), lng=float(geo["lng"])))
            except (KeyError, TypeError, ValueError):
                logger.debug("Skipping place %s without geometry", stub.get("place_id"))
                continue
            located.append(stub)
        if not located:
            return []
        order = np.argsort(distances_km(location.coordinate, points), kind="stable")
        return [located[i] for i in order[: self.max_results]]

    def _enrich(self, location: ResolvedLocation, stub: dict) -> Optional[HotelRecord]:
        place_id = stub.get("place_id")
        if not place_id:
            return None
        try:
            details = self.places_tool.place_details(place_id)
            return self._to_record(location, stub, details)
        except (HotelFinderError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Dropping place %s, details failed: %s", place_id, exc)
            return None

    def _to_record(self, location: ResolvedLocation, stub: dict, details: dict) -> HotelRecord:
        geo = stub["geometry"]["location"]
        coordinate = Coordinate(lat=float(geo["lat"]), lng=float(geo["lng"]))
        price_level = details.get("price_level")
        types = tuple(details.get("types") or stub.get("types") or [])
        reviews = tuple(
            Review(
                author=r.get("author_name") or "Anonymous",
                text=r.get("text") or "",
                rating=float(r.get("rating") or 0.0),
            )
            for r in (details.get("reviews") or [])[:3]
        )
        return HotelRecord(
            id=str(stub["place_id"]),
            name=details.get("name") or stub.get("name") or "Unnamed hotel",
            rating=float(details.get("rating") or stub.get("rating") or 0.0),
            address=details.get("formatted_address") or stub.get("vicinity") or "",
            distance_km=distance_km(location.coordinate, coordinate),
            price_range_text=format_price_band(price_level),
            image_url=select_photo_url(details.get("photos"), self.places_tool.api_key),
            coordinate=coordinate,
            source=HotelSource.remote,
            phone=details.get("formatted_phone_number"),
            website=details.get("website"),
            price_level=clamp_price_level(price_level),
            amenities=frozenset(
                label for t, label in PLACE_TYPE_AMENITIES.items() if t in types
            ),
            reviews=reviews,
            types=types,
            opening_hours=tuple((details.get("opening_hours") or {}).get("weekday_text") or []),
        )


class SyntheticAggregator(HotelAggregator):
    """
    Generates a fixed-size roster of plausible hotels around a location.
    All randomness comes from one numpy Generator; pass a seed (or a
    generator) for reproducible output.
    """

    source = HotelSource.synthetic

    def __init__(
        self,
        roster_size: int = 8,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.roster_size = roster_size
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._lock = threading.Lock()

    def find_hotels(self, location: ResolvedLocation, radius_meters: int) -> List[HotelRecord]:
        radius_km = max(radius_meters, 1) / 1000.0
        with self._lock:
            return [self._make_hotel(location, radius_km, i) for i in range(self.roster_size)]

    def _make_hotel(self, location: ResolvedLocation, radius_km: float, index: int) -> HotelRecord:
        entry = ROSTER[index % len(ROSTER)]
        hotel_type = entry["type"]
        name = entry["name"]
        if index >= len(ROSTER):
            name = f"{name} {index // len(ROSTER) + 1}"

        bearing = float(self.rng.uniform(0.0, 2 * math.pi))
        offset_km = float(self.rng.uniform(0.05, 0.9)) * radius_km
        coordinate = offset_coordinate(location.coordinate, bearing, offset_km)
        distance = distance_km(location.coordinate, coordinate)

        level = TYPE_PRICE_LEVEL[hotel_type]
        if distance <= 0.3 * radius_km:
            level += 1
        level = clamp_price_level(level)

        rating = float(np.clip(entry["rating"] + self.rng.uniform(-0.2, 0.2), 0.0, 5.0))
        street = STREETS[index % len(STREETS)]
        phone = f"+1 (555) {int(self.rng.integers(100, 1000))}-{int(self.rng.integers(1000, 10000))}"

        return HotelRecord(
            id=f"synthetic-{index + 1}",
            name=name,
            rating=round(rating, 1),
            address=f"{100 + index * 50} {street}, Near {location.display_address}",
            distance_km=distance,
            price_range_text=format_price_band(level),
            image_url=PLACEHOLDER_IMAGE,
            coordinate=coordinate,
            source=HotelSource.synthetic,
            phone=phone,
            price_level=level,
            hotel_type=hotel_type,
            amenities=frozenset(TYPE_AMENITIES[hotel_type]),
            reviews=tuple(Review(**r) for r in TYPE_REVIEWS[hotel_type]),
            types=("lodging",),
        )
