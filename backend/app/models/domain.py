from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class HotelSource(str, Enum):
    remote = "remote"
    synthetic = "synthetic"


class SearchState(str, Enum):
    idle = "idle"
    searching = "searching"
    results = "results"


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"latitude out of range: {self.lat}")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"longitude out of range: {self.lng}")

    def as_text(self) -> str:
        return f"{self.lat:.4f}, {self.lng:.4f}"


@dataclass(frozen=True)
class ResolvedLocation:
    coordinate: Coordinate
    display_address: str
    country: Optional[str] = None
    formatted_address: Optional[str] = None


@dataclass(frozen=True)
class Review:
    author: str
    text: str
    rating: float


@dataclass(frozen=True)
class HotelRecord:
    id: str
    name: str
    rating: float
    address: str
    distance_km: float
    price_range_text: str
    image_url: str
    coordinate: Coordinate
    source: HotelSource
    phone: Optional[str] = None
    website: Optional[str] = None
    price_level: Optional[int] = None
    hotel_type: Optional[str] = None
    amenities: FrozenSet[str] = frozenset()
    reviews: Tuple[Review, ...] = ()
    types: Tuple[str, ...] = ()
    opening_hours: Tuple[str, ...] = ()


@dataclass
class HotelSearchResult:
    hotels: Tuple[HotelRecord, ...]
    source: HotelSource
    degraded: bool = False
    notice: Optional[str] = None


@dataclass
class SearchOutcome:
    location: ResolvedLocation
    result: HotelSearchResult
    radius_meters: int = 0
