from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.models.domain import (
    Coordinate,
    HotelRecord,
    HotelSource,
    ResolvedLocation,
    Review,
    SearchState,
)
from app.services.formatting import format_distance


class CoordinateSchema(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    def to_domain(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)


class GeocodeRequest(BaseModel):
    query: str


class ResolvedLocationSchema(BaseModel):
    lat: float
    lng: float
    display_address: str
    country: Optional[str] = None
    formatted_address: Optional[str] = None

    @classmethod
    def from_domain(cls, obj: ResolvedLocation) -> "ResolvedLocationSchema":
        return cls(
            lat=obj.coordinate.lat,
            lng=obj.coordinate.lng,
            display_address=obj.display_address,
            country=obj.country,
            formatted_address=obj.formatted_address,
        )


class ReviewSchema(BaseModel):
    author: str
    text: str
    rating: float

    @classmethod
    def from_domain(cls, obj: Review) -> "ReviewSchema":
        return cls(author=obj.author, text=obj.text, rating=obj.rating)


class HotelSchema(BaseModel):
    id: str
    name: str
    rating: float
    address: str
    distance_km: float
    distance_text: str
    price_range: str
    price_level: Optional[int] = None
    image_url: str
    lat: float
    lng: float
    phone: Optional[str] = None
    website: Optional[str] = None
    hotel_type: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    reviews: List[ReviewSchema] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)
    opening_hours: List[str] = Field(default_factory=list)
    source: HotelSource

    @classmethod
    def from_domain(cls, obj: HotelRecord) -> "HotelSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            rating=obj.rating,
            address=obj.address,
            distance_km=obj.distance_km,
            distance_text=format_distance(obj.distance_km),
            price_range=obj.price_range_text,
            price_level=obj.price_level,
            image_url=obj.image_url,
            lat=obj.coordinate.lat,
            lng=obj.coordinate.lng,
            phone=obj.phone,
            website=obj.website,
            hotel_type=obj.hotel_type,
            amenities=sorted(obj.amenities),
            reviews=[ReviewSchema.from_domain(r) for r in obj.reviews],
            types=list(obj.types),
            opening_hours=list(obj.opening_hours),
            source=obj.source,
        )


class HotelSearchRequest(BaseModel):
    location: Optional[str] = None
    lat: Optional[float] = Field(None, ge=-90.0, le=90.0)
    lng: Optional[float] = Field(None, ge=-180.0, le=180.0)
    radius_meters: Optional[int] = Field(None, gt=0, le=50000)
    session_id: Optional[str] = None

    @model_validator(mode="after")
    def check_location_or_coordinate(self) -> "HotelSearchRequest":
        has_coordinate = self.lat is not None and self.lng is not None
        if (self.lat is None) != (self.lng is None):
            raise ValueError("lat and lng must be given together")
        if not has_coordinate and not (self.location and self.location.strip()):
            raise ValueError("either location or lat/lng is required")
        return self


class HotelSearchResponse(BaseModel):
    session_id: str
    state: SearchState
    location: Optional[ResolvedLocationSchema] = None
    hotels: List[HotelSchema] = Field(default_factory=list)
    source: Optional[HotelSource] = None
    degraded: bool = False
    notice: Optional[str] = None


class DirectionsRequest(BaseModel):
    origin: CoordinateSchema
    destination: CoordinateSchema
    hotel_name: Optional[str] = None


class RouteInfoSchema(BaseModel):
    duration_minutes: int
    distance_km: float
    hotel_name: Optional[str] = None


class DirectionsResponse(BaseModel):
    directions_url: str
    straight_line_km: float
    route_info: Optional[RouteInfoSchema] = None


class HealthResponse(BaseModel):
    status: str
    environment: str
    hotel_provider: str
    has_places_key: bool
    has_locationiq_key: bool
    timestamp: datetime
