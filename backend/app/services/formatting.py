"""Display strings for hotels: distance, price band, photo and directions links."""

from typing import List, Optional
from urllib.parse import urlencode

from app.models.domain import Coordinate

PLACEHOLDER_IMAGE = "/placeholder.svg"
PHOTO_URL = "https://maps.googleapis.com/maps/api/place/photo"

PRICE_BANDS = ["$25-50", "$50-100", "$100-200", "$200-400", "$400+"]
DEFAULT_PRICE_LEVEL = 1


def format_distance(km: float) -> str:
    return f"{max(km, 0.0):.1f} km"


def clamp_price_level(level: Optional[int]) -> int:
    if level is None:
        return DEFAULT_PRICE_LEVEL
    return min(max(int(level), 0), len(PRICE_BANDS) - 1)


def format_price_band(level: Optional[int]) -> str:
    """Map a 0-4 price level to its band; unknown levels read as a mid-range band."""
    return PRICE_BANDS[clamp_price_level(level)]


def select_photo_url(photos: Optional[List[dict]], api_key: Optional[str], max_width: int = 400) -> str:
    if not photos or not api_key:
        return PLACEHOLDER_IMAGE
    reference = photos[0].get("photo_reference")
    if not reference:
        return PLACEHOLDER_IMAGE
    query = urlencode({"maxwidth": max_width, "photoreference": reference, "key": api_key})
    return f"{PHOTO_URL}?{query}"


def build_directions_url(origin: Coordinate, destination: Coordinate, provider: str = "google") -> str:
    if provider == "osm":
        return (
            "https://www.openstreetmap.org/directions?engine=fossgis_osrm_car"
            f"&route={origin.lat}%2C{origin.lng}%3B{destination.lat}%2C{destination.lng}"
        )
    return (
        f"https://www.google.com/maps/dir/{origin.lat},{origin.lng}/"
        f"{destination.lat},{destination.lng}/@{destination.lat},{destination.lng},15z"
    )
