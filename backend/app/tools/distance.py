"""Great-circle distance helpers (haversine, spherical Earth)."""

import math
from typing import Sequence

import numpy as np

from app.models.domain import Coordinate

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE_LAT = 111.32


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Distance in kilometers between two coordinates."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )
    # rounding can push h a hair past 1 for antipodal points
    h = min(max(h, 0.0), 1.0)
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distances_km(origin: Coordinate, points: Sequence[Coordinate]) -> np.ndarray:
    """Vectorised distance_km from one origin to many points."""
    if not points:
        return np.zeros(0)
    lats = np.radians([p.lat for p in points])
    lngs = np.radians([p.lng for p in points])
    o_lat = math.radians(origin.lat)
    o_lng = math.radians(origin.lng)
    h = (
        np.sin((lats - o_lat) / 2) ** 2
        + math.cos(o_lat) * np.cos(lats) * np.sin((lngs - o_lng) / 2) ** 2
    )
    h = np.clip(h, 0.0, 1.0)
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def offset_coordinate(origin: Coordinate, bearing_rad: float, km: float) -> Coordinate:
    """Move roughly `km` from origin along a bearing, flat-Earth approximation."""
    d_lat = (km * math.cos(bearing_rad)) / KM_PER_DEGREE_LAT
    cos_lat = max(math.cos(math.radians(origin.lat)), 1e-6)
    d_lng = (km * math.sin(bearing_rad)) / (KM_PER_DEGREE_LAT * cos_lat)
    lat = min(max(origin.lat + d_lat, -90.0), 90.0)
    lng = ((origin.lng + d_lng + 180.0) % 360.0) - 180.0
    return Coordinate(lat=lat, lng=lng)
