from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class KnownCity:
    name: str
    lat: float
    lng: float
    country: str


class KnownCitiesTool:
    """Static lookup of well-known city names, used when remote geocoding is down."""

    def __init__(self) -> None:
        self.catalog: Dict[str, KnownCity] = {
            "london": KnownCity("London", 51.5074, -0.1278, "United Kingdom"),
            "paris": KnownCity("Paris", 48.8566, 2.3522, "France"),
            "new york": KnownCity("New York", 40.7128, -74.0060, "United States"),
            "new york city": KnownCity("New York", 40.7128, -74.0060, "United States"),
            "nyc": KnownCity("New York", 40.7128, -74.0060, "United States"),
            "los angeles": KnownCity("Los Angeles", 34.0522, -118.2437, "United States"),
            "san francisco": KnownCity("San Francisco", 37.7749, -122.4194, "United States"),
            "chicago": KnownCity("Chicago", 41.8781, -87.6298, "United States"),
            "toronto": KnownCity("Toronto", 43.6532, -79.3832, "Canada"),
            "tokyo": KnownCity("Tokyo", 35.6762, 139.6503, "Japan"),
            "sydney": KnownCity("Sydney", -33.8688, 151.2093, "Australia"),
            "dubai": KnownCity("Dubai", 25.2048, 55.2708, "United Arab Emirates"),
            "singapore": KnownCity("Singapore", 1.3521, 103.8198, "Singapore"),
            "berlin": KnownCity("Berlin", 52.5200, 13.4050, "Germany"),
            "rome": KnownCity("Rome", 41.9028, 12.4964, "Italy"),
            "madrid": KnownCity("Madrid", 40.4168, -3.7038, "Spain"),
            "barcelona": KnownCity("Barcelona", 41.3874, 2.1686, "Spain"),
            "lisbon": KnownCity("Lisbon", 38.7223, -9.1393, "Portugal"),
            "amsterdam": KnownCity("Amsterdam", 52.3676, 4.9041, "Netherlands"),
            "istanbul": KnownCity("Istanbul", 41.0082, 28.9784, "Turkey"),
            "mumbai": KnownCity("Mumbai", 19.0760, 72.8777, "India"),
            "delhi": KnownCity("Delhi", 28.7041, 77.1025, "India"),
            "new delhi": KnownCity("New Delhi", 28.6139, 77.2090, "India"),
            "bangalore": KnownCity("Bangalore", 12.9716, 77.5946, "India"),
            "bengaluru": KnownCity("Bengaluru", 12.9716, 77.5946, "India"),
            "kolkata": KnownCity("Kolkata", 22.5726, 88.3639, "India"),
            "chennai": KnownCity("Chennai", 13.0827, 80.2707, "India"),
            "hong kong": KnownCity("Hong Kong", 22.3193, 114.1694, "China"),
            "bangkok": KnownCity("Bangkok", 13.7563, 100.5018, "Thailand"),
            "mexico city": KnownCity("Mexico City", 19.4326, -99.1332, "Mexico"),
            "sao paulo": KnownCity("São Paulo", -23.5505, -46.6333, "Brazil"),
            "cairo": KnownCity("Cairo", 30.0444, 31.2357, "Egypt"),
            "cape town": KnownCity("Cape Town", -33.9249, 18.4241, "South Africa"),
        }

    def lookup(self, query: str) -> Optional[KnownCity]:
        return self.catalog.get(query.strip().lower())
