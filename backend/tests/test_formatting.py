from app.models.domain import Coordinate
from app.services.formatting import (
    PLACEHOLDER_IMAGE,
    PRICE_BANDS,
    build_directions_url,
    format_distance,
    format_price_band,
    select_photo_url,
)


def test_format_distance_uses_one_decimal():
    assert format_distance(0.0) == "0.0 km"
    assert format_distance(1.26) == "1.3 km"
    assert format_distance(12.04) == "12.0 km"


def test_price_bands_for_each_level():
    assert [format_price_band(level) for level in range(5)] == [
        "$25-50",
        "$50-100",
        "$100-200",
        "$200-400",
        "$400+",
    ]
    assert format_price_band(None) == "$50-100"


def test_price_band_mapping_is_monotonic():
    levels = list(range(-2, 8))
    ranks = [PRICE_BANDS.index(format_price_band(level)) for level in levels]
    assert ranks == sorted(ranks)


def test_select_photo_url_prefers_first_photo():
    photos = [{"photo_reference": "abc"}, {"photo_reference": "def"}]
    url = select_photo_url(photos, "key-1")
    assert "photoreference=abc" in url
    assert "maxwidth=400" in url
    assert select_photo_url([], "key-1") == PLACEHOLDER_IMAGE
    assert select_photo_url(photos, None) == PLACEHOLDER_IMAGE


def test_directions_url_embeds_both_coordinates():
    origin = Coordinate(40.7128, -74.006)
    destination = Coordinate(40.72, -74.0)
    url = build_directions_url(origin, destination)
    assert url == "https://www.google.com/maps/dir/40.7128,-74.006/40.72,-74.0/@40.72,-74.0,15z"

    osm = build_directions_url(origin, destination, provider="osm")
    assert osm.startswith("https://www.openstreetmap.org/directions")
    assert "40.7128%2C-74.006%3B40.72%2C-74.0" in osm
