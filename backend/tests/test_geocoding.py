from unittest.mock import MagicMock, patch

import numpy as np
import pytest
import requests

from app.core.config import Settings
from app.core.errors import GeocodeError
from app.models.domain import Coordinate
from app.services.geocoding_service import GeocodingService
from app.tools.geocoding_tool import GoogleGeocodingTool


def _settings(**overrides) -> Settings:
    values = {"google_maps_api_key": None, "allow_default_location": True}
    values.update(overrides)
    return Settings(**values)


def _response(payload: dict) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


LONDON_PAYLOAD = {
    "status": "OK",
    "results": [
        {
            "geometry": {"location": {"lat": 51.5072, "lng": -0.1276}},
            "formatted_address": "London, UK",
            "address_components": [
                {"long_name": "London", "types": ["postal_town"]},
                {"long_name": "England", "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United Kingdom", "types": ["country", "political"]},
            ],
        }
    ],
}


@patch("app.tools.http.requests.get")
def test_remote_geocode_maps_most_specific_fields(mock_get):
    mock_get.return_value = _response(LONDON_PAYLOAD)
    service = GeocodingService(settings=_settings(google_maps_api_key="test-key"))

    location = service.resolve("London")

    assert location.coordinate == Coordinate(51.5072, -0.1276)
    assert location.display_address == "London, England, United Kingdom"
    assert location.country == "United Kingdom"
    assert location.formatted_address == "London, UK"
    assert mock_get.call_args.kwargs["params"]["address"] == "London"


@patch("app.tools.http.requests.get")
def test_remote_geocode_falls_back_to_country_or_coordinates(mock_get):
    mock_get.return_value = _response(
        {
            "status": "OK",
            "results": [
                {
                    "geometry": {"location": {"lat": 46.2, "lng": 2.2}},
                    "address_components": [{"long_name": "France", "types": ["country"]}],
                }
            ],
        }
    )
    tool = GoogleGeocodingTool(api_key="test-key")
    assert tool.geocode("France").display_address == "France"

    mock_get.return_value = _response(
        {"status": "OK", "results": [{"geometry": {"location": {"lat": 10.5, "lng": -20.25}}}]}
    )
    assert tool.geocode("middle of the ocean").display_address == "10.5000, -20.2500"


def test_known_city_used_when_remote_unavailable():
    service = GeocodingService(settings=_settings())

    location = service.resolve("  LONDON ")

    assert location.coordinate == Coordinate(51.5074, -0.1278)
    assert location.country == "United Kingdom"
    assert location.display_address == "London"


@patch("app.tools.http.requests.get")
def test_zero_results_falls_back_to_known_city(mock_get):
    mock_get.return_value = _response({"status": "ZERO_RESULTS", "results": []})
    service = GeocodingService(settings=_settings(google_maps_api_key="test-key"))

    location = service.resolve("paris")

    assert location.country == "France"
    assert location.coordinate == Coordinate(48.8566, 2.3522)


@patch("app.tools.http.requests.get")
def test_network_error_then_unknown_query_returns_jittered_default(mock_get):
    mock_get.side_effect = requests.ConnectionError("boom")
    settings = _settings(google_maps_api_key="test-key")
    service = GeocodingService(settings=settings, rng=np.random.default_rng(5))

    first = service.resolve("Nowhereville")
    second = service.resolve("Nowhereville")

    for location in (first, second):
        assert location.display_address == "Nowhereville"
        assert abs(location.coordinate.lat - settings.default_lat) <= settings.default_jitter_degrees
        assert abs(location.coordinate.lng - settings.default_lng) <= settings.default_jitter_degrees
    assert first.coordinate != second.coordinate


def test_unknown_query_raises_when_default_location_disabled():
    service = GeocodingService(settings=_settings(allow_default_location=False))
    with pytest.raises(GeocodeError):
        service.resolve("Nowhereville")


def test_blank_query_raises():
    service = GeocodingService(settings=_settings())
    with pytest.raises(GeocodeError):
        service.resolve("   ")


@patch("app.tools.http.requests.get")
def test_reverse_resolve_keeps_coordinate_and_reads_address(mock_get):
    mock_get.return_value = _response(LONDON_PAYLOAD)
    service = GeocodingService(settings=_settings(google_maps_api_key="test-key"))
    coordinate = Coordinate(51.5, -0.12)

    location = service.reverse_resolve(coordinate)

    assert location.coordinate == coordinate
    assert location.display_address == "London, England, United Kingdom"
    assert mock_get.call_args.kwargs["params"]["latlng"] == "51.5,-0.12"


@patch("app.tools.http.requests.get")
def test_reverse_resolve_degrades_to_coordinate_text(mock_get):
    mock_get.side_effect = requests.Timeout("slow")
    service = GeocodingService(settings=_settings(google_maps_api_key="test-key"))

    location = service.reverse_resolve(Coordinate(12.34567, 98.76543))

    assert location.display_address == "12.3457, 98.7654"
    assert location.country is None
