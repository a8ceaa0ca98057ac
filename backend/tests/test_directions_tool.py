from unittest.mock import MagicMock, patch

import pytest
import requests

from app.core.errors import ConfigError, NetworkError, NotFoundError
from app.models.domain import Coordinate
from app.tools.directions_tool import LocationIQDirectionsTool

ORIGIN = Coordinate(40.7128, -74.006)
DESTINATION = Coordinate(40.72, -74.0)


@patch("app.tools.http.requests.get")
def test_route_summary_converts_units(mock_get):
    resp = MagicMock()
    resp.json.return_value = {"routes": [{"duration": 725.0, "distance": 2310.0}]}
    resp.raise_for_status.return_value = None
    mock_get.return_value = resp

    summary = LocationIQDirectionsTool(api_key="iq-key").route_summary(ORIGIN, DESTINATION)

    assert summary.duration_minutes == 12
    assert summary.distance_km == 2.3
    url = mock_get.call_args.args[0]
    assert url.endswith("/-74.006,40.7128;-74.0,40.72")


@patch("app.tools.http.requests.get")
def test_route_summary_errors(mock_get):
    resp = MagicMock()
    resp.json.return_value = {"routes": []}
    resp.raise_for_status.return_value = None
    mock_get.return_value = resp
    with pytest.raises(NotFoundError):
        LocationIQDirectionsTool(api_key="iq-key").route_summary(ORIGIN, DESTINATION)

    mock_get.side_effect = requests.HTTPError("401")
    with pytest.raises(NetworkError):
        LocationIQDirectionsTool(api_key="iq-key").route_summary(ORIGIN, DESTINATION)

    with pytest.raises(ConfigError):
        LocationIQDirectionsTool(api_key=None).route_summary(ORIGIN, DESTINATION)
