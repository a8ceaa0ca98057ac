from pathlib import Path
from unittest.mock import MagicMock, patch

from streamlit.testing.v1 import AppTest

FRONTEND = Path(__file__).resolve().parents[2] / "frontend" / "app.py"

SEARCH_BODY = {
    "session_id": "s1",
    "state": "results",
    "location": {"lat": 51.5074, "lng": -0.1278, "display_address": "London", "country": None},
    "hotels": [
        {
            "id": f"h{i}",
            "name": f"Hotel {i}",
            "rating": 4.0,
            "address": f"{i} Strand, Near London",
            "distance_km": 0.5 * (i + 1),
            "distance_text": f"{0.5 * (i + 1):.1f} km",
            "price_range": "$100-200",
            "image_url": "/placeholder.svg",
            "lat": 51.51,
            "lng": -0.12,
            "phone": None,
            "website": None,
            "amenities": [],
            "opening_hours": [],
            "reviews": [],
        }
        for i in range(3)
    ],
    "source": "synthetic",
    "degraded": False,
    "notice": None,
}

DIRECTIONS_BODY = {
    "directions_url": "https://www.google.com/maps/dir/51.5074,-0.1278/Hotel+0/@51.51,-0.12",
    "straight_line_km": 0.6,
    "route_info": {"duration_minutes": 7, "distance_km": 1.2},
}


def _fake_post(url, json=None, timeout=None):
    resp = MagicMock()
    resp.status_code = 200
    resp.raise_for_status.return_value = None
    resp.json.return_value = DIRECTIONS_BODY if url.endswith("/directions") else SEARCH_BODY
    return resp


def _directions_calls(mock_post) -> int:
    return sum(1 for call in mock_post.call_args_list if call.args[0].endswith("/directions"))


@patch("requests.post", side_effect=_fake_post)
def test_directions_are_fetched_only_for_the_clicked_hotel(mock_post):
    at = AppTest.from_file(str(FRONTEND), default_timeout=30)
    at.run()
    at.sidebar.text_input[0].input("london")
    at.sidebar.button[0].click().run()

    assert not at.exception
    assert len(at.subheader) >= 1
    assert _directions_calls(mock_post) == 0

    at.run()
    assert _directions_calls(mock_post) == 0

    at.button(key="directions-h1").click().run()
    assert _directions_calls(mock_post) == 1
    sent = [c for c in mock_post.call_args_list if c.args[0].endswith("/directions")][0]
    assert sent.kwargs["json"]["hotel_name"] == "Hotel 1"
    assert any("7 min drive" in caption.value for caption in at.caption)

    at.run()
    assert _directions_calls(mock_post) == 1
