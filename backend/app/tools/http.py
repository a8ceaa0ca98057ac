from typing import Any, Dict, Optional

import requests

from app.core.errors import NetworkError

USER_AGENT = "hotel-finder/0.1"


def get_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = 10.0,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """GET a JSON document, turning every transport or HTTP failure into NetworkError."""
    http = session or requests
    try:
        resp = http.get(url, params=params, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"request to {url} failed: {exc.__class__.__name__}") from exc

    try:
        data = resp.json() if resp.content else {}
    except ValueError as exc:
        raise NetworkError(f"invalid JSON from {url}") from exc
    if not isinstance(data, dict):
        raise NetworkError(f"unexpected payload from {url}")
    return data
