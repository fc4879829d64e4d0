from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .fetch import get_json
from .models import Coordinates, LookupFailure

GOOGLE_MAP_URL = "http://maps.googleapis.com/maps/api/geocode/json"


class LocationResolver:
    """Thin wrapper around the Google geocoding endpoint.

    Uses environment variables:
      - MEAL_DICTATOR_GEOCODE_URL (default: GOOGLE_MAP_URL)
      - MEAL_DICTATOR_HTTP_TIMEOUT (seconds, default: 8)
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.url = (url or os.getenv("MEAL_DICTATOR_GEOCODE_URL") or GOOGLE_MAP_URL).strip()
        self.timeout = timeout

    def resolve(self, place_name: str) -> Coordinates:
        place = (place_name or "").strip()
        if not place:
            raise LookupFailure("empty place name")
        payload = get_json(self.url, params={"address": place}, timeout=self.timeout)
        return Coordinates.from_location(_first_location(payload))


def _first_location(payload: Dict[str, Any]) -> Dict[str, Any]:
    results = payload.get("results")
    if not isinstance(results, list) or not results:
        raise LookupFailure("geocoding returned no results")
    first = results[0]
    geometry = first.get("geometry") if isinstance(first, dict) else None
    location = geometry.get("location") if isinstance(geometry, dict) else None
    if not isinstance(location, dict):
        raise LookupFailure("geocoding result missing geometry.location")
    return location


__all__ = ["GOOGLE_MAP_URL", "LocationResolver"]
