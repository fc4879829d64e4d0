from __future__ import annotations

import os
from typing import Optional

from .fetch import get_json
from .models import Coordinates, Restaurant

MEAL_DICTATOR_URL = "http://meal-dictator.herokuapp.com/places"


class RestaurantFinder:
    """Asks the meal-dictator service for a place to eat near a point.

    The first record returned is trusted as-is; nothing is ranked or filtered.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.url = (url or os.getenv("MEAL_DICTATOR_PLACES_URL") or MEAL_DICTATOR_URL).strip()
        self.timeout = timeout

    def find(self, coords: Coordinates) -> Restaurant:
        payload = get_json(self.url, params={"lat": coords.lat, "lon": coords.lng}, timeout=self.timeout)
        return Restaurant.from_dict(payload)


__all__ = ["MEAL_DICTATOR_URL", "RestaurantFinder"]
