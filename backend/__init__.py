"""Lookup services behind the Meal Dictator skill."""

from .geocoding import GOOGLE_MAP_URL, LocationResolver
from .models import Coordinates, LookupFailure, QueryResult, QueryStatus, Restaurant
from .pipeline import RestaurantQueryPipeline
from .restaurants import MEAL_DICTATOR_URL, RestaurantFinder

__all__ = [
    "Coordinates",
    "GOOGLE_MAP_URL",
    "LocationResolver",
    "LookupFailure",
    "MEAL_DICTATOR_URL",
    "QueryResult",
    "QueryStatus",
    "Restaurant",
    "RestaurantFinder",
    "RestaurantQueryPipeline",
]
