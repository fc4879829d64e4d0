from __future__ import annotations

import logging
from typing import Optional, Protocol

from .geocoding import LocationResolver
from .models import Coordinates, LookupFailure, QueryResult, Restaurant
from .restaurants import RestaurantFinder

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def resolve(self, place_name: str) -> Coordinates: ...


class Finder(Protocol):
    def find(self, coords: Coordinates) -> Restaurant: ...


class RestaurantQueryPipeline:
    """City name → coordinates → restaurant, all or nothing.

    Geocoding and restaurant failures are reported the same way; the reason
    is only kept for logs. No caching and no retries: both lookups are
    read-only, so calling again is always safe.
    """

    def __init__(
        self,
        resolver: Optional[Resolver] = None,
        finder: Optional[Finder] = None,
    ) -> None:
        self.resolver = resolver or LocationResolver()
        self.finder = finder or RestaurantFinder()

    def query(self, city_name: Optional[str]) -> QueryResult:
        city = (city_name or "").strip()
        if not city:
            return QueryResult.missing_slot()
        try:
            coords = self.resolver.resolve(city)
            restaurant = self.finder.find(coords)
        except LookupFailure as exc:
            logger.warning("restaurant lookup failed city=%r reason=%s", city, exc)
            return QueryResult.lookup_failure(str(exc))
        return QueryResult.ok(restaurant)


__all__ = ["Finder", "Resolver", "RestaurantQueryPipeline"]
