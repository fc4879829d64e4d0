from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class LookupFailure(Exception):
    """Raised when a downstream lookup can't be reached or parsed."""


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude as the decimal text the geocoder sent."""

    lat: str
    lng: str

    @classmethod
    def from_location(cls, location: Dict[str, Any]) -> "Coordinates":
        lat = location.get("lat")
        lng = location.get("lng")
        if lat is None or lng is None:
            raise LookupFailure("geocoding result missing lat/lng")
        if isinstance(lat, bool) or isinstance(lng, bool):
            raise LookupFailure("geocoding result has non-numeric lat/lng")
        try:
            float(lat)
            float(lng)
        except (TypeError, ValueError) as exc:
            raise LookupFailure("geocoding result has non-numeric lat/lng") from exc
        return cls(lat=str(lat), lng=str(lng))


@dataclass(frozen=True)
class Restaurant:
    name: str
    address: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Restaurant":
        name = data.get("name")
        address = data.get("address")
        if not isinstance(name, str) or not name.strip():
            raise LookupFailure("restaurant record missing name")
        if not isinstance(address, str) or not address.strip():
            raise LookupFailure("restaurant record missing address")
        return cls(name=name, address=address)

    def to_api(self) -> Dict[str, str]:
        return {"name": self.name, "address": self.address}


class QueryStatus(str, Enum):
    OK = "ok"
    MISSING_SLOT = "missing_slot"
    LOOKUP_FAILURE = "lookup_failure"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one city → restaurant query, returned as a value."""

    status: QueryStatus
    restaurant: Optional[Restaurant] = None
    reason: str = ""

    @classmethod
    def ok(cls, restaurant: Restaurant) -> "QueryResult":
        return cls(status=QueryStatus.OK, restaurant=restaurant)

    @classmethod
    def missing_slot(cls) -> "QueryResult":
        return cls(status=QueryStatus.MISSING_SLOT)

    @classmethod
    def lookup_failure(cls, reason: str = "") -> "QueryResult":
        return cls(status=QueryStatus.LOOKUP_FAILURE, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is QueryStatus.OK


__all__ = [
    "Coordinates",
    "LookupFailure",
    "QueryResult",
    "QueryStatus",
    "Restaurant",
]
