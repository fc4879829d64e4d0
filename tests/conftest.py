"""Shared test fixtures: no network needed."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from agent.core import MealDictatorAgent
from backend.models import Coordinates, LookupFailure, Restaurant
from backend.pipeline import RestaurantQueryPipeline

MAMNOON = Restaurant(name="Mamnoon", address="1508 Melrose Ave")
SEATTLE = Coordinates(lat="47.6", lng="-122.3")


class FakeResolver:
    """Resolver stub that records every place it was asked about."""

    def __init__(self, coords: Optional[Coordinates] = SEATTLE, fail: bool = False) -> None:
        self.coords = coords
        self.fail = fail
        self.calls: List[str] = []

    def resolve(self, place_name: str) -> Coordinates:
        self.calls.append(place_name)
        if self.fail or self.coords is None:
            raise LookupFailure("geocoding returned no results")
        return self.coords


class FakeFinder:
    """Finder stub returning a fixed restaurant."""

    def __init__(self, restaurant: Optional[Restaurant] = MAMNOON, fail: bool = False) -> None:
        self.restaurant = restaurant
        self.fail = fail
        self.calls: List[Coordinates] = []

    def find(self, coords: Coordinates) -> Restaurant:
        self.calls.append(coords)
        if self.fail or self.restaurant is None:
            raise LookupFailure("restaurant record missing name")
        return self.restaurant


def fake_http_response(payload: Any = None, status: int = 200, json_error: bool = False) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status.return_value = None
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    return resp


def geocode_payload(lat: Any = 47.6, lng: Any = -122.3) -> Dict[str, Any]:
    return {
        "results": [
            {"geometry": {"location": {"lat": lat, "lng": lng}}},
        ],
        "status": "OK",
    }


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture
def finder() -> FakeFinder:
    return FakeFinder()


@pytest.fixture
def pipeline(resolver: FakeResolver, finder: FakeFinder) -> RestaurantQueryPipeline:
    return RestaurantQueryPipeline(resolver=resolver, finder=finder)


@pytest.fixture
def fake_logger() -> MagicMock:
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def meal_agent(pipeline: RestaurantQueryPipeline, fake_logger: MagicMock) -> MealDictatorAgent:
    return MealDictatorAgent(pipeline=pipeline, logger=fake_logger)
