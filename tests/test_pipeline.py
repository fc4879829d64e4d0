"""Tests for backend.pipeline: chaining and the all-or-nothing failure policy."""

from __future__ import annotations

import pytest

from backend.models import QueryResult, QueryStatus
from backend.pipeline import RestaurantQueryPipeline

from .conftest import MAMNOON, SEATTLE, FakeFinder, FakeResolver


class TestRestaurantQueryPipeline:
    def test_success(self, pipeline: RestaurantQueryPipeline, resolver: FakeResolver, finder: FakeFinder) -> None:
        result = pipeline.query("Seattle")
        assert result == QueryResult.ok(MAMNOON)
        assert result.is_ok
        assert resolver.calls == ["Seattle"]
        assert finder.calls == [SEATTLE]

    def test_strips_city(self, pipeline: RestaurantQueryPipeline, resolver: FakeResolver) -> None:
        pipeline.query("  Seattle ")
        assert resolver.calls == ["Seattle"]

    @pytest.mark.parametrize("city", [None, "", "   "])
    def test_missing_city_makes_no_calls(
        self, city, pipeline: RestaurantQueryPipeline, resolver: FakeResolver, finder: FakeFinder
    ) -> None:
        result = pipeline.query(city)
        assert result.status is QueryStatus.MISSING_SLOT
        assert resolver.calls == []
        assert finder.calls == []

    def test_resolver_failure_skips_finder(self) -> None:
        resolver = FakeResolver(fail=True)
        finder = FakeFinder()
        result = RestaurantQueryPipeline(resolver=resolver, finder=finder).query("Atlantis")
        assert result.status is QueryStatus.LOOKUP_FAILURE
        assert result.restaurant is None
        assert len(resolver.calls) == 1
        assert finder.calls == []

    def test_finder_failure(self) -> None:
        finder = FakeFinder(fail=True)
        result = RestaurantQueryPipeline(resolver=FakeResolver(), finder=finder).query("Seattle")
        assert result.status is QueryStatus.LOOKUP_FAILURE
        assert result.restaurant is None
        assert len(finder.calls) == 1

    def test_failures_look_the_same(self) -> None:
        geo = RestaurantQueryPipeline(resolver=FakeResolver(fail=True), finder=FakeFinder()).query("x")
        food = RestaurantQueryPipeline(resolver=FakeResolver(), finder=FakeFinder(fail=True)).query("x")
        assert geo.status is food.status is QueryStatus.LOOKUP_FAILURE

    def test_repeat_query_is_stable(self, pipeline: RestaurantQueryPipeline) -> None:
        first = pipeline.query("Seattle")
        second = pipeline.query("Seattle")
        assert first == second
        assert first.restaurant == MAMNOON
