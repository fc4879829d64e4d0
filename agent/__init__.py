from __future__ import annotations

import logging
from typing import Optional

from backend import LocationResolver, RestaurantFinder, RestaurantQueryPipeline

from .core import MealDictatorAgent
from .intents import Intent, IntentName, SlotState, UnrecognizedIntent
from .responses import AskResponse, Card, TellResponse


def build_agent(logger: Optional[logging.Logger] = None) -> MealDictatorAgent:
    resolver = LocationResolver()
    finder = RestaurantFinder()
    log = logger or logging.getLogger("agent")
    log.info(
        "[Agent] lookups configured: geocode=%s places=%s", resolver.url, finder.url
    )
    pipeline = RestaurantQueryPipeline(resolver=resolver, finder=finder)
    return MealDictatorAgent(pipeline=pipeline, logger=log)


__all__ = [
    "AskResponse",
    "Card",
    "Intent",
    "IntentName",
    "MealDictatorAgent",
    "SlotState",
    "TellResponse",
    "UnrecognizedIntent",
    "build_agent",
]
