# core.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from backend.models import QueryResult
from backend.pipeline import RestaurantQueryPipeline

from .intents import SLOT_CITY, Intent, IntentName, UnrecognizedIntent
from .responses import Response, ask, restaurant_card, tell

WHICH_CITY_PROMPT = "Which city would you like to eat in?"

WELCOME_SPEECH = (
    "Welcome to Meal Dictator. "
    "I can find you a place to eat. "
    "you can say something like, "
    "Find me a place to eat in Cincinnati. ... Now, " + WHICH_CITY_PROMPT
)
WELCOME_REPROMPT = "For instructions on what you can say, please say help me."

HELP_SPEECH = (
    "I can find you a place to eat. "
    "You can simply open Meal Dictator and say something like, "
    "feed me in Cincinnati, or, "
    "find me a restaurant in Chicago, or, "
    "find me a place to eat in Seattle. "
    "Or you can say exit... "
    "Now, " + WHICH_CITY_PROMPT
)

RETRY_CITY_SPEECH = "Please try saying the city again. For example, Cincinnati"
DIALOG_RETRY_CITY_SPEECH = "Please try saying the city again , for example, Cincinnati"
GOODBYE_SPEECH = "Goodbye"

MissingSlotFallback = Callable[[], Response]


def retry_city() -> Response:
    return ask(RETRY_CITY_SPEECH, RETRY_CITY_SPEECH)


def dialog_retry_city() -> Response:
    return ask(DIALOG_RETRY_CITY_SPEECH, DIALOG_RETRY_CITY_SPEECH)


class MealDictatorAgent:
    """
    Maps one turn's intent to a tell/ask response.

    Holds no per-session state; the pipeline and logger are injected so the
    same instance can serve every request.
    """

    def __init__(
        self,
        pipeline: Optional[RestaurantQueryPipeline] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.pipeline = pipeline or RestaurantQueryPipeline()
        self.log = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    def on_session_started(self, request_id: str = "", session_id: str = "") -> None:
        self.log.info("onSessionStarted requestId=%s, sessionId=%s", request_id, session_id)

    def on_session_ended(self, request_id: str = "", session_id: str = "") -> None:
        self.log.info("onSessionEnded requestId=%s, sessionId=%s", request_id, session_id)

    def launch(self, request_id: str = "", session_id: str = "") -> Response:
        self.log.info("onLaunch requestId=%s, sessionId=%s", request_id, session_id)
        return ask(WELCOME_SPEECH, WELCOME_REPROMPT)

    # ------------------------------------------------------------------
    def handle(self, intent: Intent, *, request_id: str = "", session_id: str = "") -> Response:
        self.log.info(
            "onIntent requestId=%s, sessionId=%s, intent=%s", request_id, session_id, intent.name
        )

        if intent.name == IntentName.ONESHOT_MEAL.value:
            # A failed one-shot drops the user into the dialog re-prompt.
            return self._handle_meal_request(intent, on_missing=retry_city)
        if intent.name == IntentName.DIALOG_MEAL.value:
            return self._handle_meal_request(intent, on_missing=dialog_retry_city)
        if intent.name == IntentName.HELP.value:
            return ask(HELP_SPEECH, WHICH_CITY_PROMPT)
        if intent.name in (IntentName.STOP.value, IntentName.CANCEL.value):
            return tell(GOODBYE_SPEECH)

        self.log.error("unrecognized intent %r requestId=%s", intent.name, request_id)
        raise UnrecognizedIntent(intent.name)

    # ------------------------------------------------------------------
    def _handle_meal_request(self, intent: Intent, *, on_missing: MissingSlotFallback) -> Response:
        city = intent.slot_value(SLOT_CITY)
        if city is None:
            return on_missing()

        result: QueryResult = self.pipeline.query(city)
        if not result.is_ok or result.restaurant is None:
            self.log.info("no restaurant for city=%r status=%s", city, result.status.value)
            return retry_city()

        restaurant = result.restaurant
        speech = f"OK, eat at, {restaurant.name}. The address is, {restaurant.address}"
        return tell(speech, card=restaurant_card(restaurant))


__all__ = ["MealDictatorAgent", "dialog_retry_city", "retry_city"]
