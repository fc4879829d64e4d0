from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from backend.models import Restaurant

CARD_TITLE = "Meal Dictator"


@dataclass(frozen=True)
class Card:
    title: str
    content: str

    def to_api(self) -> Dict[str, str]:
        return {"type": "Simple", "title": self.title, "content": self.content}


@dataclass(frozen=True)
class TellResponse:
    """Terminal turn: speak and end the session."""

    speech: str
    card: Optional[Card] = None

    @property
    def reprompt(self) -> None:
        return None

    @property
    def should_end_session(self) -> bool:
        return True

    def to_api(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "outputSpeech": _plain_text(self.speech),
            "shouldEndSession": True,
        }
        if self.card is not None:
            data["card"] = self.card.to_api()
        return data


@dataclass(frozen=True)
class AskResponse:
    """Turn that waits for the user; ``reprompt`` is spoken if they say nothing."""

    speech: str
    reprompt: str

    @property
    def card(self) -> None:
        return None

    @property
    def should_end_session(self) -> bool:
        return False

    def to_api(self) -> Dict[str, Any]:
        return {
            "outputSpeech": _plain_text(self.speech),
            "reprompt": {"outputSpeech": _plain_text(self.reprompt)},
            "shouldEndSession": False,
        }


Response = Union[TellResponse, AskResponse]


def tell(speech: str, card: Optional[Card] = None) -> TellResponse:
    return TellResponse(speech=speech, card=card)


def ask(speech: str, reprompt: str) -> AskResponse:
    if not (reprompt or "").strip():
        raise ValueError("ask response needs a non-empty reprompt")
    return AskResponse(speech=speech, reprompt=reprompt)


def restaurant_card(restaurant: Restaurant) -> Card:
    # Name/address go in verbatim; no truncation or escaping.
    return Card(
        title=CARD_TITLE,
        content=f"Eat at: {restaurant.name}. Address: {restaurant.address}",
    )


def _plain_text(text: str) -> Dict[str, str]:
    return {"type": "PlainText", "text": text}


__all__ = [
    "AskResponse",
    "CARD_TITLE",
    "Card",
    "Response",
    "TellResponse",
    "ask",
    "restaurant_card",
    "tell",
]
