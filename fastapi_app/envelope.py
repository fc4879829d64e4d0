from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from agent.intents import Intent

ENVELOPE_VERSION = "1.0"


class RequestType(str, Enum):
    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class SlotPayload(BaseModel):
    name: str = ""
    value: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class IntentPayload(BaseModel):
    name: str
    slots: Dict[str, SlotPayload] = Field(default_factory=dict)
    model_config = ConfigDict(extra="ignore")

    def to_domain(self) -> Intent:
        # Slots keep their own "name" when the platform sends one.
        return Intent(
            name=self.name,
            slots={(slot.name or key): slot.value for key, slot in self.slots.items()},
        )


class SessionPayload(BaseModel):
    sessionId: str = ""
    new: bool = False
    model_config = ConfigDict(extra="ignore")


class RequestPayload(BaseModel):
    type: str
    requestId: str = ""
    intent: Optional[IntentPayload] = None
    reason: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class SkillRequest(BaseModel):
    version: str = ENVELOPE_VERSION
    session: SessionPayload = Field(default_factory=SessionPayload)
    request: RequestPayload
    model_config = ConfigDict(extra="ignore")


def envelope(response: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"version": ENVELOPE_VERSION, "response": response or {}}


__all__ = [
    "ENVELOPE_VERSION",
    "IntentPayload",
    "RequestPayload",
    "RequestType",
    "SessionPayload",
    "SkillRequest",
    "SlotPayload",
    "envelope",
]
