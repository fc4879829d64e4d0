from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

SLOT_CITY = "City"


class UnrecognizedIntent(Exception):
    """Intent name outside the set this skill handles."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid Intent: {name!r}")
        self.name = name


class IntentName(str, Enum):
    ONESHOT_MEAL = "OneshotMealIntent"
    DIALOG_MEAL = "DialogMealIntent"
    HELP = "AMAZON.HelpIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"


class SlotState(str, Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    FILLED = "filled"


@dataclass(frozen=True)
class Intent:
    """One turn's intent: a name plus slot name → optional value."""

    name: str
    slots: Mapping[str, Optional[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", MappingProxyType(dict(self.slots)))

    def slot_state(self, slot: str) -> SlotState:
        if slot not in self.slots:
            return SlotState.ABSENT
        value = self.slots[slot]
        if value is None or not str(value).strip():
            return SlotState.EMPTY
        return SlotState.FILLED

    def slot_value(self, slot: str) -> Optional[str]:
        if self.slot_state(slot) is not SlotState.FILLED:
            return None
        return str(self.slots[slot]).strip()


__all__ = ["Intent", "IntentName", "SLOT_CITY", "SlotState", "UnrecognizedIntent"]
