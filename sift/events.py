"""Events the picker core reacts to, and how key presses map onto them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class QueryChanged:
    text: str


@dataclass(frozen=True)
class NavigateDown:
    pass


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


Event = Union[QueryChanged, NavigateDown, Commit, Cancel]

_KEY_EVENTS: dict[str, Event] = {
    "escape": Cancel(),
    "enter": Commit(),
    "down": NavigateDown(),
}


def event_for_key(key: str) -> Optional[Event]:
    """Escape/Return/Down become Cancel/Commit/NavigateDown; other keys are ignored."""
    return _KEY_EVENTS.get(key)


@dataclass(frozen=True)
class Outcome:
    """How a session ended: committed with ``text``, or cancelled."""

    committed: bool
    text: Optional[str] = None
