"""Highlight/commit/cancel state machine on top of an EntryStore."""
from __future__ import annotations

import enum
import logging
from typing import Optional

from .events import Cancel, Commit, Event, NavigateDown, Outcome, QueryChanged
from .store import Entry, EntryStore

logger = logging.getLogger(__name__)


class State(enum.Enum):
    NO_SELECTION = "no-selection"
    SELECTED = "selected"
    CLOSED = "closed"


class SelectionController:
    """
    Tracks which entry is highlighted and reacts to picker events.

    Only the id of the highlighted entry is held here; the store owns the data.
    Events are handled synchronously and one at a time. Once the session is
    closed, further events are ignored.
    """

    def __init__(self, store: EntryStore) -> None:
        self._store = store
        self._selected_id: Optional[int] = None
        self._outcome: Optional[Outcome] = None
        self._query = ""

    # ----------------------------------------------------------------- state

    @property
    def state(self) -> State:
        if self._outcome is not None:
            return State.CLOSED
        if self._selected_id is None:
            return State.NO_SELECTION
        return State.SELECTED

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Entry]:
        return self._store.get(self._selected_id)

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def query(self) -> str:
        return self._query

    @property
    def store(self) -> EntryStore:
        return self._store

    # ---------------------------------------------------------------- events

    def start(self) -> None:
        """Initial scoring pass; highlights the first entry if there is one."""
        self.handle(QueryChanged(""))

    def handle(self, event: Event) -> Optional[Outcome]:
        """Apply one event. Returns the Outcome when it closes the session."""
        if self._outcome is not None:
            logger.debug("session closed, ignoring %r", event)
            return None

        if isinstance(event, QueryChanged):
            self._query = event.text
            best = self._store.update_scores(event.text)
            self._highlight(best)
        elif isinstance(event, NavigateDown):
            self._navigate_down()
        elif isinstance(event, Commit):
            entry = self.selected
            if entry is not None:
                self._close(Outcome(committed=True, text=entry.name))
        elif isinstance(event, Cancel):
            self._close(Outcome(committed=False))
        return self._outcome

    # --------------------------------------------------------------- helpers

    def _highlight(self, best: Optional[Entry]) -> None:
        """Select the best match, or nothing when the store is empty or all hidden."""
        if best is None or best.hidden:
            self._selected_id = None
        else:
            self._selected_id = best.id
        logger.debug("state=%s selected=%r", self.state.value, self._selected_id)

    def _navigate_down(self) -> None:
        # Positional rule: only moves from visible row 0 to visible row 1.
        top = []
        for entry in self._store.visible_entries():
            top.append(entry)
            if len(top) == 2:
                break
        if len(top) == 2 and top[0].id == self._selected_id:
            self._selected_id = top[1].id
            logger.debug("moved selection to %r", top[1].name)

    def _close(self, outcome: Outcome) -> None:
        self._outcome = outcome
        logger.debug("closed committed=%s", outcome.committed)
