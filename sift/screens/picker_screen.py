"""The picker screen: query bar, entry list and match counter."""
from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static
from rich.markup import escape

from ..events import Event, QueryChanged, event_for_key
from ..widgets.entry_list import EntryList


class PickerScreen(Screen):
    """Forwards key presses to the app's controller and redraws after each one."""

    BINDINGS = [
        Binding("down", "key_event('down')", "Down", show=False, priority=True),
        Binding("enter", "key_event('enter')", "Select", show=False, priority=True),
        Binding("escape", "key_event('escape')", "Cancel", show=False, priority=True),
        Binding("ctrl+c", "key_event('escape')", "Cancel", show=False, priority=True),
        Binding("ctrl+u", "clear_query", "Clear", show=False, priority=True),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="main-box"):
            yield Static("", id="input-box")
            yield EntryList(self.app.controller, id="list-box")
            yield Static("", id="counter")

    def on_mount(self) -> None:
        self._rebuild()

    # --------------------------------------------------------------- drawing

    def _rebuild(self) -> None:
        self._refresh_input()
        self._refresh_counter()
        self.query_one(EntryList).refresh()

    def _refresh_input(self) -> None:
        query = self.app.controller.query
        self.query_one("#input-box", Static).update(
            f"[bold white]{escape(self.app.prompt)}[/bold white] {escape(query)}[blink]█[/blink]"
        )

    def _refresh_counter(self) -> None:
        fl = self.query_one(EntryList)
        self.query_one("#counter", Static).update(
            f"[bold white]{fl.count}[/bold white][dim]/{fl.total_count}[/dim]"
        )

    # ---------------------------------------------------------------- events

    def _dispatch(self, event: Event) -> None:
        outcome = self.app.controller.handle(event)
        if outcome is not None:
            self.app.exit(outcome)
            return
        self._rebuild()

    def _set_query(self, query: str) -> None:
        if query != self.app.controller.query:
            self._dispatch(QueryChanged(query))

    def on_key(self, event: events.Key) -> None:
        query = self.app.controller.query
        if event.key == "backspace":
            self._set_query(query[:-1])
            event.stop()
        elif event.character and event.character.isprintable():
            self._set_query(query + event.character)
            event.stop()

    def action_key_event(self, key: str) -> None:
        event = event_for_key(key)
        if event is not None:
            self._dispatch(event)

    def action_clear_query(self) -> None:
        self._set_query("")
