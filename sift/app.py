"""Textual App — owns the entry store and selection controller for one session."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from textual.app import App

from .events import Outcome
from .screens.picker_screen import PickerScreen
from .selection import SelectionController
from .store import EntryStore


class SiftApp(App[Outcome]):
    """Single-selection fuzzy picker. ``run()`` returns the session Outcome."""

    CSS = """
Screen {
    background: #0a1628;
    color: #c8d8e8;
}

#main-box {
    height: 1fr;
}

#input-box {
    height: 1;
    background: #0f2035;
    color: white;
    padding: 0 2;
    margin: 0 1;
}

#list-box {
    height: 1fr;
}

#counter {
    height: 1;
    background: #0d1f3c;
    color: #7b9abf;
    padding: 0 2;
    dock: bottom;
}
"""

    def __init__(
        self,
        store: EntryStore,
        prompt: str = ">",
        css_path: Optional[Path] = None,
    ) -> None:
        super().__init__(css_path=[css_path] if css_path else None)
        self.controller = SelectionController(store)
        self.prompt = prompt
        # Auto-highlight the first entry before anything is drawn
        self.controller.start()

    def on_mount(self) -> None:
        self.push_screen(PickerScreen())
