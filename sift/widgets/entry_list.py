"""List widget rendering the store's visible entries with virtual scrolling."""
from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from ..selection import SelectionController


class EntryList(Widget):
    """
    Draws ``visible_entries()`` in rating order and marks the highlighted one.

    The widget holds no entry data of its own. It re-reads the controller on
    every render, and records which entry id each drawn row belongs to in
    ``row_ids``.
    """

    DEFAULT_CSS = """
    EntryList {
        height: 1fr;
        background: #0a1628;
        border: none;
        overflow: hidden;
    }
    """

    def __init__(self, controller: SelectionController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self.row_ids: list[int] = []

    @property
    def count(self) -> int:
        return len(self._controller.store.visible_entries())

    @property
    def total_count(self) -> int:
        return len(self._controller.store)

    def render(self) -> Text:
        height = max(1, self.size.height)
        entries = list(self._controller.store.visible_entries())
        selected_id = self._controller.selected_id

        if not entries:
            self.row_ids = []
            t = Text()
            t.append("  (no matches)\n", style="dim italic")
            return t

        cursor = next(
            (i for i, entry in enumerate(entries) if entry.id == selected_id), 0
        )

        # Virtual scroll: keep the highlighted row centred
        half = height // 2
        start = max(0, cursor - half)
        end = min(len(entries), start + height)
        if end - start < height:
            start = max(0, end - height)

        self.row_ids = [entry.id for entry in entries[start:end]]

        t = Text(no_wrap=True, overflow="ellipsis")
        for entry in entries[start:end]:
            if entry.id == selected_id:
                t.append(f" ▶ {entry.name}\n", style="bold #00d4ff on #1a3a5c")
            else:
                t.append(f"   {entry.name}\n", style="#c8d8e8")

        for _ in range(height - (end - start)):
            t.append("\n")

        return t
