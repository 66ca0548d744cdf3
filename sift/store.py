"""Candidate table — owns every Entry and re-rates them against a query."""
from __future__ import annotations

import itertools
import logging
from typing import Callable, Iterable, Iterator, Optional

from .matcher import score

logger = logging.getLogger(__name__)

HIDE_BELOW = 0.1

# Shared by every store so an id is never handed out twice.
_ids = itertools.count(1)


class Entry:
    """One input line plus its current rating and visibility.

    ``id`` and ``name`` are fixed at load time; only the store rewrites
    ``rating`` and ``hidden``.
    """

    __slots__ = ("_id", "_name", "rating", "hidden")

    def __init__(self, entry_id: int, name: str) -> None:
        self._id = entry_id
        self._name = name
        self.rating = 1.0
        self.hidden = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return (
            f"Entry(id={self._id!r}, name={self._name!r}, "
            f"rating={self.rating!r}, hidden={self.hidden!r})"
        )


class VisibleEntries:
    """Lazy view over the visible entries; every iteration starts fresh."""

    def __init__(self, store: "EntryStore") -> None:
        self._store = store

    def __iter__(self) -> Iterator[Entry]:
        return (entry for entry in self._store.ordering() if not entry.hidden)

    def __len__(self) -> int:
        return sum(1 for entry in self._store if not entry.hidden)


class EntryStore:
    """
    Ordered collection of Entries, insertion order = input line order.

    The store is the only owner of Entry values; everything else refers to
    entries by id.
    """

    def __init__(self, scorer: Callable[[str, str], float] = score) -> None:
        self._scorer = scorer
        self._entries: list[Entry] = []
        self._by_id: dict[int, Entry] = {}

    @classmethod
    def load(
        cls,
        lines: Iterable[str],
        scorer: Callable[[str, str], float] = score,
    ) -> "EntryStore":
        """Build one Entry per line, in order, all neutral (rating 1.0, shown)."""
        store = cls(scorer)
        for line in lines:
            entry = Entry(next(_ids), line)
            store._entries.append(entry)
            store._by_id[entry.id] = entry
        logger.debug("loaded %d entries", len(store._entries))
        return store

    # ----------------------------------------------------------------- access

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, entry_id: int) -> Entry:
        return self._by_id[entry_id]

    def get(self, entry_id: Optional[int]) -> Optional[Entry]:
        if entry_id is None:
            return None
        return self._by_id.get(entry_id)

    def is_visible(self, entry_id: int) -> bool:
        entry = self._by_id.get(entry_id)
        return entry is not None and not entry.hidden

    # ---------------------------------------------------------------- scoring

    def update_scores(self, query: str) -> Optional[Entry]:
        """
        Re-rate every entry against ``query`` and return the best match.

        An empty query resets all entries to rating 1.0 / shown. The best match
        is the first entry (insertion order) holding the maximum rating, so an
        empty query always yields the first entry. Returns None for an empty
        store.
        """
        best: Optional[Entry] = None
        for entry in self._entries:
            if not query:
                entry.rating = 1.0
                entry.hidden = False
            else:
                entry.rating = self._scorer(query, entry.name)
                entry.hidden = entry.rating < HIDE_BELOW
            if best is None or entry.rating > best.rating:
                best = entry
        logger.debug(
            "rescored %d entries for %r, best=%r",
            len(self._entries), query, best.name if best else None,
        )
        return best

    # --------------------------------------------------------------- ordering

    def ordering(self) -> list[Entry]:
        """All entries by descending rating; ties keep insertion order."""
        # sorted() is stable, so equal ratings stay in insertion order.
        return sorted(self._entries, key=lambda entry: -entry.rating)

    def visible_entries(self) -> VisibleEntries:
        return VisibleEntries(self)
