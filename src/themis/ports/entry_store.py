"""Diary entry storage interface."""

from datetime import date
from typing import Protocol

from themis.core.entries import Entry


class EntryStore(Protocol):
    """Interface for reading diary entries from any backend."""

    def entries_since(self, cutoff: date) -> list[Entry]:
        """Return every entry dated on or after cutoff, in storage order."""
        ...
