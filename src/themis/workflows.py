"""Shared workflow layer between the CLI and the MCP server."""

import logging
from datetime import datetime

from .adapters.file_entries import FileEntryStore
from .config import Config
from .core.entries import Entry, EntryOrder, cutoff_date, order_entries
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileEntryStore:
    """Resolve the vault directory from config."""
    return FileEntryStore(config.vault_path)


def get_recent_entries(
    store: EntryStore,
    days: int,
    order: EntryOrder = EntryOrder.NEWEST,
    now: datetime | None = None,
) -> list[Entry]:
    """
    Fetch entries from the last ``days`` days.

    ``now`` is captured once, so every entry is judged against the same
    cutoff. An entry is kept when midnight of its date is on or after
    ``now - days``, so seven days covers today and the six days before it.
    Zero or negative counts put the cutoff past today's midnight and match
    nothing. Raises whatever the store raises when it can't be scanned.
    """
    now = now or datetime.now()
    cutoff = cutoff_date(days, now)
    logger.info(f"Fetching entries since {cutoff} ({days} days)")
    entries = store.entries_since(cutoff)
    return order_entries(entries, order)
