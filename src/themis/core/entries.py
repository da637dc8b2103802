"""Pure diary entry logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

ENTRY_SUFFIX = ".md"

# Strict YYYY-MM-DD, ASCII digits only
_DATE_STEM = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class EntryOrder(Enum):
    """How a result set is ordered before it is returned."""

    NEWEST = "newest"  # Sorted by date, newest first
    WALK = "walk"  # Raw directory traversal order


@dataclass(frozen=True)
class Entry:
    """A single diary entry, keyed by the date in its filename."""

    date: str
    path: str
    content: str

    @property
    def entry_date(self) -> date:
        return date.fromisoformat(self.date)

    def to_dict(self) -> dict[str, str]:
        return {"date": self.date, "path": self.path, "content": self.content}


def parse_entry_date(filename: str) -> date | None:
    """
    Parse the date encoded in an entry filename.

    Returns None for anything that is not exactly ``YYYY-MM-DD.md`` with a
    valid calendar date. Such files are not entries, so this never raises.
    """
    if not filename.endswith(ENTRY_SUFFIX):
        return None

    match = _DATE_STEM.fullmatch(filename[: -len(ENTRY_SUFFIX)])
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def cutoff_instant(days: int, now: datetime) -> datetime:
    return now - timedelta(days=days)


def cutoff_date(days: int, now: datetime) -> date:
    """
    Earliest entry date included when looking back ``days`` days from ``now``.

    An entry counts from midnight of its date, so it is included only if that
    midnight is on or after ``now - days``. A cutoff instant past midnight
    pushes the first included date to the following day.
    """
    instant = cutoff_instant(days, now)
    first = instant.date()
    if datetime.combine(first, time()) < instant:
        first += timedelta(days=1)
    return first


def is_within(entry_date: date, cutoff: date) -> bool:
    """Inclusive lower-bound check."""
    return entry_date >= cutoff


def sort_newest_first(entries: list[Entry]) -> list[Entry]:
    """Sort entries by date descending. Entries sharing a date keep their order."""
    return sorted(entries, key=lambda e: e.date, reverse=True)


def order_entries(entries: list[Entry], order: EntryOrder) -> list[Entry]:
    if order == EntryOrder.NEWEST:
        return sort_newest_first(entries)
    return list(entries)
