"""Functional core - pure business logic with no I/O."""

from .entries import (
    Entry,
    EntryOrder,
    cutoff_date,
    cutoff_instant,
    is_within,
    order_entries,
    parse_entry_date,
    sort_newest_first,
)

__all__ = [
    "Entry",
    "EntryOrder",
    "cutoff_date",
    "cutoff_instant",
    "is_within",
    "order_entries",
    "parse_entry_date",
    "sort_newest_first",
]
