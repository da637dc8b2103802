"""Adapters - I/O implementations of ports."""

from .file_entries import FileEntryStore, VaultUnavailableError

__all__ = [
    "FileEntryStore",
    "VaultUnavailableError",
]
