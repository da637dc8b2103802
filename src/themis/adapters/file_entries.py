"""File-based diary entry adapter - scans a vault directory tree."""

import logging
import os
from datetime import date
from pathlib import Path

from themis.core.entries import ENTRY_SUFFIX, Entry, is_within, parse_entry_date

logger = logging.getLogger(__name__)


class VaultUnavailableError(Exception):
    """Raised when the vault root cannot be scanned at all."""

    pass


class FileEntryStore:
    """
    File-based diary entry storage.

    Implements EntryStore protocol. Every ``YYYY-MM-DD.md`` file anywhere
    under the vault directory is an entry. Read-only.
    """

    def __init__(self, vault_dir: Path | str):
        self.vault_dir = Path(vault_dir).expanduser()

    def _list_dir(self, path: Path | str) -> list[os.DirEntry]:
        """List a directory in lexical name order."""
        with os.scandir(path) as it:
            return sorted(it, key=lambda d: d.name)

    def entries_since(self, cutoff: date) -> list[Entry]:
        """Return every entry dated on or after cutoff, in traversal order."""
        try:
            children = self._list_dir(self.vault_dir)
        except OSError as e:
            raise VaultUnavailableError(f"cannot open vault {self.vault_dir}: {e}") from e

        entries: list[Entry] = []
        self._walk(children, cutoff, entries)
        logger.debug(f"Found {len(entries)} entries since {cutoff} in {self.vault_dir}")
        return entries

    def _walk(self, children: list[os.DirEntry], cutoff: date, entries: list[Entry]) -> None:
        """Depth-first walk. Problems below the root only skip the affected path."""
        for child in children:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.warning(f"Error accessing {child.path}: {e}")
                continue

            if is_dir:
                try:
                    grandchildren = self._list_dir(child.path)
                except OSError as e:
                    logger.warning(f"Error accessing {child.path}: {e}")
                    continue
                self._walk(grandchildren, cutoff, entries)
                continue

            entry_date = parse_entry_date(child.name)
            if entry_date is None or not is_within(entry_date, cutoff):
                continue

            try:
                content = Path(child.path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Error reading {child.path}: {e}")
                continue

            entries.append(
                Entry(
                    date=child.name[: -len(ENTRY_SUFFIX)],
                    path=os.path.abspath(child.path),
                    content=content,
                )
            )
