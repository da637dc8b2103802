"""Tests for the shared workflow layer."""

from datetime import date, datetime, time, timedelta
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from themis.adapters.file_entries import FileEntryStore, VaultUnavailableError
from themis.config import Config
from themis.core.entries import Entry, EntryOrder
from themis.workflows import get_recent_entries, get_store


@pytest.fixture
def now():
    return datetime(2024, 6, 20, 9, 0)


@pytest.fixture
def vault(tmp_path):
    (tmp_path / "2024-01-01.md").write_text("A")
    (tmp_path / "2024-06-15.md").write_text("B")
    (tmp_path / "notes.txt").write_text("ignored")
    (tmp_path / "archive").mkdir()
    (tmp_path / "archive" / "2023-12-31.md").write_text("C")
    return tmp_path


class TestGetStore:
    def test_uses_configured_dir(self, tmp_path):
        store = get_store(Config(vault_dir=str(tmp_path)))
        assert isinstance(store, FileEntryStore)
        assert store.vault_dir == tmp_path

    def test_expands_user_path(self):
        store = get_store(Config(vault_dir="~/some/vault"))
        assert "~" not in str(store.vault_dir)
        assert store.vault_dir == Path.home() / "some" / "vault"


class TestGetRecentEntries:
    def test_scenario(self, vault, now):
        days = (now.date() - date(2023, 12, 31)).days + 1
        entries = get_recent_entries(FileEntryStore(vault), days, now=now)

        assert len(entries) == 3
        assert [e.content for e in entries] == ["B", "A", "C"]
        assert entries[2].path == str(vault / "archive" / "2023-12-31.md")

    def test_every_entry_on_or_after_cutoff_instant(self, vault, now):
        for days in (0, 1, 5, 6, 7, 30, 172, 173, 400):
            instant = now - timedelta(days=days)
            for entry in get_recent_entries(FileEntryStore(vault), days, now=now):
                assert datetime.combine(entry.entry_date, time()) >= instant

    def test_boundary_day_excluded_past_midnight(self, tmp_path):
        (tmp_path / "2024-06-13.md").write_text("a week ago")
        (tmp_path / "2024-06-14.md").write_text("six days ago")
        (tmp_path / "2024-06-20.md").write_text("today")

        entries = get_recent_entries(FileEntryStore(tmp_path), 7, now=datetime(2024, 6, 20, 15, 30))
        assert [e.date for e in entries] == ["2024-06-20", "2024-06-14"]

    def test_boundary_day_included_at_midnight(self, tmp_path):
        (tmp_path / "2024-06-13.md").write_text("a week ago")

        entries = get_recent_entries(FileEntryStore(tmp_path), 7, now=datetime(2024, 6, 20))
        assert [e.date for e in entries] == ["2024-06-13"]

    def test_window_excludes_older(self, vault, now):
        assert [e.date for e in get_recent_entries(FileEntryStore(vault), 6, now=now)] == ["2024-06-15"]
        assert get_recent_entries(FileEntryStore(vault), 5, now=now) == []

    def test_zero_days_is_empty(self, vault, now):
        (vault / "2024-06-20.md").write_text("today")
        (vault / "2024-06-19.md").write_text("yesterday")

        assert get_recent_entries(FileEntryStore(vault), 0, now=now) == []

    def test_negative_days_is_empty(self, vault, now):
        (vault / "2024-06-20.md").write_text("today")
        assert get_recent_entries(FileEntryStore(vault), -1, now=now) == []

    def test_newest_first_by_default(self, vault, now):
        entries = get_recent_entries(FileEntryStore(vault), 365, now=now)
        assert [e.date for e in entries] == ["2024-06-15", "2024-01-01", "2023-12-31"]

    def test_walk_order(self, vault, now):
        entries = get_recent_entries(FileEntryStore(vault), 365, order=EntryOrder.WALK, now=now)
        assert [e.date for e in entries] == ["2024-01-01", "2024-06-15", "2023-12-31"]

    def test_passes_cutoff_to_store(self, now):
        store = MagicMock()
        store.entries_since.return_value = [Entry("2024-06-19", "/v/2024-06-19.md", "x")]

        entries = get_recent_entries(store, 7, now=now)

        # 2024-06-13 09:00 is the cutoff instant, so the 13th itself is out
        store.entries_since.assert_called_once_with(date(2024, 6, 14))
        assert len(entries) == 1

    def test_store_errors_propagate(self, tmp_path, now):
        with pytest.raises(VaultUnavailableError):
            get_recent_entries(FileEntryStore(tmp_path / "missing"), 7, now=now)

    def test_defaults_to_current_time(self, tmp_path):
        today = date.today()
        (tmp_path / f"{today.isoformat()}.md").write_text("today")

        entries = get_recent_entries(FileEntryStore(tmp_path), 1)
        assert [e.content for e in entries] == ["today"]
