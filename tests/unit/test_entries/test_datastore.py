#!/usr/bin/env python3
"""
Unit tests for the date-keyed EntryStore.
"""

import json
import logging

import pytest

from networth.core.errors import EntryNotFound, InvalidEntry, StorageOpenFailed, StorageUnavailable
from networth.core.money import Money
from networth.entries.datastore import EntryStore
from networth.entries.models import SortOrder
from networth.entries.validator import validate_entry


def _entry(day: str, assets: str = "100", debts: str = "0", notes: str = ""):
    return validate_entry(day, assets, debts, notes)


@pytest.mark.storage
class TestEntryStoreCrud:
    """Test put/get/delete/list/clear."""

    def test_put_then_get(self, store):
        entry = _entry("2024-05-01", "100", "20", "x")
        store.put(entry)
        assert store.get("2024-05-01") == entry

    def test_get_accepts_other_date_formats(self, store):
        store.put(_entry("2024-05-01"))
        assert store.get("05/01/2024").key == "2024-05-01"

    def test_get_missing_raises(self, store):
        with pytest.raises(EntryNotFound):
            store.get("2024-05-01")
        assert store.find("2024-05-01") is None

    def test_get_invalid_date_raises_invalid_entry(self, store):
        with pytest.raises(InvalidEntry):
            store.get("not-a-date")

    def test_put_upserts_by_date(self, store):
        """Repeated puts keep only the most recent values per date."""
        puts = [
            _entry("2024-01-01", "1"),
            _entry("2024-02-01", "2"),
            _entry("2024-01-01", "3"),
            _entry("2024-03-01", "4"),
            _entry("2024-02-01", "5"),
        ]
        for entry in puts:
            store.put(entry)

        listed = store.list_all(SortOrder.ASCENDING)
        assert [e.key for e in listed] == ["2024-01-01", "2024-02-01", "2024-03-01"]
        assert [e.assets.to_cents() for e in listed] == [300, 500, 400]

    def test_list_orders(self, store, sample_entries):
        for entry in reversed(sample_entries):
            store.put(entry)

        descending = [e.key for e in store.list_all()]
        ascending = [e.key for e in store.list_all(SortOrder.ASCENDING)]
        assert descending == ["2024-01-01", "2023-07-01", "2023-01-01"]
        assert ascending == list(reversed(descending))

    def test_delete_is_idempotent(self, store):
        store.put(_entry("2024-05-01"))
        store.put(_entry("2024-06-01"))

        assert store.delete("2024-05-01") is True
        state_after_first = store.list_all()
        assert store.delete("2024-05-01") is False
        assert store.list_all() == state_after_first

    def test_clear(self, store, sample_entries):
        for entry in sample_entries:
            store.put(entry)
        assert store.clear() == 3
        assert store.list_all() == []
        assert len(store) == 0


@pytest.mark.storage
class TestEntryStorePersistence:
    """Test durability of the JSON file."""

    def test_reopen_sees_committed_entries(self, temp_dir, sample_entries):
        path = temp_dir / "entries.json"
        first = EntryStore(path)
        for entry in sample_entries:
            first.put(entry)

        reopened = EntryStore(path)
        assert reopened.list_all() == first.list_all()

    def test_file_format(self, store):
        store.put(_entry("2024-05-01", "100.5", "20", "x"))
        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert data["entries"] == [
            {"date": "2024-05-01", "assets_cents": 10050, "debts_cents": 2000, "notes": "x"}
        ]

    def test_corrupt_file_fails_to_open(self, temp_dir):
        path = temp_dir / "entries.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageOpenFailed):
            EntryStore(path)

    def test_malformed_entries_fail_to_open(self, temp_dir):
        path = temp_dir / "entries.json"
        path.write_text(json.dumps({"entries": [{"date": "nope"}]}), encoding="utf-8")
        with pytest.raises(StorageOpenFailed):
            EntryStore(path)

    def test_unusable_directory_is_unavailable(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        with pytest.raises(StorageUnavailable):
            EntryStore(blocker / "entries.json")


@pytest.mark.storage
class TestEntryStoreTransactions:
    """Test all-or-nothing transactions."""

    def test_exception_rolls_back_everything(self, store):
        store.put(_entry("2024-05-01", "100"))

        with pytest.raises(RuntimeError):
            with store.transaction():
                store.delete("2024-05-01")
                store.put(_entry("2024-05-02", "200"))
                raise RuntimeError("boom")

        assert [e.key for e in store.list_all()] == ["2024-05-01"]
        assert [e.key for e in EntryStore(store.path).list_all()] == ["2024-05-01"]

    def test_reads_inside_transaction_see_pending_changes(self, store):
        with store.transaction():
            store.put(_entry("2024-05-01"))
            assert store.find("2024-05-01") is not None
            assert not store.path.exists()
        assert store.path.exists()

    def test_nested_transactions_commit_once(self, store):
        with store.transaction():
            with store.transaction():
                store.put(_entry("2024-05-01"))
            store.put(_entry("2024-05-02"))
        assert len(EntryStore(store.path)) == 2

    def test_rolled_back_changes_are_not_logged_as_saved(self, store, caplog):
        caplog.set_level(logging.INFO, logger="networth.entries.datastore")

        with pytest.raises(RuntimeError):
            with store.transaction():
                store.put(_entry("2024-05-01"))
                raise RuntimeError("boom")
        assert [r for r in caplog.records if r.levelno >= logging.INFO] == []

        store.put(_entry("2024-05-01"))
        assert [r.getMessage() for r in caplog.records] == [f"Committed 1 entries to {store.path}"]

    def test_failed_write_makes_store_unavailable(self, store, monkeypatch):
        import networth.entries.datastore as datastore_module

        def failing_write(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(datastore_module, "write_json", failing_write)
        with pytest.raises(StorageUnavailable):
            store.put(_entry("2024-05-01"))
        with pytest.raises(StorageUnavailable):
            store.list_all()


@pytest.mark.storage
class TestEntryStoreQueries:
    """Test secondary lookups and metadata."""

    def test_range_by_assets(self, store, sample_entries):
        for entry in sample_entries:
            store.put(entry)
        matches = store.range_by("assets", Money.from_dollars("1000"), Money.from_dollars("1600"))
        assert [e.key for e in matches] == ["2023-01-01", "2023-07-01"]

    def test_range_by_debts(self, store, sample_entries):
        for entry in sample_entries:
            store.put(entry)
        matches = store.range_by("debts", Money.zero(), Money.from_dollars("200"))
        assert [e.key for e in matches] == ["2023-07-01"]

    def test_range_by_rejects_unknown_field(self, store):
        with pytest.raises(ValueError):
            store.range_by("notes", Money.zero(), Money.zero())

    def test_metadata(self, store, sample_entries):
        assert store.exists() is False
        assert store.size_bytes() is None
        assert store.summary_text() == "No entries recorded"

        for entry in sample_entries:
            store.put(entry)

        assert store.exists() is True
        assert store.item_count() == 3
        assert store.size_bytes() > 0
        assert store.age_days() == 0
        assert store.summary_text() == "3 entries (2023-01-01 to 2024-01-01)"
