"""Tests for the append-only journal store.

**Feature: mood-journal**
"""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from momento.db.store import DataStore
from momento.journal.store import JournalStore


timestamps = st.datetimes(min_value=datetime(2020, 1, 1), max_value=datetime(2030, 12, 31))


class TestAppend:
    """
    **Feature: mood-journal, Property: Append-Only Entries**

    *For any* sequence of appends, every entry is returned in insertion
    order with a unique id.
    """

    @given(st.lists(timestamps, max_size=40))
    @settings(max_examples=50)
    def test_all_in_insertion_order(self, stamps: list[datetime]):
        journal = JournalStore()
        ids = [journal.append(ts, f"journalEntries/{i}.jpg") for i, ts in enumerate(stamps)]

        entries = journal.all()
        assert [e.id for e in entries] == ids
        assert [e.timestamp for e in entries] == stamps
        assert len(set(ids)) == len(ids)
        assert len(journal) == len(stamps)

    def test_get_by_id(self):
        journal = JournalStore()
        entry_id = journal.append(datetime(2025, 3, 1, 12, 0), "journalEntries/a.jpg")

        entry = journal.get(entry_id)
        assert entry.image_ref == "journalEntries/a.jpg"
        assert journal.get("missing") is None

    def test_empty_image_ref_rejected(self):
        journal = JournalStore()
        with pytest.raises(ValidationError):
            journal.append(datetime(2025, 3, 1), "")
        assert len(journal) == 0

    def test_entries_are_immutable(self):
        journal = JournalStore()
        entry_id = journal.append(datetime(2025, 3, 1), "journalEntries/a.jpg")
        with pytest.raises(ValidationError):
            journal.get(entry_id).image_ref = "other.jpg"


class TestSnapshot:

    def test_snapshot_not_affected_by_later_appends(self):
        journal = JournalStore()
        journal.append(datetime(2025, 3, 1), "journalEntries/a.jpg")

        snapshot = journal.all()
        journal.append(datetime(2025, 3, 2), "journalEntries/b.jpg")

        assert len(snapshot) == 1
        assert len(journal.all()) == 2

    def test_empty_store(self):
        assert JournalStore().all() == ()


class TestBackedStore:

    def test_entries_survive_reopen(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = DataStore(Path(tmpdir) / "test.db")
            journal = JournalStore(store)
            first = journal.append(datetime(2025, 3, 1, 9, 30), "journalEntries/a.jpg")
            second = journal.append(datetime(2025, 2, 1, 9, 30), "journalEntries/b.jpg")

            reopened = JournalStore(store)
            assert [e.id for e in reopened.all()] == [first, second]
            assert reopened.all() == journal.all()

    def test_new_ids_do_not_collide_with_loaded(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = DataStore(Path(tmpdir) / "test.db")
            JournalStore(store).append(datetime(2025, 3, 1), "journalEntries/a.jpg")

            reopened = JournalStore(store)
            new_id = reopened.append(datetime(2025, 3, 2), "journalEntries/b.jpg")
            assert len({e.id for e in reopened.all()}) == 2
            assert reopened.get(new_id) is not None
