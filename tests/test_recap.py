"""Property-based tests for the monthly recap engine.

**Feature: mood-journal**
"""

from datetime import date, datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from momento.journal.store import JournalStore
from momento.models import JournalEntry
from momento.recap.grouping import (
    RecapGrouper,
    current_month,
    month_label,
    parse_month_label,
    sort_labels,
)


def make_entry(timestamp: datetime, suffix: str = "") -> JournalEntry:
    """Build a journal entry with a deterministic id."""
    return JournalEntry(
        id=f"{timestamp.isoformat()}{suffix}",
        timestamp=timestamp,
        image_ref=f"journalEntries/{timestamp:%Y%m%d%H%M%S}{suffix}.jpg",
    )


def entry_strategy():
    """Generate journal entries with unique-ish ids."""
    return st.builds(
        JournalEntry,
        id=st.uuids().map(lambda u: u.hex),
        timestamp=st.datetimes(
            min_value=datetime(2020, 1, 1),
            max_value=datetime(2026, 12, 31),
        ),
        image_ref=st.just("journalEntries/x.jpg"),
    )


class TestMonthFilter:
    """
    **Feature: mood-journal, Property: Month-Filter Correctness**

    *For any* entries, current_month keeps exactly those in the reference
    (year, month), in input order.
    """

    def test_example(self):
        first = make_entry(datetime(2025, 3, 15, 9, 0))
        second = make_entry(datetime(2025, 3, 31, 23, 59))
        third = make_entry(datetime(2025, 4, 1, 0, 0))

        result = current_month([first, second, third], date(2025, 3, 20))
        assert result == [first, second]

    def test_same_month_other_year_excluded(self):
        entry = make_entry(datetime(2024, 3, 15))
        assert current_month([entry], date(2025, 3, 20)) == []

    def test_empty_input(self):
        assert current_month([], date(2025, 3, 20)) == []

    def test_empty_store(self):
        assert current_month(JournalStore().all(), datetime(2025, 3, 20, 12, 0)) == []

    @given(
        entries=st.lists(entry_strategy(), max_size=40),
        reference=st.dates(min_value=date(2020, 1, 1), max_value=date(2026, 12, 31)),
    )
    @settings(max_examples=100)
    def test_filter_is_ordered_subset(self, entries, reference):
        result = current_month(entries, reference)

        expected = [
            e for e in entries
            if (e.timestamp.year, e.timestamp.month) == (reference.year, reference.month)
        ]
        assert result == expected


class TestMonthLabels:

    def test_format(self):
        assert month_label(date(2025, 1, 5)) == "January 2025"
        assert month_label(datetime(2024, 12, 31, 23, 59)) == "December 2024"

    @given(st.dates(min_value=date(1, 1, 1), max_value=date(9999, 12, 31)))
    @settings(max_examples=100)
    def test_label_parses_back(self, value: date):
        assert parse_month_label(month_label(value)) == (value.year, value.month)

    @pytest.mark.parametrize(
        "label",
        ["", "January", "2025", "Smarch 2025", "January twenty", "January 2025 extra", "January -1", None],
    )
    def test_malformed_labels(self, label):
        assert parse_month_label(label) is None

    def test_case_insensitive_month(self):
        assert parse_month_label("march 2025") == (2025, 3)


class TestLabelSorting:
    """
    **Feature: mood-journal, Property: Stable Label Ordering**

    Labels sort newest first; malformed labels never raise and keep their
    relative order after the valid ones.
    """

    def test_descending(self):
        labels = ["March 2024", "January 2025", "December 2024", "February 2023"]
        assert sort_labels(labels) == [
            "January 2025",
            "December 2024",
            "March 2024",
            "February 2023",
        ]

    def test_malformed_labels_stable(self):
        labels = ["bogus", "March 2024", "???", "April 2024"]
        assert sort_labels(labels) == ["April 2024", "March 2024", "bogus", "???"]

    def test_only_malformed_keeps_order(self):
        labels = ["zzz", "aaa", "mmm"]
        assert sort_labels(labels) == labels

    @given(st.lists(st.text(max_size=20), max_size=20))
    @settings(max_examples=100)
    def test_never_raises(self, labels):
        result = sort_labels(labels)
        assert sorted(result) == sorted(labels)


class TestRecapGrouper:
    """
    **Feature: mood-journal, Property: Grouping and Sort**

    *For any* entries, every entry lands in the group for its month, groups
    keep input order, and labels run newest first.
    """

    def test_example(self):
        dec_a = make_entry(datetime(2024, 12, 3, 10, 0), "a")
        jan = make_entry(datetime(2025, 1, 15, 10, 0))
        dec_b = make_entry(datetime(2024, 12, 1, 10, 0), "b")

        grouper = RecapGrouper([dec_a, jan, dec_b])

        assert len(grouper) == 2
        assert grouper.sorted_labels() == ["January 2025", "December 2024"]
        assert grouper.grouped_entries("December 2024") == [dec_a, dec_b]
        assert grouper.grouped_entries("January 2025") == [jan]

    def test_empty(self):
        grouper = RecapGrouper(JournalStore().all())

        assert grouper.is_empty
        assert grouper.sorted_labels() == []
        assert grouper.buckets() == []
        assert grouper.grouped_entries("January 2025") == []

    def test_unknown_label(self):
        grouper = RecapGrouper([make_entry(datetime(2025, 1, 1))])
        assert not grouper.is_empty
        assert grouper.grouped_entries("February 2025") == []
        assert grouper.grouped_entries("not a label") == []

    def test_buckets(self):
        entries = [
            make_entry(datetime(2025, 2, 1), "a"),
            make_entry(datetime(2025, 1, 1), "b"),
            make_entry(datetime(2025, 2, 20), "c"),
        ]
        buckets = RecapGrouper(entries).buckets()

        assert [(b.label, b.year, b.month) for b in buckets] == [
            ("February 2025", 2025, 2),
            ("January 2025", 2025, 1),
        ]
        assert buckets[0].entries == (entries[0], entries[2])

    def test_returned_lists_are_copies(self):
        entry = make_entry(datetime(2025, 1, 1))
        grouper = RecapGrouper([entry])
        grouper.sorted_labels().clear()
        grouper.grouped_entries("January 2025").clear()

        assert grouper.sorted_labels() == ["January 2025"]
        assert grouper.grouped_entries("January 2025") == [entry]

    @given(st.lists(entry_strategy(), max_size=50))
    @settings(max_examples=100)
    def test_partition_properties(self, entries):
        grouper = RecapGrouper(entries)
        labels = grouper.sorted_labels()

        # every entry lands in exactly one group, in input order
        assert sum(len(grouper.grouped_entries(label)) for label in labels) == len(entries)
        for label in labels:
            group = grouper.grouped_entries(label)
            assert group == [e for e in entries if month_label(e.timestamp) == label]

        # newest month first
        keys = [parse_month_label(label) for label in labels]
        assert keys == sorted(keys, reverse=True)
        assert len(labels) == len(set(labels))
        assert grouper.is_empty == (not entries)
