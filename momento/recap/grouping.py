"""Monthly recap calculations for journal entries.

Entries are labeled by calendar month ("January 2025"). Labels parse back
to (year, month) so they can be sorted newest first.
"""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from momento.models import JournalEntry, MonthBucket

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_NUMBERS = {name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)}


def month_label(value: Union[date, datetime]) -> str:
    """Format the month of a date as a display label.

    Args:
        value: Any date or datetime.

    Returns:
        Label such as "March 2025".
    """
    return f"{MONTH_NAMES[value.month - 1]} {value.year}"


def parse_month_label(label: str) -> Optional[tuple[int, int]]:
    """Parse a month label back into (year, month).

    Args:
        label: Label produced by month_label.

    Returns:
        (year, month) tuple, or None if the label is malformed.
    """
    if not isinstance(label, str):
        return None
    parts = label.split()
    if len(parts) != 2:
        return None
    month = _MONTH_NUMBERS.get(parts[0].lower())
    if month is None or not parts[1].isdecimal():
        return None
    year = int(parts[1])
    if year < 1:
        return None
    return year, month


def _label_sort_key(label: str) -> tuple[int, int]:
    parsed = parse_month_label(label)
    if parsed is None:
        # malformed labels tie with each other after all valid labels
        return (1, 0)
    year, month = parsed
    return (0, -(year * 12 + month))


def sort_labels(labels: Iterable[str]) -> list[str]:
    """Sort month labels newest first.

    Malformed labels compare equal to each other and are placed after
    every valid label, keeping their relative order.

    Args:
        labels: Month labels.

    Returns:
        Sorted list of labels.
    """
    return sorted(labels, key=_label_sort_key)


def current_month(
    entries: Iterable[JournalEntry], reference_date: Union[date, datetime]
) -> list[JournalEntry]:
    """Filter entries to the reference date's calendar month.

    Args:
        entries: Journal entries in any order.
        reference_date: Date whose (year, month) is kept.

    Returns:
        Matching entries in input order. Empty if nothing matches.
    """
    return [
        entry
        for entry in entries
        if entry.timestamp.year == reference_date.year
        and entry.timestamp.month == reference_date.month
    ]


class RecapGrouper:
    """Groups journal entries into calendar-month buckets.

    Groups are built in a single pass; entries keep their original relative
    order inside each group.
    """

    def __init__(self, entries: Iterable[JournalEntry]):
        self._groups: dict[str, list[JournalEntry]] = {}
        for entry in entries:
            self._groups.setdefault(month_label(entry.timestamp), []).append(entry)
        self._sorted_labels = sort_labels(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    @property
    def is_empty(self) -> bool:
        """True when there are no entries to group."""
        return not self._groups

    def sorted_labels(self) -> list[str]:
        """Get group labels, most recent month first."""
        return list(self._sorted_labels)

    def grouped_entries(self, label: str) -> list[JournalEntry]:
        """Get the entries for a label; unknown labels give an empty list."""
        return list(self._groups.get(label, ()))

    def buckets(self) -> list[MonthBucket]:
        """Get every group as a MonthBucket, most recent month first."""
        result = []
        for label in self._sorted_labels:
            year, month = parse_month_label(label)
            result.append(
                MonthBucket(
                    label=label,
                    year=year,
                    month=month,
                    entries=tuple(self._groups[label]),
                )
            )
        return result
