"""Data models for Momento."""

from momento.models.mood import MoodRecord
from momento.models.entry import JournalEntry
from momento.models.bucket import MonthBucket
from momento.models.quote import Quote

__all__ = [
    "MoodRecord",
    "JournalEntry",
    "MonthBucket",
    "Quote",
]
