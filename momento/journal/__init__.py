"""Mood ledger, journal store and session for Momento."""

from momento.journal.ledger import InvalidMoodRating, MoodLedger, normalize_day
from momento.journal.store import JournalStore
from momento.journal.session import JournalSession

__all__ = [
    "InvalidMoodRating",
    "JournalSession",
    "JournalStore",
    "MoodLedger",
    "normalize_day",
]
