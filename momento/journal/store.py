"""Append-only store of journal entries."""

import logging
import uuid
from datetime import datetime
from typing import Optional

from momento.db.store import DataStore
from momento.models import JournalEntry

logger = logging.getLogger(__name__)


class JournalStore:
    """Append-only collection of journal entries.

    Entries keep insertion order. Display order is decided by the recap
    functions, not by this store.
    """

    def __init__(self, store: Optional[DataStore] = None):
        """Initialize the journal store.

        Args:
            store: Optional DataStore. Saved entries are loaded from it and
                new entries are written through to it.
        """
        self._store = store
        self._entries: list[JournalEntry] = []
        self._ids: set[str] = set()
        if store is not None:
            for entry in store.get_journal_entries():
                self._entries.append(entry)
                self._ids.add(entry.id)
            logger.debug("Loaded %d journal entries", len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def _new_id(self) -> str:
        entry_id = uuid.uuid4().hex
        while entry_id in self._ids:
            entry_id = uuid.uuid4().hex
        return entry_id

    def append(self, timestamp: datetime, image_ref: str) -> str:
        """Append a new entry.

        Args:
            timestamp: Capture time.
            image_ref: Reference to the stored image.

        Returns:
            The id assigned to the new entry.

        Raises:
            pydantic.ValidationError: If the image reference is empty.
        """
        entry = JournalEntry(id=self._new_id(), timestamp=timestamp, image_ref=image_ref)
        if self._store is not None:
            self._store.save_journal_entry(entry)
        self._entries.append(entry)
        self._ids.add(entry.id)
        logger.debug("Appended journal entry %s at %s", entry.id, entry.timestamp)
        return entry.id

    def get(self, entry_id: str) -> Optional[JournalEntry]:
        """Get an entry by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def all(self) -> tuple[JournalEntry, ...]:
        """Get a snapshot of every entry in insertion order."""
        return tuple(self._entries)
