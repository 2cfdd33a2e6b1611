"""Journal session: the single owner of mood and journal state."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import date, datetime
from typing import Optional, Union

from momento.config import get_db_path, get_image_dir
from momento.db.store import DataStore
from momento.journal.ledger import DEFAULT_MAX_RATING, DEFAULT_MIN_RATING, MoodLedger
from momento.journal.store import JournalStore
from momento.models import JournalEntry, MoodRecord
from momento.recap.grouping import RecapGrouper, current_month
from momento.storage.base import BaseImageStorage, UploadResult, generate_image_name
from momento.storage.local import LocalImageStorage

logger = logging.getLogger(__name__)


def _log_upload(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.error("Image upload raised: %s", exc)
        return
    result = future.result()
    if not result.success:
        logger.warning("Image upload failed for %s: %s", result.name, result.message)


class JournalSession:
    """Owns the mood ledger, journal store and image storage for a user.

    Writes to the ledger and the journal are serialized through one lock.
    Image uploads run in the background and never affect recorded state.
    """

    def __init__(
        self,
        ledger: MoodLedger,
        journal: JournalStore,
        image_storage: Optional[BaseImageStorage] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """Initialize the session.

        Args:
            ledger: Mood ledger.
            journal: Journal entry store.
            image_storage: Optional backend that receives captured images.
            executor: Optional executor for uploads. One is created on
                demand and shut down by close().
        """
        self.ledger = ledger
        self.journal = journal
        self.image_storage = image_storage
        self._executor = executor
        self._owns_executor = executor is None
        self._lock = threading.RLock()
        self.pending_uploads: list[Future] = []

    @classmethod
    def open(cls, config: dict) -> "JournalSession":
        """Build a session from configuration.

        Args:
            config: Configuration dictionary from load_config().

        Returns:
            A session backed by the configured database and image folder.
        """
        store = DataStore(get_db_path(config))
        mood_config = config.get("mood", {})
        ledger = MoodLedger(
            store,
            min_rating=mood_config.get("min_rating", DEFAULT_MIN_RATING),
            max_rating=mood_config.get("max_rating", DEFAULT_MAX_RATING),
        )
        journal = JournalStore(store)
        return cls(ledger, journal, LocalImageStorage(get_image_dir(config)))

    def __enter__(self) -> "JournalSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ==================== Writes ====================

    def record_mood(
        self, rating: int, when: Optional[Union[date, datetime]] = None
    ) -> MoodRecord:
        """Record the mood for a day (today by default)."""
        with self._lock:
            return self.ledger.upsert(when or datetime.now(), rating)

    def capture(
        self, image_data: bytes, when: Optional[datetime] = None
    ) -> JournalEntry:
        """Record a photo as a journal entry and upload it in the background.

        The entry is appended before the upload starts; the upload outcome
        is only visible through ``pending_uploads``, which holds uploads
        that have not been collected yet. Finished uploads are dropped from
        it on the next capture.

        Args:
            image_data: Raw image bytes.
            when: Capture time, now by default.

        Returns:
            The new journal entry.
        """
        name = generate_image_name()
        with self._lock:
            entry_id = self.journal.append(when or datetime.now(), name)
            entry = self.journal.get(entry_id)

            if self.image_storage is not None:
                future = self._get_executor().submit(self.image_storage.upload, name, image_data)
                future.add_done_callback(_log_upload)
                self.pending_uploads = [f for f in self.pending_uploads if not f.done()]
                self.pending_uploads.append(future)

        return entry

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="momento-upload")
        return self._executor

    def wait_for_uploads(self, timeout: Optional[float] = None) -> list[UploadResult]:
        """Wait for pending uploads and collect their results.

        Uploads that raised are logged and left out of the results.
        """
        with self._lock:
            pending = list(self.pending_uploads)

        done, _ = wait(pending, timeout=timeout)
        results = [
            f.result() for f in pending
            if f in done and f.exception() is None
        ]

        with self._lock:
            self.pending_uploads = [f for f in self.pending_uploads if f not in done]
        return results

    def close(self) -> None:
        """Finish outstanding uploads and release the executor."""
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=True)
            self._executor = None

    # ==================== Reads ====================

    def month_entries(self, reference: Union[date, datetime]) -> list[JournalEntry]:
        """Entries captured in the reference date's month."""
        return current_month(self.journal.all(), reference)

    def recap(self) -> RecapGrouper:
        """Group every entry by month."""
        return RecapGrouper(self.journal.all())

    def recent_moods(
        self, reference: Union[date, datetime], window_days: int
    ) -> list[MoodRecord]:
        """Mood records within the trailing window."""
        return self.ledger.recent_range(reference, window_days)
