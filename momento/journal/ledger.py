"""Mood ledger: one mood rating per calendar day.

Ratings are keyed by local calendar date. Timezone-aware datetimes are
converted to local time before the date is taken, naive datetimes are
assumed to already be local.
"""

import json
import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

from pydantic import ValidationError

from momento.db.store import DataStore
from momento.models import MoodRecord

logger = logging.getLogger(__name__)

MOOD_DATA_KEY = "mood_data"

DEFAULT_MIN_RATING = 0
DEFAULT_MAX_RATING = 10


class InvalidMoodRating(ValueError):
    """Raised when a rating falls outside the configured scale."""

    def __init__(self, rating, min_rating: int, max_rating: int):
        self.rating = rating
        self.min_rating = min_rating
        self.max_rating = max_rating
        super().__init__(
            f"Mood rating {rating!r} is outside the range {min_rating}-{max_rating}"
        )


def normalize_day(value: Union[date, datetime]) -> date:
    """Truncate a date or datetime to its local calendar date."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


class MoodLedger:
    """Stores one mood rating per calendar day with upsert semantics.

    When a DataStore is supplied, the ledger is loaded from the ``mood_data``
    key at construction and flushed back after every upsert.
    """

    def __init__(
        self,
        store: Optional[DataStore] = None,
        min_rating: int = DEFAULT_MIN_RATING,
        max_rating: int = DEFAULT_MAX_RATING,
    ):
        """Initialize the ledger.

        Args:
            store: Optional DataStore used for persistence.
            min_rating: Lowest accepted rating (inclusive).
            max_rating: Highest accepted rating (inclusive).
        """
        if min_rating > max_rating:
            raise ValueError(
                f"min_rating ({min_rating}) must not exceed max_rating ({max_rating})"
            )
        self._store = store
        self.min_rating = min_rating
        self.max_rating = max_rating
        self._records: dict[date, MoodRecord] = {}
        if store is not None:
            self._load()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, day) -> bool:
        return normalize_day(day) in self._records

    def is_valid_rating(self, rating) -> bool:
        """Check a rating against the configured scale."""
        if isinstance(rating, bool) or not isinstance(rating, int):
            return False
        return self.min_rating <= rating <= self.max_rating

    def upsert(self, day: Union[date, datetime], rating: int) -> MoodRecord:
        """Insert or replace the rating for a day.

        Args:
            day: Date or datetime of the rating; time of day is discarded.
            rating: Rating on the configured scale.

        Returns:
            The stored record.

        Raises:
            InvalidMoodRating: If the rating is outside the configured scale.
        """
        if not self.is_valid_rating(rating):
            raise InvalidMoodRating(rating, self.min_rating, self.max_rating)

        record = MoodRecord(day=normalize_day(day), rating=rating)
        previous = self._records.get(record.day)

        # persist first so a failed write leaves memory untouched
        updated = dict(self._records)
        updated[record.day] = record
        self._write(updated)
        self._records = updated

        if previous is None:
            logger.debug("Recorded mood %s for %s", rating, record.day)
        elif previous.rating != rating:
            logger.debug(
                "Replaced mood for %s: %s -> %s", record.day, previous.rating, rating
            )

        return record

    def get(self, day: Union[date, datetime]) -> Optional[MoodRecord]:
        """Get the record for a day, if any."""
        return self._records.get(normalize_day(day))

    def has_checked_in(self, day: Union[date, datetime]) -> bool:
        """Check whether a rating exists for a day."""
        return normalize_day(day) in self._records

    def latest(self) -> Optional[MoodRecord]:
        """Get the most recent record by day."""
        if not self._records:
            return None
        return self._records[max(self._records)]

    def all(self) -> list[MoodRecord]:
        """Get every record ordered ascending by day."""
        return [self._records[day] for day in sorted(self._records)]

    def recent_range(
        self, reference_date: Union[date, datetime], window_days: int
    ) -> list[MoodRecord]:
        """Get records within ``window_days`` of a reference date.

        Both bounds are inclusive: ``[reference - window_days, reference]``.

        Args:
            reference_date: Last day of the window.
            window_days: Number of days to look back.

        Returns:
            Matching records ordered ascending by day, possibly empty.
        """
        if window_days < 0:
            raise ValueError(f"window_days must be non-negative, got {window_days}")

        end = normalize_day(reference_date)
        start = end - timedelta(days=window_days)
        return [
            self._records[day]
            for day in sorted(self._records)
            if start <= day <= end
        ]

    # ==================== Persistence ====================

    def flush(self) -> None:
        """Write all records to the backing store."""
        self._write(self._records)

    def _write(self, records: dict[date, MoodRecord]) -> None:
        if self._store is None:
            return
        payload = [
            {"day": day.isoformat(), "rating": records[day].rating}
            for day in sorted(records)
        ]
        self._store.set_value(MOOD_DATA_KEY, json.dumps(payload))

    def _load(self) -> None:
        """Load records from the backing store.

        Absent or corrupt data leaves the ledger empty.
        """
        raw = self._store.get_value(MOOD_DATA_KEY)
        if raw is None:
            return

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt mood data: %s", e)
            return

        if not isinstance(payload, list):
            logger.warning("Ignoring mood data with unexpected shape: %s", type(payload).__name__)
            return

        for item in payload:
            try:
                record = MoodRecord.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping malformed mood record %r: %s", item, e)
                continue
            if not self.is_valid_rating(record.rating):
                logger.warning(
                    "Skipping out-of-range mood record for %s: %s",
                    record.day,
                    record.rating,
                )
                continue
            self._records[record.day] = record

        logger.debug("Loaded %d mood records", len(self._records))
