"""SQLite data store for Momento."""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from momento.models import JournalEntry


class DataStore:
    """SQLite-based data store for Momento.

    Holds a small key-value table used for session state such as the mood
    ledger, and the append-only journal entry table.
    """

    REQUIRED_TABLES = [
        "kv",
        "journal_entries",
    ]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # Key-value table
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            # Journal entries table, rowid keeps insertion order
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS journal_entries (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    entry_id TEXT NOT NULL UNIQUE,
                    timestamp TEXT NOT NULL,
                    image_ref TEXT NOT NULL
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Key-Value ====================

    def set_value(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Key name.
            value: Serialized value.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO kv (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def get_value(self, key: str) -> Optional[str]:
        """Get the value stored under a key.

        Args:
            key: Key name.

        Returns:
            Stored value if present, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            if row:
                return row["value"]
            return None
        finally:
            conn.close()

    def delete_value(self, key: str) -> None:
        """Delete a key.

        Args:
            key: Key name.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    # ==================== Journal ====================

    def save_journal_entry(self, entry: JournalEntry) -> None:
        """Save a journal entry.

        Args:
            entry: Journal entry to save.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO journal_entries (entry_id, timestamp, image_ref)
                VALUES (?, ?, ?)
                """,
                (entry.id, entry.timestamp.isoformat(), entry.image_ref),
            )
            conn.commit()
        finally:
            conn.close()

    def get_journal_entries(self) -> list[JournalEntry]:
        """Get all journal entries in insertion order.

        Returns:
            List of journal entries.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT entry_id, timestamp, image_ref
                FROM journal_entries
                ORDER BY seq
                """
            )
            return [
                JournalEntry(
                    id=row["entry_id"],
                    timestamp=datetime.fromisoformat(row["timestamp"]),
                    image_ref=row["image_ref"],
                )
                for row in cursor.fetchall()
            ]
        finally:
            conn.close()

    # ==================== Stats ====================

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary with table record counts.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            stats = {}
            for table in self.REQUIRED_TABLES:
                cursor.execute(f"SELECT COUNT(*) as count FROM {table}")
                stats[table] = cursor.fetchone()["count"]
            return stats
        finally:
            conn.close()
