"""Database layer for Momento."""

from momento.db.store import DataStore

__all__ = ["DataStore"]
