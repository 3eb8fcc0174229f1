"""Database package: engine, session, base."""

from workout_log.db.session import Database, get_db

__all__ = ["Database", "get_db"]
