"""Database package: engine, session, base."""

from app.db.session import Database, atomic, get_db

__all__ = ["Database", "atomic", "get_db"]
