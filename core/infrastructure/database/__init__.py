"""Database infrastructure."""

from .lifecycle import close_database, get_session_factory, init_database

__all__ = ["close_database", "get_session_factory", "init_database"]
