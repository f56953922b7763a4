from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import PizzaBaseSettings


class DatabaseSettings(PizzaBaseSettings):
    """
    Database connection settings.
    SQLite (aiosqlite) by default; any async SQLAlchemy URL works.
    """

    url: str = Field(default="sqlite+aiosqlite:///pizza_tracker.db", alias="DATABASE_URL")
    echo_sql: bool = Field(default=False, alias="DB_ECHO_SQL")
    pool_pre_ping: bool = Field(default=True, alias="DB_POOL_PRE_PING")
    create_tables: bool = Field(default=True, alias="DB_CREATE_TABLES")
