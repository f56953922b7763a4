"""
Test settings loading from the environment.

Every settings section must resolve with no .env present, and every
field must be reachable through its documented variable name.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from core.settings import get_app_settings


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # No stray .env and a fresh cache for each test
    monkeypatch.chdir(tmp_path)
    for key in (
        "DATABASE_URL", "DB_ECHO_SQL", "DB_CREATE_TABLES",
        "LOG_LEVEL", "API_PORT", "API_TITLE",
    ):
        monkeypatch.delenv(key, raising=False)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults_without_environment():
    settings = get_app_settings()

    assert settings.database.url == "sqlite+aiosqlite:///pizza_tracker.db"
    assert settings.database.echo_sql is False
    assert settings.database.create_tables is True
    assert settings.logging.level == "INFO"
    assert settings.api.port == 8080


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://pizza@localhost/orders")
    monkeypatch.setenv("DB_ECHO_SQL", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("API_PORT", "9090")

    settings = get_app_settings()

    assert settings.database.url == "postgresql+asyncpg://pizza@localhost/orders"
    assert settings.database.echo_sql is True
    assert settings.logging.level == "DEBUG"
    assert settings.api.port == 9090


def test_dotenv_file_in_working_directory(tmp_path: Path):
    (tmp_path / ".env").write_text(
        "API_TITLE=Night Shift Tracker\nDB_CREATE_TABLES=false\n", encoding="utf-8"
    )

    settings = get_app_settings()

    assert settings.api.title == "Night Shift Tracker"
    assert settings.database.create_tables is False


def test_settings_are_cached():
    assert get_app_settings() is get_app_settings()


def test_every_example_key_is_mapped():
    """Each key in .env.example maps to exactly one settings field."""
    example = Path(__file__).resolve().parents[1] / ".env.example"
    keys = [
        line.split("=", 1)[0].strip()
        for line in example.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.lstrip().startswith("#") and "=" in line
    ]

    settings = get_app_settings()
    aliases = [
        field.alias
        for section in (settings.api, settings.database, settings.logging)
        for field in type(section).model_fields.values()
    ]

    assert len(aliases) == len(set(aliases))
    missing = [key for key in keys if key not in aliases]
    assert not missing, f"Unmapped env keys: {missing}"
