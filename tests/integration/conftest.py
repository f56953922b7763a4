"""Pytest configuration and fixtures for integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from apps.api.deps import get_order_service
from apps.api.main import app
from core.application.services.order_service import OrderApplicationService


def _client_for(session_factory: async_sessionmaker) -> Generator[TestClient, None, None]:
    def override_get_order_service():
        return OrderApplicationService(session_factory=session_factory)

    app.dependency_overrides[get_order_service] = override_get_order_service

    client = TestClient(app)
    yield client

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_session_factory) -> Generator[TestClient, None, None]:
    """Create FastAPI test client backed by the per-test database."""
    yield from _client_for(test_session_factory)


@pytest.fixture
def broken_client(tmp_path) -> Generator[TestClient, None, None]:
    """Test client whose database has no tables, so every write fails."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}", poolclass=NullPool
    )
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield from _client_for(session_factory)
