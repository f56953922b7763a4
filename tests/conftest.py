"""Pytest configuration and shared database fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from core.application.dtos.order_dto import CreateOrderRequest, OrderItemRequest
from core.data.models import Base


@pytest.fixture
def database_url(tmp_path) -> str:
    """File-backed SQLite database with all tables, one per test."""
    db_path = tmp_path / "orders.db"

    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    engine.dispose()

    return f"sqlite+aiosqlite:///{db_path}"


@pytest.fixture
def test_engine(database_url):
    """Async engine without pooling: every session opens its own connection."""
    return create_async_engine(database_url, poolclass=NullPool, echo=False)


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker:
    """Create test session factory."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def margherita_request() -> CreateOrderRequest:
    """One Margherita, toppings left at their defaults."""
    return CreateOrderRequest(
        customer_name="Jamie Rivera",
        phone="0412345678",
        address="12 Crust Street, Napoli",
        items=[OrderItemRequest(pizza="Margherita", size="Large", crust="Thin")],
    )
