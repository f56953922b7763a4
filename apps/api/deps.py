"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.services.order_service import OrderApplicationService  # noqa: E402
from core.infrastructure.database.lifecycle import get_session_factory as _lifecycle_session_factory  # noqa: E402
from core.settings import AppSettings, get_app_settings  # noqa: E402


def get_settings() -> AppSettings:
    """Get cached application settings.

    Returns:
        AppSettings instance
    """
    return get_app_settings()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance

    Raises:
        RuntimeError: If the database was not initialized on startup
    """
    return _lifecycle_session_factory()


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(get_session_factory())
