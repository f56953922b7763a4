from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import PizzaBaseSettings


class LoggingSettings(PizzaBaseSettings):
    """Logging settings."""

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        alias="LOG_FORMAT",
    )
