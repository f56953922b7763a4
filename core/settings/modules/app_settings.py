from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.api_settings import ApiSettings
from core.settings.modules.database_settings import DatabaseSettings
from core.settings.modules.logging_settings import LoggingSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    api: ApiSettings
    database: DatabaseSettings
    logging: LoggingSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        api=ApiSettings(),
        database=DatabaseSettings(),
        logging=LoggingSettings(),
    )
