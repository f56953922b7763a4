# Settings package
from core.settings.modules import (
    ApiSettings,
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    get_app_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "get_app_settings",
]
