# Settings modules
from .api_settings import ApiSettings
from .app_settings import AppSettings, get_app_settings
from .database_settings import DatabaseSettings
from .logging_settings import LoggingSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "get_app_settings",
]
