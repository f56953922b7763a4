"""
Logging infrastructure.

Root logger setup shared by the API process and scripts.
"""
import logging
from typing import Optional

from core.settings import LoggingSettings

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure root logging once for the process.

    Args:
        settings: Logging settings (level and format)
    """
    level_name = settings.level if settings else "INFO"
    log_format = settings.log_format if settings else DEFAULT_FORMAT

    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format=log_format,
    )
