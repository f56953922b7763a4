from __future__ import annotations

from typing import List

from pydantic import Field

from core.settings.base_settings import PizzaBaseSettings


class ApiSettings(PizzaBaseSettings):
    """HTTP server settings."""

    title: str = Field(default="Pizza Tracker API", alias="API_TITLE")
    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8080, alias="API_PORT")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        alias="API_CORS_ORIGINS",
    )
