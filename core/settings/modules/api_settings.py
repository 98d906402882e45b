from __future__ import annotations

from typing import List

from pydantic_settings import SettingsConfigDict

from core.settings.base import ComandaBaseSettings


class ApiSettings(ComandaBaseSettings):
    """HTTP layer settings (API_ prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        extra="ignore",
    )

    title: str = "Comanda - Restaurant Orders API"
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    log_level: str = "INFO"
