from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from core.settings.base import ComandaBaseSettings


class OrderSettings(ComandaBaseSettings):
    """Order lifecycle settings (ORDERS_ prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ORDERS_",
        extra="ignore",
    )

    page_size: int = Field(default=25, ge=1)
    currency: str = Field(default="BRL", min_length=3, max_length=3)
