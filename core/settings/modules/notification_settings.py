from __future__ import annotations

from typing import Literal

from pydantic_settings import SettingsConfigDict

from core.settings.base import ComandaBaseSettings


class NotificationSettings(ComandaBaseSettings):
    """
    Real-time order channel settings.

    NOTIFY_BACKEND=memory keeps everything in process (development, tests);
    NOTIFY_BACKEND=redis publishes on Redis pub/sub channels.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NOTIFY_",
        extra="ignore",
    )

    backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    channel_prefix: str = "orders"
