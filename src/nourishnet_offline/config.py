"""Offline queue configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORAGE_KEY = "@nourishnet_offline_queue"


class OfflineQueueConfig(BaseSettings):
    """Runtime config for the offline operation queue.

    Reads from environment variables with NOURISHNET_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="NOURISHNET_")

    storage_key: str = DEFAULT_STORAGE_KEY

    # Retry settings
    max_retries: int = Field(default=3, ge=0)
    executor_timeout: float | None = Field(default=None, gt=0)

    # Backpressure
    max_queue_size: int = Field(default=100, ge=1)

    unknown_type_policy: Literal["unrecoverable", "drop"] = "unrecoverable"
    reject_unknown_types: bool = False
    sync_enabled: bool = True
