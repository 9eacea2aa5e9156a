"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from fleetpool.config import PoolSettings

    # Load from environment variables (FLEETPOOL_*)
    settings = PoolSettings()

    # Or override with explicit values
    settings = PoolSettings(event_history=32)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fleetpool.core.state import DEFAULT_KEY_SEPARATOR


class PoolSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the interning cache and the reference scenario.

    Attributes:
        key_separator: Text between brand, model and color in string keys.
        event_history: Number of recent lookup events kept (0 disables).
        report_name: Label printed in cache report lines.
        log_level: Logging level used by ``python -m fleetpool``.
        scenario_batch_size: Cars built per variant in the reference scenario.

    Environment Variables:
        FLEETPOOL_KEY_SEPARATOR
        FLEETPOOL_EVENT_HISTORY
        FLEETPOOL_REPORT_NAME
        FLEETPOOL_LOG_LEVEL
        FLEETPOOL_SCENARIO_BATCH_SIZE
    """

    model_config = SettingsConfigDict(
        env_prefix="FLEETPOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    key_separator: str = DEFAULT_KEY_SEPARATOR
    event_history: int = Field(default=0, ge=0)
    report_name: str = "InterningCache"
    log_level: str = "INFO"
    scenario_batch_size: int = Field(default=6, ge=0)
