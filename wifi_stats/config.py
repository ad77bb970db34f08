"""Configuration management for wifi-stats."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

AIRPORT_PATH = (
    "/System/Library/PrivateFrameworks/Apple80211.framework"
    "/Versions/Current/Resources/airport"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIFI_STATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Collection defaults
    samples: int = 12
    internet_host: str = "1.1.1.1"
    dns_host: str = "cloudflare.com"

    # Tool locations
    airport_path: str = AIRPORT_PATH

    # Timeouts (seconds)
    command_timeout: float = 10
    ping_timeout_grace: float = 10
    dns_timeout: float = 5
    speedtest_timeout: float = 90

    # Logging
    log_level: str = "WARNING"
    log_to_file: bool = False
    log_dir: Path = Path("data/logs")
    event_sink: Literal["stderr", "logger", "none"] = "stderr"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
