"""Application settings loaded from the environment."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Runtime configuration, overridable with ``CHALLENGELY_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="CHALLENGELY_", extra="ignore")

    data_dir: Path = DATA_DIR
    log_level: str = "INFO"
    log_format: str = "pretty"  # pretty | json

    # Whether the local notification scheduler grants permission
    notifications_allowed: bool = True

    # Assistant typing delay bounds (seconds)
    reply_delay_min: float = 1.5
    reply_delay_max: float = 3.0

    # Countdown tick interval (seconds)
    tick_interval: float = 1.0


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
