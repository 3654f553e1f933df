# backend/booking_api/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Scheduling policy, overridable through BOOKING_* environment variables."""

    time_zone: str = "Pacific/Auckland"
    max_advance_days: int = 14
    buffer_min: int = 15
    event_buffer_min: int = 0
    min_notice_hours: int = 2
    same_day_cutoff_hour: int = 18
    next_day_cutoff_hour: int = 20
    next_day_earliest_hour: int = 12
    closing_hour: int = 20

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_prefix="BOOKING_",
        extra="ignore",
    )


settings = Settings()
