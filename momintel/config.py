"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Meeting intelligence settings loaded from environment variables."""

    # Application
    app_name: str = "MoM Intelligence"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Transcription
    auto_note_from_transcript: bool = Field(
        default=True,
        description="Promote qualifying transcript chunks into the note log",
    )
    simulation_interval_ms: int = Field(default=1200, ge=50)
    simulation_default_preset: str = Field(default="daily-standup")

    # MoM versioning
    mom_version_limit: int = Field(
        default=50,
        ge=1,
        description="Number of MoM snapshots kept per meeting",
    )

    # Delivery
    email_job_max_retries: int = Field(default=3, ge=1)
    email_retry_wait_min: float = Field(default=1.0, ge=0.0)
    email_retry_wait_max: float = Field(default=60.0, ge=0.0)
    reminder_days_ahead: int = Field(default=1, ge=0)

    # Sharing
    share_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL prefixed to read-only MoM share links",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
