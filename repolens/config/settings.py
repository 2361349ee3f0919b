from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPOLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sampling budget
    max_files: int = Field(default=20, ge=1)
    max_lines_per_file: int = Field(default=300, ge=1)
    # Concurrent fetches in flight per batch
    fetch_batch_size: int = Field(default=5, ge=1)

    # Logging
    log_level: str = "INFO"


settings = Settings()
