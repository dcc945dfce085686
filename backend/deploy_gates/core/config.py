from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "deploy-gates"
    app_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"  # env: LOG_LEVEL
    json_logs: bool = True  # env: JSON_LOGS, False switches to ConsoleRenderer for local dev


@lru_cache
def get_settings() -> Settings:
    return Settings()
