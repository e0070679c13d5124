"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Store
    region: str = "us-east-1"
    table_name: str = "kanowins"
    dynamodb_endpoint_url: str = ""  # DynamoDB Local, empty for AWS

    # Slack
    slack_verification_token: str = ""
    slack_access_token: str = ""

    # Summary
    summary_min_age_hours: float = 12.0
    open_dialog_after_summary: bool = True
    http_timeout_seconds: float = 10.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
