from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Idea Gate"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # Anthropic
    anthropic_api_key: str = ""

    # Idea classifier (single-label output, so the token ceiling stays tiny)
    classifier_model: str = "claude-sonnet-4-5-20250929"
    classifier_max_tokens: int = 5
    classifier_timeout_seconds: float = 10.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
