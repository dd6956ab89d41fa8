from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Process-level configuration loaded from environment variables.
    Chat-facing toggles live in the host settings store, not here.
    """

    service_name: str = Field(default="quote_formatter", alias="SERVICE_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    json_logs: bool = Field(default=False, alias="JSON_LOGS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    module_name: str = Field(
        default="quote_formatter", alias="QUOTE_FORMATTER_MODULE_NAME"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()
