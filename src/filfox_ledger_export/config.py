from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_endpoint: str = Field(default="https://filfox.info/api/v1", alias="FILFOX_API_ENDPOINT")
    page_size: int = Field(default=100, alias="FILFOX_PAGE_SIZE")
    http_timeout: float = Field(default=20.0, alias="FILFOX_HTTP_TIMEOUT")

    ledger_account_name: str = Field(default="Filfox API", alias="LEDGER_ACCOUNT_NAME")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def validate_required(self) -> None:
        if not self.api_endpoint:
            raise ValueError("FILFOX_API_ENDPOINT is required")

        if self.page_size < 1:
            raise ValueError("FILFOX_PAGE_SIZE must be >= 1")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings
