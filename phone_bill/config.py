"""
Configuration settings for the phone bill calculator.

Uses Pydantic Settings to load environment variables for logging and for the
defaults the CLI hands to the calculator. Tariff constants live in
`phone_bill.domain.models` and `phone_bill.billing.cost`, not here.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from phone_bill.domain.models import TimestampErrorPolicy


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Billing defaults
    timestamp_policy: TimestampErrorPolicy = Field(
        TimestampErrorPolicy.FAIL_BATCH, alias="PHONE_BILL_TIMESTAMP_POLICY"
    )
    log_encoding: str = Field("utf-8", alias="PHONE_BILL_LOG_ENCODING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
