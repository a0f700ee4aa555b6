# rowfilter/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Row Filter"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ROWFILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =============================================================================
    # Filter defaults, used when neither the call nor the RowFilter sets them
    # =============================================================================

    normalize_data: bool = Field(
        default=True,
        description="Return survivors as mappings of the compared attributes",
    )
    ignore_undefined_attributes: bool = Field(
        default=True,
        description="Skip attributes a row does not define instead of failing",
    )

    # Comma separated list of modules registering comparators
    comparator_modules: str = Field(
        default="",
        description="Modules imported when the default comparator registry is built",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
