import logging
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OverflowPolicy(str, Enum):
    """How a total that does not fit the configured integer width is reduced."""

    WRAP = "wrap"
    SATURATE = "saturate"
    UNBOUNDED = "unbounded"


class Settings(BaseSettings):
    """Application runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    env: str = Field(default="dev", validation_alias="ENV")
    api_title: str = Field(default="Summation", validation_alias="API_TITLE")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    overflow_policy: OverflowPolicy = Field(
        default=OverflowPolicy.WRAP, validation_alias="OVERFLOW_POLICY"
    )
    integer_width: int = Field(default=64, ge=8, le=128, validation_alias="INTEGER_WIDTH")
    cors_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")
    request_id_header: str = Field(default="X-Request-ID")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def allowed_origins(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
