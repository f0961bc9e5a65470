from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven runtime overrides for client/profile resolution."""

    model_config = SettingsConfigDict(
        env_prefix="BL_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BL_PROFILE", "BINARYLANE_PROFILE"),
    )
    access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("BL_ACCESS_TOKEN", "BINARYLANE_ACCESS_TOKEN", "BINARYLANE_API_TOKEN"),
    )
    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BL_API_URL", "BL_BASE_URL", "BINARYLANE_API_URL"),
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("BL_REQUEST_TIMEOUT_SECONDS", "BL_TIMEOUT"),
    )
    verify_ssl: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("BL_VERIFY_SSL"),
    )
    per_page: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("BL_PER_PAGE"),
    )
    max_pages: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("BL_MAX_PAGES"),
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("BL_LOG_LEVEL"),
    )