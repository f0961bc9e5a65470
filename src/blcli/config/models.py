from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, model_validator

from blcli.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_PAGES,
    DEFAULT_PER_PAGE,
    DEFAULT_TIMEOUT_SECONDS,
)


class ProfileConfig(BaseModel):
    """Resolved profile configuration used for API requests."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("access_token", "access-token", "accessToken", "token"),
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("base_url", "api-url", "api_url", "baseUrl"),
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        validation_alias=AliasChoices("request_timeout_seconds", "requestTimeoutSeconds", "timeout"),
    )
    verify_ssl: bool = Field(default=True, validation_alias=AliasChoices("verify_ssl", "verifySsl"))
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, validation_alias=AliasChoices("per_page", "perPage"))
    max_pages: int = Field(default=DEFAULT_MAX_PAGES, ge=1, validation_alias=AliasChoices("max_pages", "maxPages"))


class SDKConfig(BaseModel):
    """Root configuration model with profile-aware and legacy-compatible shape."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    version: str = "2"
    default_profile: str | None = None
    active_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("active_profile", "activeProfile"),
    )
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_legacy_schema(cls, data: object) -> object:
        if not isinstance(data, Mapping):
            return data

        data_dict = dict(data)
        if isinstance(data_dict.get("profiles"), Mapping):
            return data_dict

        # The original `bl` config is a flat file with dash-separated keys.
        legacy_keys = {
            "access-token",
            "access_token",
            "accessToken",
            "api-url",
            "api_url",
            "base_url",
        }
        if not any(key in data_dict for key in legacy_keys):
            return data_dict

        default_profile = {key: value for key, value in data_dict.items() if key in legacy_keys}
        return {
            "version": "1",
            "active_profile": "default",
            "default_profile": "default",
            "profiles": {"default": default_profile},
        }


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: SDKConfig


ConfigInput = SDKConfig | dict[str, Any]
