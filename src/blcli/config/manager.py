"""Profile storage behind ``bl configure`` and ``bl profiles``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from blcli.config.loader import default_config_candidates, load_config, save_config
from blcli.config.models import ProfileConfig, SDKConfig
from blcli.errors import ConfigError


def _supplied(profile: ProfileConfig) -> dict[str, Any]:
    return {field: getattr(profile, field) for field in profile.model_fields_set}


class ProfileManager:
    """Read and edit the named API profiles in one config file.

    Without an explicit file the manager follows the same lookup as the
    client, so a legacy ``bl`` config is migrated before it is edited.
    """

    def __init__(self, config_file: str | Path | None = None) -> None:
        self._explicit = config_file is not None
        self._path = Path(config_file).expanduser() if config_file else default_config_candidates()[0]

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SDKConfig:
        resolved = load_config(config_path=self._path) if self._explicit else load_config()
        if resolved.path is not None:
            self._path = resolved.path
        return resolved.data

    def _known(self, cfg: SDKConfig, name: str) -> None:
        if name in cfg.profiles:
            return
        known = ", ".join(sorted(cfg.profiles)) or "none"
        raise ConfigError(
            f"profile '{name}' not found in {self._path} (known profiles: {known}); "
            f"run 'bl configure --profile {name}' to create it"
        )

    def list_profiles(self) -> list[str]:
        return sorted(self.load().profiles)

    def get_profile(self, name: str | None = None) -> ProfileConfig:
        cfg = self.load()
        selected = name or cfg.active_profile or cfg.default_profile or "default"
        self._known(cfg, selected)
        return cfg.profiles[selected]

    def upsert_profile(self, name: str, profile: ProfileConfig, *, activate: bool = False) -> SDKConfig:
        """Store `profile` under `name`.

        Fields `profile` leaves unset keep their stored values, and the
        merged profile is validated again before anything is written.
        """

        if not name.strip():
            raise ConfigError("profile name cannot be empty")

        cfg = self.load()
        existing = cfg.profiles.get(name)
        merged = {**(_supplied(existing) if existing is not None else {}), **_supplied(profile)}
        try:
            cfg.profiles[name] = ProfileConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"profile '{name}' is invalid: {exc}") from exc

        if activate or not (cfg.active_profile or cfg.default_profile):
            cfg.active_profile = cfg.default_profile = name
        save_config(cfg, path=self._path)
        return cfg

    def set_active_profile(self, name: str) -> SDKConfig:
        cfg = self.load()
        self._known(cfg, name)
        cfg.active_profile = cfg.default_profile = name
        save_config(cfg, path=self._path)
        return cfg

    def delete_profile(self, name: str) -> SDKConfig:
        """Remove `name`; the first remaining profile becomes active if it was."""

        cfg = self.load()
        self._known(cfg, name)
        del cfg.profiles[name]
        fallback = min(cfg.profiles, default=None)
        if cfg.active_profile == name:
            cfg.active_profile = fallback
        if cfg.default_profile == name:
            cfg.default_profile = cfg.active_profile
        save_config(cfg, path=self._path)
        return cfg
