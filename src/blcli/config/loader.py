"""Locate, read and write the profile config file.

Lookup order: a config object handed in at runtime, an explicit path, the
first of the ``CONFIG_PATH_ENVS`` variables that is set, the files under
``~/.config/blcli``, and finally the flat file written by the original
``bl`` tool, which is copied to the new location on first read.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import tomli_w
import yaml
from pydantic import ValidationError

from blcli.config.models import ConfigInput, ResolvedConfig, SDKConfig
from blcli.constants import DEFAULT_CONFIG_DIR, DEFAULT_LEGACY_CONFIG_FILE
from blcli.errors import ConfigError
from blcli.log import get_logger

CONFIG_PATH_ENVS = ("BL_CONFIG", "BL_CONFIG_FILE", "BINARYLANE_CONFIG")

logger = get_logger("config")

# tomllib.TOMLDecodeError and json.JSONDecodeError are both ValueErrors.
_DECODE_ERRORS = (ValueError, yaml.YAMLError)

_READERS: dict[str, Callable[[str], Any]] = {
    ".yml": yaml.safe_load,
    ".yaml": yaml.safe_load,
    ".toml": tomllib.loads,
    ".json": json.loads,
}


def _dump_yaml(payload: dict[str, Any]) -> str:
    return yaml.safe_dump(payload, sort_keys=False)


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2) + "\n"


_WRITERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "": _dump_yaml,
    ".yml": _dump_yaml,
    ".yaml": _dump_yaml,
    ".toml": tomli_w.dumps,
    ".json": _dump_json,
}


def default_config_candidates() -> list[Path]:
    base = Path(DEFAULT_CONFIG_DIR).expanduser()
    return [base / f"config{suffix}" for suffix in (".yml", ".yaml", ".toml", ".json")]


def legacy_config_path() -> Path:
    return Path(DEFAULT_LEGACY_CONFIG_FILE).expanduser()


def _sniff(raw: str) -> Any:
    for reader in (yaml.safe_load, tomllib.loads, json.loads):
        try:
            parsed = reader(raw)
        except _DECODE_ERRORS:
            continue
        if parsed is None or isinstance(parsed, dict):
            return parsed
    raise ConfigError("could not detect config format (expected yaml, toml or json)")


def _decode(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    reader = _READERS.get(path.suffix.lower())
    parsed = reader(raw) if reader is not None else _sniff(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ConfigError(f"config file '{path}' must contain a mapping")
    return parsed


def _validate(payload: ConfigInput, origin: str) -> SDKConfig:
    try:
        return SDKConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {origin}: {exc}") from exc


def _read(path: Path, source: str) -> ResolvedConfig:
    try:
        payload = _decode(path)
    except (OSError, *_DECODE_ERRORS) as exc:
        raise ConfigError(f"failed to parse config file '{path}': {exc}") from exc

    logger.debug("loaded config from %s (%s)", path, source)
    return ResolvedConfig(source=source, path=path, data=_validate(payload, f"'{path}'"))


def _read_if_present(path: Path, source: str) -> ResolvedConfig:
    path = path.expanduser().resolve()
    if not path.exists():
        return ResolvedConfig(source=f"{source}:missing", path=path, data=SDKConfig())
    return _read(path, source)


def _migrate(legacy: Path) -> ResolvedConfig:
    migrated = _read(legacy.resolve(), "legacy-path")
    target = save_config(migrated.data)
    logger.info("migrated legacy config %s to %s", legacy, target)
    return ResolvedConfig(source="legacy-migrated", path=target, data=migrated.data)


def load_config(
    config: ConfigInput | str | Path | None = None,
    *,
    config_path: str | Path | None = None,
) -> ResolvedConfig:
    if isinstance(config, (str, Path)):
        config_path = config_path or config
        config = None

    if isinstance(config, SDKConfig):
        return ResolvedConfig(source="runtime-model", data=config)
    if config is not None:
        return ResolvedConfig(source="runtime-dict", data=_validate(config, "runtime config"))

    if config_path is not None:
        return _read_if_present(Path(config_path), "explicit-path")

    for env_name in CONFIG_PATH_ENVS:
        env_path = os.getenv(env_name)
        if env_path:
            return _read_if_present(Path(env_path), f"env:{env_name}")

    for candidate in default_config_candidates():
        if candidate.exists():
            return _read(candidate.resolve(), "default-path")

    legacy = legacy_config_path()
    if legacy.exists():
        return _migrate(legacy)

    return ResolvedConfig(source="default-empty", path=default_config_candidates()[0].resolve(), data=SDKConfig())


def _file_payload(config: SDKConfig) -> dict[str, Any]:
    payload = config.model_dump(mode="json", exclude_none=True)
    for name, profile in config.profiles.items():
        if profile.access_token is not None:
            payload["profiles"][name]["access_token"] = profile.access_token.get_secret_value()
    return payload


def save_config(config: SDKConfig, *, path: Path | None = None) -> Path:
    """Write `config` in the format implied by the file suffix, readable by the owner only."""

    target = (path or default_config_candidates()[0]).expanduser()
    writer = _WRITERS.get(target.suffix.lower())
    if writer is None:
        raise ConfigError(f"unsupported config extension: {target.suffix}")

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(writer(_file_payload(config)), encoding="utf-8")
    target.chmod(0o600)
    return target.resolve()
