from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest
import yaml

from blcli.config.loader import (
    default_config_candidates,
    legacy_config_path,
    load_config,
    save_config,
)
from blcli.config.manager import ProfileManager
from blcli.config.models import ProfileConfig, SDKConfig
from blcli.errors import ConfigError


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("BL_CONFIG", "BL_CONFIG_FILE", "BINARYLANE_CONFIG"):
        monkeypatch.delenv(name, raising=False)


def test_runtime_dict_precedence_over_paths(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(
        yaml.safe_dump({"default_profile": "file", "profiles": {"file": {"base_url": "https://file.example"}}}),
        encoding="utf-8",
    )

    cfg = load_config(
        {"default_profile": "runtime", "profiles": {"runtime": {"base_url": "https://runtime.example"}}},
        config_path=path,
    )

    assert cfg.source == "runtime-dict"
    assert cfg.data.default_profile == "runtime"


def test_explicit_path_precedence_over_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / "env.json"
    env_path.write_text(
        json.dumps({"default_profile": "env", "profiles": {"env": {"base_url": "https://env.example"}}}),
        encoding="utf-8",
    )

    explicit_path = tmp_path / "explicit.toml"
    explicit_path.write_text(
        'default_profile = "explicit"\n[profiles.explicit]\nbase_url = "https://explicit.example"\n',
        encoding="utf-8",
    )

    monkeypatch.setenv("BL_CONFIG", str(env_path))
    cfg = load_config(config_path=explicit_path)

    assert cfg.source == "explicit-path"
    assert cfg.data.default_profile == "explicit"
    assert cfg.data.profiles["explicit"].base_url == "https://explicit.example"


def test_env_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / "env.yml"
    env_path.write_text(
        yaml.safe_dump({"default_profile": "env", "profiles": {"env": {"base_url": "https://env.example"}}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("BL_CONFIG", str(env_path))

    cfg = load_config()
    assert cfg.source.startswith("env:")
    assert cfg.data.default_profile == "env"


def test_missing_files_yield_empty_config() -> None:
    cfg = load_config()

    assert cfg.source == "default-empty"
    assert cfg.data.profiles == {}


def test_invalid_profile_values_raise_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(yaml.safe_dump({"profiles": {"default": {"per_page": 0}}}), encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path=path)


def test_legacy_flat_schema_normalized_to_default_profile() -> None:
    cfg = SDKConfig.model_validate({"access-token": "abc123", "api-url": "https://legacy.example"})

    assert cfg.default_profile == "default"
    assert cfg.active_profile == "default"
    profile = cfg.profiles["default"]
    assert profile.access_token is not None
    assert profile.access_token.get_secret_value() == "abc123"
    assert profile.base_url == "https://legacy.example"


def test_extensionless_file_is_written_as_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / ".blconfig"
    cfg = SDKConfig.model_validate(
        {"default_profile": "prod", "profiles": {"prod": {"accessToken": "token-123"}}}
    )

    save_config(cfg, path=config_path)

    rendered = config_path.read_text(encoding="utf-8")
    assert "default_profile: prod" in rendered
    assert "token-123" in rendered
    loaded = load_config(config_path=config_path)
    assert loaded.data.default_profile == "prod"


def test_saved_config_is_private(tmp_path: Path) -> None:
    target = save_config(SDKConfig(), path=tmp_path / "config.json")

    assert stat.S_IMODE(target.stat().st_mode) == 0o600


def test_legacy_path_is_migrated_to_new_default() -> None:
    legacy = legacy_config_path()
    legacy.parent.mkdir(parents=True, exist_ok=True)
    legacy.write_text("access-token: token-123\n", encoding="utf-8")

    resolved = load_config()

    assert resolved.source == "legacy-migrated"
    token = resolved.data.profiles["default"].access_token
    assert token is not None
    assert token.get_secret_value() == "token-123"
    assert default_config_candidates()[0].exists()


def test_profile_manager_round_trip(tmp_path: Path) -> None:
    manager = ProfileManager(tmp_path / "config.yml")

    manager.upsert_profile("prod", ProfileConfig(access_token="prod-token"))
    manager.upsert_profile("dev", ProfileConfig(access_token="dev-token", per_page=20))

    assert manager.list_profiles() == ["dev", "prod"]
    assert manager.load().active_profile == "prod"

    manager.set_active_profile("dev")
    assert manager.get_profile().per_page == 20

    manager.delete_profile("dev")
    assert manager.list_profiles() == ["prod"]
    assert manager.load().active_profile == "prod"


def test_profile_manager_upsert_keeps_unspecified_fields(tmp_path: Path) -> None:
    manager = ProfileManager(tmp_path / "config.yml")
    manager.upsert_profile("default", ProfileConfig(access_token="first", base_url="https://custom.example"))

    manager.upsert_profile("default", ProfileConfig(access_token="second"))

    profile = manager.get_profile("default")
    assert profile.base_url == "https://custom.example"
    assert profile.access_token is not None
    assert profile.access_token.get_secret_value() == "second"


def test_profile_manager_unknown_profile(tmp_path: Path) -> None:
    manager = ProfileManager(tmp_path / "config.yml")

    with pytest.raises(ConfigError, match="missing"):
        manager.set_active_profile("missing")


def test_profile_manager_rejects_invalid_merged_profile(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yml"
    manager = ProfileManager(config_file)
    manager.upsert_profile("default", ProfileConfig(access_token="first"))
    before = config_file.read_text(encoding="utf-8")

    with pytest.raises(ConfigError, match="per_page"):
        manager.upsert_profile("default", ProfileConfig.model_construct(per_page=0))

    assert config_file.read_text(encoding="utf-8") == before


def test_profile_manager_rejects_empty_name(tmp_path: Path) -> None:
    manager = ProfileManager(tmp_path / "config.yml")

    with pytest.raises(ConfigError, match="cannot be empty"):
        manager.upsert_profile(" ", ProfileConfig(access_token="token"))


def test_profile_manager_error_lists_known_profiles(tmp_path: Path) -> None:
    manager = ProfileManager(tmp_path / "config.yml")
    manager.upsert_profile("prod", ProfileConfig(access_token="prod-token"))

    with pytest.raises(ConfigError, match=r"known profiles: prod\); run 'bl configure --profile dev'"):
        manager.get_profile("dev")


def test_profile_manager_edits_migrated_legacy_config() -> None:
    legacy = legacy_config_path()
    legacy.parent.mkdir(parents=True, exist_ok=True)
    legacy.write_text("access-token: legacy-token\napi-url: https://legacy.example\n", encoding="utf-8")
    manager = ProfileManager()

    manager.upsert_profile("default", ProfileConfig(per_page=25))

    profile = manager.get_profile("default")
    assert profile.per_page == 25
    assert profile.base_url == "https://legacy.example"
    assert profile.access_token is not None
    assert profile.access_token.get_secret_value() == "legacy-token"
    assert manager.path == default_config_candidates()[0].resolve()
