from blcli.config.loader import (
    CONFIG_PATH_ENVS,
    default_config_candidates,
    legacy_config_path,
    load_config,
    save_config,
)
from blcli.config.manager import ProfileManager
from blcli.config.models import ConfigInput, ProfileConfig, ResolvedConfig, SDKConfig

__all__ = [
    "CONFIG_PATH_ENVS",
    "ConfigInput",
    "ProfileConfig",
    "ProfileManager",
    "ResolvedConfig",
    "SDKConfig",
    "default_config_candidates",
    "legacy_config_path",
    "load_config",
    "save_config",
]
