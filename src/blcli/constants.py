from __future__ import annotations

DEFAULT_BASE_URL = "https://api.binarylane.com.au"
DEFAULT_CONFIG_DIR = "~/.config/blcli"
DEFAULT_CONFIG_FILE = f"{DEFAULT_CONFIG_DIR}/config.yml"
DEFAULT_LEGACY_CONFIG_FILE = "~/.config/bl/config.yaml"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_PER_PAGE = 200
DEFAULT_MAX_PAGES = 1000

USER_AGENT = "blcli/0.1.0"
