from blcli.client import AsyncBinaryLaneClient, BinaryLaneClient
from blcli.config.models import ProfileConfig, SDKConfig
from blcli.errors import (
    APIError,
    AuthError,
    BLCLIError,
    ConfigError,
    DisplayError,
    InvalidArgumentError,
    PaginationExhaustedError,
    RequestError,
)
from blcli.pagination import paginate
from blcli.patch import PatchRequest, build_patch

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APIError",
    "AsyncBinaryLaneClient",
    "AuthError",
    "BLCLIError",
    "BinaryLaneClient",
    "ConfigError",
    "DisplayError",
    "InvalidArgumentError",
    "PaginationExhaustedError",
    "PatchRequest",
    "ProfileConfig",
    "RequestError",
    "SDKConfig",
    "build_patch",
    "paginate",
]
