"""Client entrypoints."""

from blcli.client.async_client import AsyncBinaryLaneClient
from blcli.client.sync_client import BinaryLaneClient

__all__ = [
    "AsyncBinaryLaneClient",
    "BinaryLaneClient",
]
