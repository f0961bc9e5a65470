from __future__ import annotations

from blcli.models.common import Region
from blcli.services.base import ServiceBase


class RegionsService(ServiceBase):
    """Region API operations."""

    async def list(self) -> list[Region]:
        return await self._collect("/v2/regions", "regions", Region)
