from __future__ import annotations

from blcli.models.common import BLModel, Region
from blcli.models.servers import Server
from blcli.patch import PatchRequest


class FloatingIP(BLModel):
    ip: str
    region: Region | None = None
    server: Server | None = None

    @property
    def urn(self) -> str:
        return f"bl:floatingip:{self.ip}"


class FloatingIPCreateRequest(PatchRequest):
    region: str | None = None
    server_id: int | None = None
