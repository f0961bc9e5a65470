from __future__ import annotations

from pydantic import Field

from blcli.models.common import BLModel, Region
from blcli.patch import PatchRequest


class NetworkV4(BLModel):
    ip_address: str = ""
    netmask: str = ""
    gateway: str = ""
    type: str = ""


class NetworkV6(BLModel):
    ip_address: str = ""
    netmask: int = 0
    gateway: str = ""
    type: str = ""


class Networks(BLModel):
    v4: list[NetworkV4] = Field(default_factory=list)
    v6: list[NetworkV6] = Field(default_factory=list)


class Image(BLModel):
    id: int | None = None
    name: str = ""
    distribution: str = ""
    slug: str | None = None


class Server(BLModel):
    id: int
    name: str = ""
    memory: int = 0
    vcpus: int = 0
    disk: int = 0
    region: Region | None = None
    image: Image | None = None
    size_slug: str = ""
    status: str = ""
    networks: Networks | None = None
    created_at: str | None = None
    tags: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    volume_ids: list[str] = Field(default_factory=list)
    vpc_id: int | None = None

    def _address(self, version: str, kind: str) -> str:
        if self.networks is None:
            return ""
        entries = self.networks.v4 if version == "v4" else self.networks.v6
        for entry in entries:
            if entry.type == kind:
                return entry.ip_address
        return ""

    @property
    def public_ipv4(self) -> str:
        return self._address("v4", "public")

    @property
    def private_ipv4(self) -> str:
        return self._address("v4", "private")

    @property
    def public_ipv6(self) -> str:
        return self._address("v6", "public")


class ServerCreateRequest(PatchRequest):
    name: str
    region: str
    size: str
    image: str
    ssh_keys: list[str] | None = None
    backups: bool | None = None
    ipv6: bool | None = None
    user_data: str | None = None
    tags: list[str] | None = None
    vpc_id: int | None = None
