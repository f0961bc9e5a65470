from __future__ import annotations

from blcli.errors import InvalidArgumentError
from blcli.models.floating_ips import FloatingIP, FloatingIPCreateRequest
from blcli.services.base import ServiceBase, require_name, require_payload

_BASE = "/v2/floating_ips"


class FloatingIPsService(ServiceBase):
    """Floating IP operations, keyed by address."""

    async def list(self) -> list[FloatingIP]:
        return await self._collect(_BASE, "floating_ips", FloatingIP)

    async def get(self, ip: str) -> FloatingIP:
        require_name("ip", ip)
        return await self._get_one(f"{_BASE}/{ip}", "floating_ip", FloatingIP)

    async def create(self, request: FloatingIPCreateRequest) -> FloatingIP:
        require_payload("createRequest", request)
        if not request.region and not request.server_id:
            raise InvalidArgumentError("createRequest", "a region or a server id is required")
        return await self._send_one("POST", _BASE, "floating_ip", FloatingIP, request.to_payload())

    async def delete(self, ip: str) -> None:
        require_name("ip", ip)
        await self._delete(f"{_BASE}/{ip}")
