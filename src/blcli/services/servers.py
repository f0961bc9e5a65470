from __future__ import annotations

from blcli.models.actions import Action
from blcli.models.servers import Server, ServerCreateRequest
from blcli.services.base import ServiceBase, require_id, require_name, require_payload

_BASE = "/v2/servers"


class ServersService(ServiceBase):
    """Server lifecycle operations."""

    async def list(self) -> list[Server]:
        return await self._collect(_BASE, "servers", Server)

    async def list_by_tag(self, tag: str) -> list[Server]:
        require_name("tag", tag)
        return await self._collect(_BASE, "servers", Server, params={"tag_name": tag})

    async def get(self, server_id: int) -> Server:
        require_id("id", server_id)
        return await self._get_one(f"{_BASE}/{server_id}", "server", Server)

    async def create(self, request: ServerCreateRequest) -> Server:
        require_payload("createRequest", request)
        return await self._send_one("POST", _BASE, "server", Server, request.to_payload())

    async def delete(self, server_id: int) -> None:
        require_id("id", server_id)
        await self._delete(f"{_BASE}/{server_id}")

    async def delete_by_tag(self, tag: str) -> None:
        require_name("tag", tag)
        await self._delete(_BASE, params={"tag_name": tag})

    async def actions(self, server_id: int) -> list[Action]:
        require_id("id", server_id)
        return await self._collect(f"{_BASE}/{server_id}/actions", "actions", Action)
