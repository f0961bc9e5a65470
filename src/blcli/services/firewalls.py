from __future__ import annotations

from typing import Any

from blcli.models.firewalls import Firewall, FirewallRequest, FirewallRulesRequest
from blcli.services.base import ServiceBase, require_id, require_items, require_name, require_payload

_BASE = "/v2/firewalls"


class FirewallsService(ServiceBase):
    """Firewall CRUD plus server, tag and rule membership."""

    async def list(self) -> list[Firewall]:
        return await self._collect(_BASE, "firewalls", Firewall)

    async def list_by_server(self, server_id: int) -> list[Firewall]:
        require_id("server_id", server_id)
        return await self._collect(f"/v2/servers/{server_id}/firewalls", "firewalls", Firewall)

    async def get(self, firewall_id: str) -> Firewall:
        require_name("id", firewall_id)
        return await self._get_one(f"{_BASE}/{firewall_id}", "firewall", Firewall)

    async def create(self, request: FirewallRequest) -> Firewall:
        require_payload("createRequest", request)
        return await self._send_one("POST", _BASE, "firewall", Firewall, request.to_payload())

    async def update(self, firewall_id: str, request: FirewallRequest) -> Firewall:
        require_name("id", firewall_id)
        require_payload("updateRequest", request)
        return await self._send_one("PUT", f"{_BASE}/{firewall_id}", "firewall", Firewall, request.to_payload())

    async def delete(self, firewall_id: str) -> None:
        require_name("id", firewall_id)
        await self._delete(f"{_BASE}/{firewall_id}")

    async def add_servers(self, firewall_id: str, *server_ids: int) -> None:
        await self._members("POST", firewall_id, "servers", {"server_ids": self._server_ids(server_ids)})

    async def remove_servers(self, firewall_id: str, *server_ids: int) -> None:
        await self._members("DELETE", firewall_id, "servers", {"server_ids": self._server_ids(server_ids)})

    async def add_tags(self, firewall_id: str, *tags: str) -> None:
        await self._members("POST", firewall_id, "tags", {"tags": require_items("tags", tags)})

    async def remove_tags(self, firewall_id: str, *tags: str) -> None:
        await self._members("DELETE", firewall_id, "tags", {"tags": require_items("tags", tags)})

    async def add_rules(self, firewall_id: str, request: FirewallRulesRequest) -> None:
        require_payload("rulesRequest", request)
        await self._members("POST", firewall_id, "rules", request.to_payload())

    async def remove_rules(self, firewall_id: str, request: FirewallRulesRequest) -> None:
        require_payload("rulesRequest", request)
        await self._members("DELETE", firewall_id, "rules", request.to_payload())

    @staticmethod
    def _server_ids(server_ids: tuple[int, ...]) -> list[int]:
        ids = require_items("server_ids", server_ids)
        for server_id in ids:
            require_id("server_id", server_id)
        return ids

    async def _members(self, method: str, firewall_id: str, kind: str, payload: dict[str, Any]) -> None:
        require_name("id", firewall_id)
        await self._client._request_json(method, f"{_BASE}/{firewall_id}/{kind}", json_data=payload)
