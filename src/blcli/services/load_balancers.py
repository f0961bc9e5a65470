from __future__ import annotations

from blcli.models.load_balancers import ForwardingRule, LoadBalancer, LoadBalancerRequest
from blcli.services.base import ServiceBase, require_id, require_items, require_payload

_BASE = "/v2/load_balancers"


class LoadBalancersService(ServiceBase):
    """Load balancer CRUD plus backend server and forwarding rule management."""

    async def list(self) -> list[LoadBalancer]:
        return await self._collect(_BASE, "load_balancers", LoadBalancer)

    async def get(self, lb_id: int) -> LoadBalancer:
        require_id("id", lb_id)
        return await self._get_one(f"{_BASE}/{lb_id}", "load_balancer", LoadBalancer)

    async def create(self, request: LoadBalancerRequest) -> LoadBalancer:
        require_payload("createRequest", request)
        return await self._send_one("POST", _BASE, "load_balancer", LoadBalancer, request.to_payload())

    async def update(self, lb_id: int, request: LoadBalancerRequest) -> LoadBalancer:
        require_id("id", lb_id)
        require_payload("updateRequest", request)
        return await self._send_one("PUT", f"{_BASE}/{lb_id}", "load_balancer", LoadBalancer, request.to_payload())

    async def delete(self, lb_id: int) -> None:
        require_id("id", lb_id)
        await self._delete(f"{_BASE}/{lb_id}")

    async def add_servers(self, lb_id: int, *server_ids: int) -> None:
        await self._servers("POST", lb_id, server_ids)

    async def remove_servers(self, lb_id: int, *server_ids: int) -> None:
        await self._servers("DELETE", lb_id, server_ids)

    async def add_forwarding_rules(self, lb_id: int, *rules: ForwardingRule) -> None:
        await self._forwarding_rules("POST", lb_id, rules)

    async def remove_forwarding_rules(self, lb_id: int, *rules: ForwardingRule) -> None:
        await self._forwarding_rules("DELETE", lb_id, rules)

    async def _servers(self, method: str, lb_id: int, server_ids: tuple[int, ...]) -> None:
        require_id("id", lb_id)
        ids = require_items("server_ids", server_ids)
        for server_id in ids:
            require_id("server_id", server_id)
        await self._client._request_json(method, f"{_BASE}/{lb_id}/servers", json_data={"server_ids": ids})

    async def _forwarding_rules(self, method: str, lb_id: int, rules: tuple[ForwardingRule, ...]) -> None:
        require_id("id", lb_id)
        require_items("forwarding_rules", rules)
        payload = {"forwarding_rules": [rule.model_dump(mode="json") for rule in rules]}
        await self._client._request_json(method, f"{_BASE}/{lb_id}/forwarding_rules", json_data=payload)
