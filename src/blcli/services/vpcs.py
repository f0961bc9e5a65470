from __future__ import annotations

from blcli.models.vpcs import VPC, VPCCreateRequest, VPCSetRequest, VPCUpdateRequest
from blcli.services.base import ServiceBase, require_id, require_payload


class VPCsService(ServiceBase):
    """Virtual private cloud CRUD operations."""

    async def list(self) -> list[VPC]:
        return await self._collect("/v2/vpcs", "vpcs", VPC)

    async def get(self, vpc_id: int) -> VPC:
        require_id("id", vpc_id)
        return await self._get_one(f"/v2/vpcs/{vpc_id}", "vpc", VPC)

    async def create(self, request: VPCCreateRequest) -> VPC:
        require_payload("createRequest", request)
        return await self._send_one("POST", "/v2/vpcs", "vpc", VPC, request.to_payload())

    async def update(self, vpc_id: int, request: VPCUpdateRequest) -> VPC:
        require_id("id", vpc_id)
        require_payload("updateRequest", request)
        return await self._send_one("PUT", f"/v2/vpcs/{vpc_id}", "vpc", VPC, request.to_payload())

    async def set(self, vpc_id: int, request: VPCSetRequest) -> VPC:
        """Patch only the fields set on `request`."""

        require_id("id", vpc_id)
        require_payload("setRequest", request)
        return await self._send_one("PATCH", f"/v2/vpcs/{vpc_id}", "vpc", VPC, request.to_payload())

    async def delete(self, vpc_id: int) -> None:
        require_id("id", vpc_id)
        await self._delete(f"/v2/vpcs/{vpc_id}")
