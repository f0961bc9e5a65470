from __future__ import annotations

from urllib.parse import quote

from blcli.models.domains import Domain, DomainCreateRequest, DomainRecord, DomainRecordEditRequest
from blcli.services.base import ServiceBase, require_id, require_name, require_payload


def _domain_path(name: str) -> str:
    return f"/v2/domains/{quote(name, safe='')}"


class DomainsService(ServiceBase):
    """Domain and DNS record operations.

    Records are a nested resource keyed by (domain name, record id).
    """

    async def list(self) -> list[Domain]:
        return await self._collect("/v2/domains", "domains", Domain)

    async def get(self, name: str) -> Domain:
        require_name("name", name)
        return await self._get_one(_domain_path(name), "domain", Domain)

    async def create(self, request: DomainCreateRequest) -> Domain:
        require_payload("createRequest", request)
        return await self._send_one("POST", "/v2/domains", "domain", Domain, request.to_payload())

    async def delete(self, name: str) -> None:
        require_name("name", name)
        await self._delete(_domain_path(name))

    async def records(self, name: str) -> list[DomainRecord]:
        require_name("domain", name)
        return await self._collect(f"{_domain_path(name)}/records", "domain_records", DomainRecord)

    async def record(self, name: str, record_id: int) -> DomainRecord:
        require_name("domain", name)
        require_id("id", record_id)
        return await self._get_one(f"{_domain_path(name)}/records/{record_id}", "domain_record", DomainRecord)

    async def create_record(self, name: str, request: DomainRecordEditRequest) -> DomainRecord:
        require_name("domain", name)
        require_payload("createRequest", request)
        return await self._send_one(
            "POST",
            f"{_domain_path(name)}/records",
            "domain_record",
            DomainRecord,
            request.to_payload(),
        )

    async def edit_record(self, name: str, record_id: int, request: DomainRecordEditRequest) -> DomainRecord:
        require_name("domain", name)
        require_id("id", record_id)
        require_payload("editRequest", request)
        return await self._send_one(
            "PUT",
            f"{_domain_path(name)}/records/{record_id}",
            "domain_record",
            DomainRecord,
            request.to_payload(),
        )

    async def delete_record(self, name: str, record_id: int) -> None:
        require_name("domain", name)
        require_id("id", record_id)
        await self._delete(f"{_domain_path(name)}/records/{record_id}")
