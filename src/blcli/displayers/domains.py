from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer
from blcli.models.domains import Domain, DomainRecord


def _optional(value: int | None) -> int | str:
    return "" if value is None else value


class DomainDisplayer(ResourceDisplayer[Domain]):
    columns = ("Domain", "TTL")

    def row(self, item: Domain) -> dict[str, Any]:
        return {"Domain": item.name, "TTL": item.ttl}


class DomainRecordDisplayer(ResourceDisplayer[DomainRecord]):
    columns = ("ID", "Type", "Name", "Data", "Priority", "Port", "TTL", "Weight", "Flags", "Tag")

    def row(self, item: DomainRecord) -> dict[str, Any]:
        return {
            "ID": item.id,
            "Type": item.type,
            "Name": item.name,
            "Data": item.data,
            "Priority": _optional(item.priority),
            "Port": _optional(item.port),
            "TTL": item.ttl,
            "Weight": _optional(item.weight),
            "Flags": _optional(item.flags),
            "Tag": item.tag,
        }
