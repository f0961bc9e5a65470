from __future__ import annotations

from typing import ClassVar

from blcli.models.common import BLModel
from blcli.patch import PatchRequest


class Domain(BLModel):
    name: str
    ttl: int = 0
    zone_file: str = ""


class DomainRecord(BLModel):
    id: int
    type: str = ""
    name: str = ""
    data: str = ""
    priority: int | None = None
    port: int | None = None
    ttl: int = 0
    weight: int | None = None
    flags: int | None = None
    tag: str = ""


class DomainCreateRequest(PatchRequest):
    name: str
    ip_address: str | None = None


class DomainRecordEditRequest(PatchRequest):
    """Create/edit body for a DNS record.

    `priority`, `weight` and `flags` are always sent. `port` is only sent
    when supplied, so an SRV record can be given port 0 explicitly.
    """

    always_sent: ClassVar[frozenset[str]] = frozenset({"priority", "weight", "flags"})

    type: str | None = None
    name: str | None = None
    data: str | None = None
    priority: int = 0
    port: int | None = None
    ttl: int | None = None
    weight: int = 0
    flags: int = 0
    tag: str | None = None
