from __future__ import annotations

from pydantic import Field

from blcli.models.common import BLModel
from blcli.patch import PatchRequest


class Sources(BLModel):
    addresses: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    server_ids: list[int] = Field(default_factory=list)
    load_balancer_uids: list[str] = Field(default_factory=list)


class Destinations(BLModel):
    addresses: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    server_ids: list[int] = Field(default_factory=list)
    load_balancer_uids: list[str] = Field(default_factory=list)


def _describe_targets(protocol: str, ports: str, targets: Sources | Destinations | None) -> str:
    parts = [f"protocol:{protocol}", f"ports:{ports}"]
    if targets is not None:
        parts.extend(f"address:{value}" for value in targets.addresses)
        parts.extend(f"tag:{value}" for value in targets.tags)
        parts.extend(f"server_id:{value}" for value in targets.server_ids)
        parts.extend(f"load_balancer_uid:{value}" for value in targets.load_balancer_uids)
    return ",".join(parts)


class InboundRule(BLModel):
    protocol: str = ""
    ports: str = ""
    sources: Sources | None = None

    def describe(self) -> str:
        return _describe_targets(self.protocol, self.ports, self.sources)


class OutboundRule(BLModel):
    protocol: str = ""
    ports: str = ""
    destinations: Destinations | None = None

    def describe(self) -> str:
        return _describe_targets(self.protocol, self.ports, self.destinations)


class PendingChange(BLModel):
    server_id: int = 0
    removing: bool = False
    status: str = ""


class Firewall(BLModel):
    id: str
    name: str = ""
    status: str = ""
    inbound_rules: list[InboundRule] = Field(default_factory=list)
    outbound_rules: list[OutboundRule] = Field(default_factory=list)
    server_ids: list[int] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    created_at: str | None = None
    pending_changes: list[PendingChange] = Field(default_factory=list)


class FirewallRequest(PatchRequest):
    name: str | None = None
    inbound_rules: list[InboundRule] | None = None
    outbound_rules: list[OutboundRule] | None = None
    server_ids: list[int] | None = None
    tags: list[str] | None = None


class FirewallRulesRequest(PatchRequest):
    inbound_rules: list[InboundRule] | None = None
    outbound_rules: list[OutboundRule] | None = None
