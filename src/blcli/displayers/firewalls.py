from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer
from blcli.models.firewalls import Firewall


class FirewallDisplayer(ResourceDisplayer[Firewall]):
    columns = (
        "ID",
        "Name",
        "Status",
        "Created",
        "InboundRules",
        "OutboundRules",
        "ServerIDs",
        "Tags",
        "PendingChanges",
    )
    headers = {
        "Created": "Created At",
        "InboundRules": "Inbound Rules",
        "OutboundRules": "Outbound Rules",
        "ServerIDs": "Server IDs",
        "PendingChanges": "Pending Changes",
    }

    def row(self, item: Firewall) -> dict[str, Any]:
        pending = " ".join(
            f"server_id:{change.server_id},removing:{str(change.removing).lower()},status:{change.status}"
            for change in item.pending_changes
        )
        return {
            "ID": item.id,
            "Name": item.name,
            "Status": item.status,
            "Created": item.created_at or "",
            "InboundRules": " ".join(rule.describe() for rule in item.inbound_rules),
            "OutboundRules": " ".join(rule.describe() for rule in item.outbound_rules),
            "ServerIDs": ",".join(str(server_id) for server_id in item.server_ids),
            "Tags": ",".join(item.tags),
            "PendingChanges": pending,
        }
