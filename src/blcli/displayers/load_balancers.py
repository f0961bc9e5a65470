from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer, slug_of
from blcli.models.load_balancers import LoadBalancer


class LoadBalancerDisplayer(ResourceDisplayer[LoadBalancer]):
    columns = (
        "ID",
        "IP",
        "Name",
        "Status",
        "Created",
        "Algorithm",
        "Region",
        "Size",
        "VPCID",
        "Tag",
        "ServerIDs",
        "SSL",
        "StickySessions",
        "HealthCheck",
        "ForwardingRules",
    )
    headers = {
        "Created": "Created At",
        "VPCID": "VPC ID",
        "ServerIDs": "Server IDs",
        "StickySessions": "Sticky Sessions",
        "HealthCheck": "Health Check",
        "ForwardingRules": "Forwarding Rules",
    }

    def row(self, item: LoadBalancer) -> dict[str, Any]:
        return {
            "ID": item.id,
            "IP": item.ip,
            "Name": item.name,
            "Status": item.status,
            "Created": item.created_at or "",
            "Algorithm": item.algorithm,
            "Region": slug_of(item.region),
            "Size": item.size,
            "VPCID": item.vpc_id if item.vpc_id is not None else "",
            "Tag": item.tag,
            "ServerIDs": ",".join(str(server_id) for server_id in item.server_ids),
            "SSL": item.redirect_http_to_https,
            "StickySessions": item.sticky_sessions.describe() if item.sticky_sessions else "",
            "HealthCheck": item.health_check.describe() if item.health_check else "",
            "ForwardingRules": " ".join(rule.describe() for rule in item.forwarding_rules),
        }
