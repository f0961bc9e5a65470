from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer
from blcli.models.actions import Action


class ActionDisplayer(ResourceDisplayer[Action]):
    columns = ("ID", "Status", "Type", "StartedAt", "CompletedAt", "ResourceID", "ResourceType", "Region")
    headers = {
        "StartedAt": "Started At",
        "CompletedAt": "Completed At",
        "ResourceID": "Resource ID",
        "ResourceType": "Resource Type",
    }

    def row(self, item: Action) -> dict[str, Any]:
        region = item.region.slug if item.region is not None else item.region_slug
        return {
            "ID": item.id,
            "Status": item.status,
            "Type": item.type,
            "StartedAt": item.started_at or "",
            "CompletedAt": item.completed_at or "",
            "ResourceID": item.resource_id,
            "ResourceType": item.resource_type,
            "Region": region,
        }
