from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer
from blcli.models.vpcs import VPC


class VPCDisplayer(ResourceDisplayer[VPC]):
    columns = ("ID", "URN", "Name", "Description", "IPRange", "Region", "Created", "Default")
    headers = {"IPRange": "IP Range", "Created": "Created At"}

    def row(self, item: VPC) -> dict[str, Any]:
        return {
            "ID": item.id,
            "URN": item.urn,
            "Name": item.name,
            "Description": item.description,
            "IPRange": item.ip_range,
            "Region": item.region,
            "Created": item.created_at or "",
            "Default": item.default,
        }
