from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer, slug_of
from blcli.models.servers import Server


class ServerDisplayer(ResourceDisplayer[Server]):
    columns = (
        "ID",
        "Name",
        "PublicIPv4",
        "PrivateIPv4",
        "PublicIPv6",
        "Memory",
        "VCPUs",
        "Disk",
        "Region",
        "Image",
        "VPCID",
        "Status",
        "Tags",
        "Features",
        "Volumes",
    )
    headers = {
        "PublicIPv4": "Public IPv4",
        "PrivateIPv4": "Private IPv4",
        "PublicIPv6": "Public IPv6",
        "VPCID": "VPC ID",
    }

    def row(self, item: Server) -> dict[str, Any]:
        image = ""
        if item.image is not None:
            image = f"{item.image.distribution} {item.image.name}".strip()
        return {
            "ID": item.id,
            "Name": item.name,
            "PublicIPv4": item.public_ipv4,
            "PrivateIPv4": item.private_ipv4,
            "PublicIPv6": item.public_ipv6,
            "Memory": item.memory,
            "VCPUs": item.vcpus,
            "Disk": item.disk,
            "Region": slug_of(item.region),
            "Image": image,
            "VPCID": item.vpc_id if item.vpc_id is not None else "",
            "Status": item.status,
            "Tags": ",".join(sorted(item.tags)),
            "Features": " ".join(item.features),
            "Volumes": " ".join(item.volume_ids),
        }
