from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer, slug_of
from blcli.models.floating_ips import FloatingIP


class FloatingIPDisplayer(ResourceDisplayer[FloatingIP]):
    columns = ("IP", "Region", "ServerID", "ServerName")
    headers = {"ServerID": "Server ID", "ServerName": "Server Name"}

    def row(self, item: FloatingIP) -> dict[str, Any]:
        server_id = ""
        server_name = ""
        if item.server is not None:
            server_id = str(item.server.id)
            server_name = item.server.name
        return {
            "IP": item.ip,
            "Region": slug_of(item.region),
            "ServerID": server_id,
            "ServerName": server_name,
        }
