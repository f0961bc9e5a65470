from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer
from blcli.models.common import Region


class RegionDisplayer(ResourceDisplayer[Region]):
    columns = ("Slug", "Name", "Available")

    def row(self, item: Region) -> dict[str, Any]:
        return {"Slug": item.slug, "Name": item.name, "Available": item.available}
