from __future__ import annotations

from blcli.models.common import BLModel, Region


class Action(BLModel):
    id: int
    status: str = ""
    type: str = ""
    started_at: str | None = None
    completed_at: str | None = None
    resource_id: int = 0
    resource_type: str = ""
    region: Region | None = None
    region_slug: str = ""
