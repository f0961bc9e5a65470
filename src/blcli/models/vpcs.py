from __future__ import annotations

from pydantic import Field

from blcli.models.common import BLModel
from blcli.patch import PatchRequest


class VPC(BLModel):
    id: int
    name: str = ""
    description: str = ""
    ip_range: str = ""
    region: str = Field(default="", description="Region slug")
    created_at: str | None = None
    default: bool = False

    @property
    def urn(self) -> str:
        return f"bl:vpc:{self.id}"


class VPCCreateRequest(PatchRequest):
    name: str
    region: str
    description: str | None = None
    ip_range: str | None = None


class VPCUpdateRequest(PatchRequest):
    """Update (PUT) of a VPC's configuration."""

    name: str | None = None
    description: str | None = None
    default: bool | None = None


class VPCSetRequest(PatchRequest):
    """Partial update (PATCH) of individual VPC fields."""

    name: str | None = None
    description: str | None = None
    default: bool | None = None
