from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from blcli.errors import InvalidArgumentError
from blcli.models.actions import Action
from blcli.services.base import ServiceBase, require_id


def _parse_time(argument: str, value: str) -> datetime:
    """Parse an ISO 8601 timestamp; values without an offset are taken as UTC."""

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidArgumentError(argument, f"'{value}' is not an ISO 8601 timestamp") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def filter_actions(
    actions: Iterable[Action],
    *,
    resource_type: str | None = None,
    region: str | None = None,
    status: str | None = None,
    action_type: str | None = None,
    after: str | None = None,
    before: str | None = None,
) -> list[Action]:
    """Filter actions client-side; `after`/`before` compare completion time."""

    after_at = _parse_time("after", after) if after else None
    before_at = _parse_time("before", before) if before else None

    selected: list[Action] = []
    for action in actions:
        if resource_type and action.resource_type != resource_type:
            continue
        if region and action.region_slug != region:
            continue
        if status and action.status != status:
            continue
        if action_type and action.type != action_type:
            continue
        if after_at or before_at:
            if not action.completed_at:
                continue
            completed = _parse_time("completed_at", action.completed_at)
            if after_at and completed <= after_at:
                continue
            if before_at and completed >= before_at:
                continue
        selected.append(action)
    return selected


class ActionsService(ServiceBase):
    """Account action history."""

    async def list(self) -> list[Action]:
        return await self._collect("/v2/actions", "actions", Action)

    async def get(self, action_id: int) -> Action:
        require_id("id", action_id)
        return await self._get_one(f"/v2/actions/{action_id}", "action", Action)
