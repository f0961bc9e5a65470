from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from blcli.errors import InvalidArgumentError, RequestError
from blcli.models.common import Links, ListOptions, Meta, Page
from blcli.pagination import paginate

M = TypeVar("M", bound=BaseModel)


def require_name(argument: str, value: str | None) -> str:
    if not value:
        raise InvalidArgumentError(argument, "cannot be an empty string")
    return value


def require_id(argument: str, value: int | None) -> int:
    if value is None or value < 1:
        raise InvalidArgumentError(argument, "cannot be less than 1")
    return value


def require_payload(argument: str, value: Any) -> Any:
    if value is None:
        raise InvalidArgumentError(argument, "cannot be nil")
    return value


def require_items(argument: str, values: Sequence[Any]) -> list[Any]:
    if not values:
        raise InvalidArgumentError(argument, "must contain at least one value")
    return list(values)


def parse_resource(model: type[M], value: Any, *, label: str) -> M:
    """Validate one resource from a response body, keeping failures inside `RequestError`."""

    if value is None:
        raise RequestError(f"unexpected response: no '{label}' object in the body")
    if not isinstance(value, Mapping):
        raise RequestError(f"unexpected {label} payload: expected an object, got {type(value).__name__}")
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise RequestError(f"unexpected {label} payload: {exc}") from exc


class ServiceBase:
    """Base type for service classes bound to a client instance."""

    def __init__(self, client: Any) -> None:
        self._client = client

    async def _get_one(self, path: str, root_key: str, model: type[M]) -> M:
        data = await self._client._request_json("GET", path)
        return parse_resource(model, data.get(root_key), label=root_key)

    async def _send_one(
        self,
        method: str,
        path: str,
        root_key: str,
        model: type[M],
        payload: Mapping[str, Any],
    ) -> M:
        data = await self._client._request_json(method, path, json_data=payload)
        return parse_resource(model, data.get(root_key), label=root_key)

    async def _delete(self, path: str, *, params: Mapping[str, str] | None = None) -> None:
        await self._client._request_json("DELETE", path, params=params)

    async def _list_page(
        self,
        path: str,
        root_key: str,
        model: type[M],
        options: ListOptions,
        *,
        params: Mapping[str, str] | None = None,
    ) -> Page[M]:
        query: dict[str, str | int] = dict(params or {})
        query.update(options.as_params())
        data = await self._client._request_json("GET", path, params=query)
        raw_items = data.get(root_key) or []
        if not isinstance(raw_items, list):
            raise RequestError(f"unexpected {root_key} payload: expected a list, got {type(raw_items).__name__}")
        items = [parse_resource(model, item, label=root_key) for item in raw_items]
        links = parse_resource(Links, data.get("links") or {}, label="links")
        meta = parse_resource(Meta, data["meta"], label="meta") if data.get("meta") is not None else None
        return Page(items=items, links=links, meta=meta)

    async def _collect(
        self,
        path: str,
        root_key: str,
        model: type[M],
        *,
        params: Mapping[str, str] | None = None,
    ) -> list[M]:
        async def fetch(options: ListOptions) -> Page[M]:
            return await self._list_page(path, root_key, model, options, params=params)

        return await paginate(fetch, per_page=self._client.per_page, max_pages=self._client.max_pages)
