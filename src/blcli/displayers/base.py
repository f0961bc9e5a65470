from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from blcli.errors import DisplayError
from blcli.utils.serialization import JsonLike, to_plain_data

M = TypeVar("M", bound=BaseModel)


@runtime_checkable
class Displayable(Protocol):
    """Anything that can be rendered as JSON or as a table."""

    def to_json(self) -> str: ...

    def to_plain(self) -> JsonLike: ...

    def cols(self) -> list[str]: ...

    def col_map(self) -> dict[str, str]: ...

    def kv(self) -> list[dict[str, Any]]: ...


class ResourceDisplayer(Generic[M]):
    """Displayer over a collection of resources of a single family.

    Subclasses declare `columns` (display order), optional `headers`
    overrides, and implement `row()` for one resource.
    """

    columns: ClassVar[tuple[str, ...]] = ()
    headers: ClassVar[dict[str, str]] = {}
    # Families the API only ever returns one of are written as a bare object.
    single_object: ClassVar[bool] = False

    def __init__(self, items: M | Iterable[M]) -> None:
        if isinstance(items, BaseModel):
            self.items: list[M] = [items]
        else:
            self.items = list(items)

    def to_plain(self) -> JsonLike:
        if self.single_object and len(self.items) == 1:
            return to_plain_data(self.items[0])
        return to_plain_data(self.items)

    def to_json(self) -> str:
        try:
            return json.dumps(self.to_plain(), indent=2)
        except (TypeError, ValueError) as exc:
            raise DisplayError(f"unable to encode {type(self).__name__} output as JSON: {exc}") from exc

    def cols(self) -> list[str]:
        return list(self.columns)

    def col_map(self) -> dict[str, str]:
        return {name: self.headers.get(name, name) for name in self.columns}

    def kv(self) -> list[dict[str, Any]]:
        return [self.row(item) for item in self.items]

    def row(self, item: M) -> dict[str, Any]:
        raise NotImplementedError


def slug_of(region: Any) -> str:
    """Region slug, or "" when the region is absent."""

    return region.slug if region is not None else ""
