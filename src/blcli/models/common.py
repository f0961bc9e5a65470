from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BLModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Region(BLModel):
    slug: str = ""
    name: str = ""
    sizes: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    available: bool = False


class Pages(BLModel):
    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None


class Links(BLModel):
    pages: Pages | None = None
    actions: list[dict[str, object]] = Field(default_factory=list)

    @property
    def next_page(self) -> int | None:
        """Page number carried by the `next` link, when it has one."""

        if self.pages is None or not self.pages.next:
            return None
        values = parse_qs(urlparse(self.pages.next).query).get("page")
        if not values:
            return None
        try:
            return int(values[0])
        except ValueError:
            return None

    @property
    def has_next(self) -> bool:
        return self.pages is not None and bool(self.pages.next)


class Meta(BLModel):
    total: int | None = None


@dataclass(slots=True)
class ListOptions:
    page: int = 1
    per_page: int = 200

    def as_params(self) -> dict[str, int]:
        return {"page": self.page, "per_page": self.per_page}


@dataclass(slots=True)
class Page(Generic[T]):
    """One page of a list response."""

    items: list[T]
    links: Links = field(default_factory=Links)
    meta: Meta | None = None
