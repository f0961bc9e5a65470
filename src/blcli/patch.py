"""Sparse update payloads.

Update requests only carry the fields a caller actually supplied. Pydantic
tracks which fields were set at construction time, so an explicit ``0`` or
``""`` survives serialization while an untouched field never reaches the
wire. A request type may name fields that are always sent regardless.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from blcli.errors import InvalidArgumentError

P = TypeVar("P", bound="PatchRequest")


class PatchRequest(BaseModel):
    """Base type for request bodies that must not zero-fill absent fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    always_sent: ClassVar[frozenset[str]] = frozenset()

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        if self.always_sent:
            required = self.model_dump(mode="json", by_alias=True, include=set(self.always_sent))
            for key, value in required.items():
                payload.setdefault(key, value)
        return payload


def build_patch(request_type: type[P], **values: Any) -> P:
    """Build `request_type` from optional values, where `None` means "not supplied"."""

    supplied = {name: value for name, value in values.items() if value is not None}
    unknown = sorted(set(supplied) - set(request_type.model_fields))
    if unknown:
        raise InvalidArgumentError(", ".join(unknown), f"not a field of {request_type.__name__}")
    try:
        return request_type(**supplied)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or request_type.__name__
        raise InvalidArgumentError(field, str(error["msg"]).lower()) from exc
