from __future__ import annotations

from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, SecretStr

JsonLike = dict[str, Any] | list[Any] | str | int | float | bool | None


def mask_secret(value: SecretStr | str | None) -> str | None:
    """Show only the last four characters of a token."""

    if value is None:
        return None
    raw = value.get_secret_value() if isinstance(value, SecretStr) else value
    if not raw:
        return None
    return f"****{raw[-4:]}" if len(raw) > 8 else "****"


def to_plain_data(value: Any) -> JsonLike:
    """Convert pydantic/dataclass/native objects into plain JSON-serializable structures.

    Secrets are masked, never revealed.
    """

    if isinstance(value, SecretStr):
        return mask_secret(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if is_dataclass(value) and not isinstance(value, type):
        return to_plain_data(asdict(value))
    if isinstance(value, dict):
        return {str(key): to_plain_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain_data(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted(to_plain_data(item) for item in value)
    if isinstance(value, Path):
        return str(value)
    return cast(JsonLike, value)
