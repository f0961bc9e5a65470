from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any, Literal

import yaml
from rich.console import Console
from rich.table import Table

from blcli.displayers.base import Displayable
from blcli.errors import DisplayError
from blcli.utils.serialization import to_plain_data

OutputFormat = Literal["text", "json", "yaml"]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def select_columns(displayer: Displayable, columns: Sequence[str] | None) -> list[str]:
    """Validate a caller-chosen column subset against the displayer's columns."""

    available = displayer.cols()
    if not columns:
        return available
    unknown = [name for name in columns if name not in available]
    if unknown:
        raise DisplayError(f"unknown column(s) {', '.join(unknown)}; expected any of {', '.join(available)}")
    return list(columns)


def _emit_table(
    displayer: Displayable,
    *,
    columns: Sequence[str] | None,
    no_header: bool,
    console: Console,
) -> None:
    selected = select_columns(displayer, columns)
    headers = displayer.col_map()
    table = Table(show_header=not no_header, header_style="bold", box=None, pad_edge=False)
    for name in selected:
        table.add_column(headers.get(name, name))
    for row in displayer.kv():
        table.add_row(*[_cell(row.get(name)) for name in selected])
    console.print(table)


def emit(
    value: Any,
    *,
    output: OutputFormat = "text",
    columns: Sequence[str] | None = None,
    no_header: bool = False,
    console: Console | None = None,
) -> None:
    """Render CLI output.

    Displayers render as a table, json or yaml. Plain values (profiles,
    config) have no columns, so `text` falls back to json for them.
    """

    if isinstance(value, Displayable):
        if output == "json":
            print(value.to_json())
            return
        if output == "yaml":
            print(yaml.safe_dump(value.to_plain(), sort_keys=False), end="")
            return
        _emit_table(value, columns=columns, no_header=no_header, console=console or Console())
        return

    plain = to_plain_data(value)
    if output == "yaml":
        print(yaml.safe_dump(plain, sort_keys=False), end="")
        return
    print(json.dumps(plain, indent=2))
