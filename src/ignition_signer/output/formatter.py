"""Output dispatcher — renders data in table, JSON, or YAML format."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from ignition_signer.output.tables import kv_table

console = Console()


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    if hasattr(data, "to_document"):
        data = data.to_document()
    elif hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    console.print_json(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    if hasattr(data, "to_document"):
        data = data.to_document()
    elif hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    console.print(
        yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        end="",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def output_table(data: Any, *, title: str | None = None) -> None:
    """Print data as a Rich table."""
    if isinstance(data, dict):
        console.print(kv_table(data, title=title))
    else:
        console.print(data)


def output(
    data: Any,
    fmt: str = "table",
    *,
    title: str | None = None,
) -> None:
    """Dispatch output to the appropriate formatter."""
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    else:
        output_table(data, title=title)
