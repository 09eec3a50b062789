"""Generate JSON Schema and docs for the config and facts snapshot formats."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel

from win11ready.config import CheckConfig, Thresholds
from win11ready.probes.base import HostFacts, OsInfo, ProcessorInfo


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    """Return the config schema and the snapshot schema in one document."""
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "win11ready",
        "config": CheckConfig.model_json_schema(),
        "snapshot": HostFacts.model_json_schema(),
    }


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")


def _field_lines(model: type[BaseModel]) -> list[str]:
    lines = []
    for name, field in model.model_fields.items():
        required = "required" if field.is_required() else "optional"
        default = "" if field.is_required() else f", default `{field.get_default()!r}`"
        lines.append(f"- `{name}`: {required}{default}")
    return lines


def generate_schema_doc() -> str:
    lines: list[str] = []
    lines.append("# win11ready file formats")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Config (`win11ready.yaml`)")
    lines.extend(_field_lines(CheckConfig))
    lines.append("")
    lines.append("### `thresholds`")
    lines.extend(_field_lines(Thresholds))
    lines.append("")
    lines.append("## Facts snapshot")
    lines.append("Every fact is optional; a missing fact fails its facet.")
    lines.extend(_field_lines(HostFacts))
    lines.append("")
    lines.append("### `processor`")
    lines.extend(_field_lines(ProcessorInfo))
    lines.append("")
    lines.append("### `os`")
    lines.extend(_field_lines(OsInfo))
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
