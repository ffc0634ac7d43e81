"""Generate JSON Schema and docs for the run config YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from unitlane.config import RunConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return RunConfig.model_json_schema(by_alias=True)


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _describe(props: dict) -> list[str]:
    lines = []
    for key, prop in props.items():
        kind = prop.get("type")
        if kind is None and "anyOf" in prop:
            kind = " | ".join(p.get("type", "object") for p in prop["anyOf"])
        if kind is None and "$ref" in prop:
            kind = "object"
        default = prop.get("default")
        suffix = f" (default: {json.dumps(default)})" if default is not None else ""
        lines.append(f"- `{key}`: {kind}{suffix}")
    return lines


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})

    lines: list[str] = []
    lines.append("# unitlane YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Top-level keys")
    lines.extend(_describe(schema.get("properties", {})))
    lines.append("")
    lines.append("Suites are `module:function` references; each function receives")
    lines.append("the engine and registers its tests.")
    lines.append("")
    lines.append("## Report")
    lines.extend(_describe(defs.get("ReportConfig", {}).get("properties", {})))
    lines.append("")
    lines.append("Output paths expand `${VAR}` and `${VAR:-default}` and are resolved")
    lines.append("relative to the config file.")
    lines.append("")
    lines.append("## Colors")
    lines.extend(_describe(defs.get("ColorConfig", {}).get("properties", {})))
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
