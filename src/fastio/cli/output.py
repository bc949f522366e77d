"""CLI output formatting utilities."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias, cast

from fastio.lib.formatting import FormatContext, TextFormattable
from fastio.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json", "porcelain"]
JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

_DEFAULT_FORMAT_CTX = FormatContext()


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


def _to_json_value(value: Any) -> JSONValue:
    return cast("JSONValue", to_jsonable(value))


def normalize_output_format(
    *,
    requested: str | None,
    json_mode: bool,
    porcelain_mode: bool,
) -> OutputFormat:
    """Resolve the final output format from flags; text is the default."""

    if json_mode:
        return "json"
    if porcelain_mode:
        return "porcelain"

    if requested is None or requested == "":
        return "text"

    normalized = requested.strip().lower()
    if normalized in {"text", "json", "porcelain"}:
        return cast("OutputFormat", normalized)
    raise SystemExit("--format must be one of: text, json, porcelain")


def _porcelain_value(value: JSONValue) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    # Escape separators so one payload always stays on one line.
    return str(value).replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n")


def _porcelain_line(payload: dict[str, JSONValue]) -> str:
    return "\t".join(f"{key}={_porcelain_value(payload[key])}" for key in sorted(payload))


def emit(value: Any, config: OutputConfig) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(json.dumps(_to_json_value(value), sort_keys=True))
        return
    if config.format == "porcelain":
        payload = _to_json_value(value)
        if isinstance(payload, dict):
            print(_porcelain_line(cast("dict[str, JSONValue]", payload)))
        else:
            print(payload)
        return
    if isinstance(value, TextFormattable):
        sys.stdout.write(value.format_text(_DEFAULT_FORMAT_CTX) + "\n")
    else:
        print(json.dumps(_to_json_value(value), sort_keys=True, indent=2))
