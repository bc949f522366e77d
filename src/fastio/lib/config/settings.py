"""Project-level formatting config loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

from fastio.lib.config._paths import config_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Settings consumed by `Formatter`."""

    max_args: int = 16
    float_format: str = ""
    cache_size: int = 256


@dataclass(frozen=True, slots=True)
class PrintConfig:
    """Separator and line terminator for the print wrappers."""

    separator: str = " "
    end: str = "\n"


@dataclass(frozen=True, slots=True)
class FastioConfig:
    """Resolved configuration for fastio."""

    format: FormatConfig = FormatConfig()
    printing: PrintConfig = PrintConfig()


_FORMAT_KEYS: dict[str, str] = {
    "max_args": "int",
    "float_format": "spec",
    "cache_size": "int",
}

_PRINT_KEYS: dict[str, str] = {
    "separator": "text",
    "end": "text",
}

_ENV_OVERRIDE_MAP: dict[str, tuple[str, str]] = {
    "FASTIO_MAX_ARGS": ("format", "max_args"),
    "FASTIO_FLOAT_FORMAT": ("format", "float_format"),
    "FASTIO_CACHE_SIZE": ("format", "cache_size"),
    "FASTIO_PRINT_SEPARATOR": ("print", "separator"),
    "FASTIO_PRINT_END": ("print", "end"),
}

_SECTION_KEYS: dict[str, dict[str, str]] = {
    "format": _FORMAT_KEYS,
    "print": _PRINT_KEYS,
}

_INT_MINIMUMS: dict[str, int] = {
    "max_args": 1,
    "cache_size": 0,
}


def _check_float_format(spec: str, source: str) -> str:
    try:
        format(0.5, spec)
    except ValueError as error:
        raise ValueError(
            f"Invalid value for '{source}': {spec!r} is not a float format spec."
        ) from error
    return spec


def _check_int_range(*, key: str, value: int, source: str) -> int:
    minimum = _INT_MINIMUMS[key]
    if value < minimum:
        raise ValueError(
            f"Invalid value for '{source}': expected int >= {minimum}, got {value!r}."
        )
    return value


def _coerce_file_value(*, key: str, expected: str, raw_value: object, source: str) -> object:
    if expected == "int":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return _check_int_range(key=key, value=raw_value, source=source)

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if expected == "spec":
        return _check_float_format(raw_value.strip(), source)
    # Separators and terminators are taken verbatim; whitespace is meaningful.
    return raw_value


def _coerce_env_value(*, key: str, expected: str, raw_value: str, env_name: str) -> object:
    if expected == "int":
        try:
            value = int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error
        return _check_int_range(key=key, value=value, source=env_name)

    if expected == "spec":
        return _check_float_format(raw_value.strip(), env_name)
    return raw_value


def _default_values() -> dict[str, dict[str, object]]:
    defaults = FastioConfig()
    return {
        "format": {
            field.name: getattr(defaults.format, field.name) for field in fields(FormatConfig)
        },
        "print": {
            field.name: getattr(defaults.printing, field.name) for field in fields(PrintConfig)
        },
    }


def _apply_toml_payload(
    *,
    values: dict[str, dict[str, object]],
    payload: dict[str, object],
    path: Path,
) -> None:
    for section, raw_section in payload.items():
        section_keys = _SECTION_KEYS.get(section)
        if section_keys is None:
            logger.warning("Ignoring unknown fastio config key '%s'.", section)
            continue
        if not isinstance(raw_section, dict):
            raise ValueError(f"Invalid value for '{section}' in '{path}': expected table.")

        for key, raw_value in cast("dict[str, object]", raw_section).items():
            expected = section_keys.get(key)
            if expected is None:
                logger.warning("Ignoring unknown fastio config key '%s.%s'.", section, key)
                continue
            values[section][key] = _coerce_file_value(
                key=key,
                expected=expected,
                raw_value=raw_value,
                source=f"{section}.{key}",
            )


def _apply_env_overrides(values: dict[str, dict[str, object]]) -> None:
    for env_name, (section, key) in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[section][key] = _coerce_env_value(
            key=key,
            expected=_SECTION_KEYS[section][key],
            raw_value=raw_value,
            env_name=env_name,
        )


def _build_config(values: dict[str, dict[str, object]]) -> FastioConfig:
    format_values = values["format"]
    print_values = values["print"]
    return FastioConfig(
        format=FormatConfig(
            max_args=cast("int", format_values["max_args"]),
            float_format=cast("str", format_values["float_format"]),
            cache_size=cast("int", format_values["cache_size"]),
        ),
        printing=PrintConfig(
            separator=cast("str", print_values["separator"]),
            end=cast("str", print_values["end"]),
        ),
    )


def load_config(root: Path) -> FastioConfig:
    """Load `.fastio/config.toml` under *root* and apply environment overrides."""

    values = _default_values()
    path = config_path(root)
    if path.is_file():
        logger.debug("Loading fastio config from %s", path)
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, payload=payload, path=path)

    _apply_env_overrides(values)
    return _build_config(values)
