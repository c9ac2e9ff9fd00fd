"""
object-graph-validator — settings schema and validation.

File: src/object_graph_validator/config/schema.py

Purpose
- Define the authoritative settings defaults and validate settings payloads
  with the library's own schema nodes.

What should be included in this file
- ``DEFAULT_SETTINGS`` for the ``engine`` and ``observability`` sections.
- ``SETTINGS_SCHEMA`` describing every accepted key, type and bound.
- Deterministic deep-merge helpers used by the loader.
- ``ValidatorSettings``: the typed, validated view of a settings payload.

Functional requirements
- Unknown keys, wrong types and out-of-range values fail with a
  ``ValidateError`` located at the offending path.

Non-functional requirements
- Keep rules deterministic and easy to audit.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Literal, NotRequired, TypedDict

from object_graph_validator.constants import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT
from object_graph_validator.engine.validator import validate
from object_graph_validator.schema.nodes import (
    BoolType,
    EnumOf,
    Int32Type,
    Length,
    MapType,
    OptionalMarker,
    Range,
    Required,
    StringType,
)

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS: Final[tuple[str, ...]] = ("json", "text")


class EngineSettings(TypedDict):
    max_depth: int
    allow_extra_keys: bool


class ObservabilitySettings(TypedDict):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_format: Literal["json", "text"]
    log_file: NotRequired[str | None]
    redact_values: bool


class SettingsPayload(TypedDict):
    engine: EngineSettings
    observability: ObservabilitySettings


DEFAULT_SETTINGS: Final[SettingsPayload] = {
    "engine": {
        "max_depth": DEFAULT_MAX_DEPTH,
        "allow_extra_keys": False,
    },
    "observability": {
        "log_level": "INFO",
        "log_format": "json",
        "log_file": None,
        "redact_values": True,
    },
}

SETTINGS_SCHEMA: Final[MapType] = MapType(
    {
        "engine": Required(
            MapType(
                {
                    "max_depth": Required(Range(Int32Type(), min=1, max=MAX_DEPTH_LIMIT)),
                    "allow_extra_keys": Required(BoolType()),
                }
            )
        ),
        "observability": Required(
            MapType(
                {
                    "log_level": Required(EnumOf(StringType(), *LOG_LEVELS)),
                    "log_format": Required(EnumOf(StringType(), *LOG_FORMATS)),
                    "log_file": OptionalMarker(Length(StringType(), min=1)),
                    "redact_values": Required(BoolType()),
                }
            )
        ),
    }
)


@dataclass(frozen=True, slots=True)
class ValidatorSettings:
    """Validated runtime settings."""

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_extra_keys: bool = False
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: str | None = None
    redact_values: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return the nested payload form accepted by ``validate_settings``."""

        return {
            "engine": {
                "max_depth": self.max_depth,
                "allow_extra_keys": self.allow_extra_keys,
            },
            "observability": {
                "log_level": self.log_level,
                "log_format": self.log_format,
                "log_file": self.log_file,
                "redact_values": self.redact_values,
            },
        }


def default_settings() -> SettingsPayload:
    """Return a deep copy of the built-in defaults."""

    return copy.deepcopy(DEFAULT_SETTINGS)


def merge_settings(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deterministically deep-merge ``overlay`` onto ``base``."""

    merged = _deep_copy_mapping(base)
    _merge_into(merged, overlay)
    return merged


def validate_settings(payload: Mapping[str, object]) -> ValidatorSettings:
    """Validate a full settings payload and return its typed view.

    Raises ``ValidateError`` for the first offending key.
    """

    normalized = validate(SETTINGS_SCHEMA, payload)
    engine = normalized["engine"]
    observability = normalized["observability"]
    return ValidatorSettings(
        max_depth=engine["max_depth"],
        allow_extra_keys=engine["allow_extra_keys"],
        log_level=observability["log_level"],
        log_format=observability["log_format"],
        log_file=observability.get("log_file"),
        redact_values=observability["redact_values"],
    )


def _merge_into(target: dict[str, Any], overlay: Mapping[str, object]) -> None:
    for key in sorted(overlay):
        value = overlay[key]
        if isinstance(value, Mapping):
            existing = target.get(key)
            if isinstance(existing, dict):
                _merge_into(existing, value)
            else:
                nested: dict[str, Any] = {}
                _merge_into(nested, value)
                target[key] = nested
        else:
            target[key] = _deep_copy_value(value)


def _deep_copy_mapping(value: Mapping[str, object]) -> dict[str, Any]:
    return {key: _deep_copy_value(value[key]) for key in sorted(value)}


def _deep_copy_value(value: object) -> Any:
    if isinstance(value, Mapping):
        return {key: _deep_copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_deep_copy_value(item) for item in value]
    return copy.deepcopy(value)


__all__ = [
    "DEFAULT_SETTINGS",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "SETTINGS_SCHEMA",
    "EngineSettings",
    "ObservabilitySettings",
    "SettingsPayload",
    "ValidatorSettings",
    "default_settings",
    "merge_settings",
    "validate_settings",
]
