"""
object-graph-validator — runtime settings loader.

File: src/object_graph_validator/config/loader.py

Purpose
- Load effective settings from defaults, a TOML file, environment variables
  and explicit overrides.

What should be included in this file
- Precedence logic: overrides > env (OGV_) > file > defaults.
- TOML loading via ``tomllib``.
- Deterministic environment variable mapping and coercion.
- Deterministic JSON dump of effective settings.

Functional requirements
- Reject invalid settings through ``validate_settings``.
- A missing default file is not an error; a missing explicit file is.

Non-functional requirements
- Keep loading deterministic and reproducible.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Literal

from object_graph_validator.config.schema import (
    ValidatorSettings,
    default_settings,
    merge_settings,
    validate_settings,
)

DEFAULT_SETTINGS_FILE: Final[str] = "object_graph_validator.toml"
ENV_PREFIX: Final[str] = "OGV_"

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})

_ValueType = Literal["str", "int", "bool"]


@dataclass(frozen=True, slots=True)
class _Binding:
    path: tuple[str, ...]
    value_type: _ValueType


class SettingsLoadError(ValueError):
    """Raised when settings cannot be loaded or overrides cannot be coerced."""


def load_settings(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, object] | None = None,
) -> ValidatorSettings:
    """Load effective settings with precedence: overrides > env > file > defaults.

    ``overrides`` accepts nested mappings or dotted keys such as
    ``"engine.max_depth"``.
    """

    resolved_path = _resolve_settings_path(path)
    env_map = dict(os.environ if environ is None else environ)

    file_payload = _load_toml_file(resolved_path, required=path is not None)
    merged = merge_settings(default_settings(), file_payload)
    merged = merge_settings(merged, _collect_env_overrides(merged, env_map))
    merged = merge_settings(merged, _materialize_overrides(overrides or {}))
    return validate_settings(merged)


def dump_effective_settings(settings: ValidatorSettings) -> str:
    """Return deterministic JSON dump of effective settings."""

    return json.dumps(settings.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _resolve_settings_path(path: str | Path | None) -> Path:
    if path is None:
        return (Path.cwd() / DEFAULT_SETTINGS_FILE).resolve()
    return Path(path).expanduser().resolve()


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise SettingsLoadError(f"settings file not found: {path}")
        return {}

    try:
        with path.open("rb") as handle:
            parsed = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsLoadError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise SettingsLoadError(f"unable to read settings file {path}: {exc}") from exc

    return parsed


def _collect_env_overrides(
    settings: Mapping[str, object], environ: Mapping[str, str]
) -> dict[str, Any]:
    bindings = _build_bindings(settings)
    overrides: dict[str, Any] = {}
    for env_name in sorted(bindings):
        raw = environ.get(env_name)
        if raw is None:
            continue
        binding = bindings[env_name]
        _set_nested(overrides, binding.path, _coerce_env(raw, binding, env_name))
    return overrides


def _build_bindings(settings: Mapping[str, object]) -> dict[str, _Binding]:
    bindings: dict[str, _Binding] = {}
    for path, value in _iter_scalar_paths(settings):
        kind = _kind_for_value(value)
        if kind is None:
            continue
        bindings[_env_name_for_path(path)] = _Binding(path=path, value_type=kind)

    # Keys whose default is null still get a binding.
    optional = (_Binding(("observability", "log_file"), "str"),)
    for binding in optional:
        bindings.setdefault(_env_name_for_path(binding.path), binding)
    return bindings


def _iter_scalar_paths(
    payload: Mapping[str, object],
    prefix: tuple[str, ...] = (),
) -> list[tuple[tuple[str, ...], object]]:
    pairs: list[tuple[tuple[str, ...], object]] = []
    for key in sorted(payload):
        value = payload[key]
        path = (*prefix, key)
        if isinstance(value, Mapping):
            pairs.extend(_iter_scalar_paths(value, path))
        else:
            pairs.append((path, value))
    return pairs


def _kind_for_value(value: object) -> _ValueType | None:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, str):
        return "str"
    return None


def _coerce_env(raw: str, binding: _Binding, env_name: str) -> object:
    value = raw.strip()
    dotted = ".".join(binding.path)
    if binding.value_type == "str":
        return value
    if binding.value_type == "int":
        try:
            return int(value)
        except ValueError as exc:
            raise SettingsLoadError(f"{env_name} -> {dotted} must be an integer") from exc

    lowered = value.lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise SettingsLoadError(
        f"{env_name} -> {dotted} must be a boolean (true/false/1/0/yes/no/on/off)"
    )


def _materialize_overrides(overrides: Mapping[str, object]) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for key in sorted(overrides):
        value = overrides[key]
        if "." in key:
            path = tuple(part for part in key.split(".") if part)
            if not path:
                raise SettingsLoadError(f"invalid override key {key!r}")
            _set_nested(payload, path, value)
        else:
            payload = merge_settings(payload, {key: value})
    return payload


def _set_nested(target: dict[str, Any], path: tuple[str, ...], value: object) -> None:
    cursor = target
    for part in path[:-1]:
        next_node = cursor.get(part)
        if not isinstance(next_node, dict):
            next_node = {}
            cursor[part] = next_node
        cursor = next_node
    cursor[path[-1]] = value


def _env_name_for_path(path: tuple[str, ...]) -> str:
    return ENV_PREFIX + "_".join(part.upper() for part in path)


__all__ = [
    "DEFAULT_SETTINGS_FILE",
    "ENV_PREFIX",
    "SettingsLoadError",
    "dump_effective_settings",
    "load_settings",
]
