"""
object-graph-validator settings package public API.

File: src/object_graph_validator/config/__init__.py

Purpose
- Export settings loading/validation entrypoints and the load error type.

Functional requirements
- Support loading from ``object_graph_validator.toml`` + ``OGV_`` env overrides.
"""

from object_graph_validator.config.loader import (
    DEFAULT_SETTINGS_FILE,
    ENV_PREFIX,
    SettingsLoadError,
    dump_effective_settings,
    load_settings,
)
from object_graph_validator.config.schema import (
    DEFAULT_SETTINGS,
    LOG_FORMATS,
    LOG_LEVELS,
    SETTINGS_SCHEMA,
    ValidatorSettings,
    default_settings,
    merge_settings,
    validate_settings,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "DEFAULT_SETTINGS_FILE",
    "ENV_PREFIX",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "SETTINGS_SCHEMA",
    "SettingsLoadError",
    "ValidatorSettings",
    "default_settings",
    "dump_effective_settings",
    "load_settings",
    "merge_settings",
    "validate_settings",
]
