"""Stable constants shared across the validation engine."""

from __future__ import annotations

from typing import Final

# Integer ranges of the object graph value model.
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Path convention: "" is the root, every descent appends "/" + segment.
ROOT_PATH: Final[str] = ""
PATH_SEPARATOR: Final[str] = "/"

# Nested container bound; each level costs a few interpreter frames.
DEFAULT_MAX_DEPTH: Final[int] = 64
MAX_DEPTH_LIMIT: Final[int] = 200

LOGGER_NAME: Final[str] = "object_graph_validator"

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "LOGGER_NAME",
    "MAX_DEPTH_LIMIT",
    "PATH_SEPARATOR",
    "ROOT_PATH",
]
