"""Per-call validation state threaded through the recursive descent."""

from __future__ import annotations

from dataclasses import dataclass

from object_graph_validator.constants import (
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_LIMIT,
    PATH_SEPARATOR,
    ROOT_PATH,
)


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Location, extra-key policy and container depth of the current node."""

    path: str = ROOT_PATH
    allow_extra_keys: bool = False
    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            raise TypeError(f"path must be a string, got {type(self.path).__name__}")
        if not isinstance(self.allow_extra_keys, bool):
            raise TypeError(
                f"allow_extra_keys must be a boolean, got {type(self.allow_extra_keys).__name__}"
            )
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise TypeError(f"max_depth must be an integer, got {type(self.max_depth).__name__}")
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}")

    @property
    def exhausted(self) -> bool:
        """True when a container here would exceed ``max_depth``."""

        return self.depth >= self.max_depth

    def child(self, segment: str | int) -> ValidationContext:
        return ValidationContext(
            path=join_path(self.path, segment),
            allow_extra_keys=self.allow_extra_keys,
            depth=self.depth + 1,
            max_depth=self.max_depth,
        )


def join_path(path: str, segment: str | int) -> str:
    """Extend ``path`` with a map key or zero-based list index."""

    return f"{path}{PATH_SEPARATOR}{segment}"


__all__ = ["ValidationContext", "join_path"]
