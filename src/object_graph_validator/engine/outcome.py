"""Explicit success/failure values returned by every node check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from object_graph_validator.domain.errors import ValidateError


@dataclass(frozen=True, slots=True)
class Valid:
    value: Any


@dataclass(frozen=True, slots=True)
class Invalid:
    error: ValidateError


Outcome: TypeAlias = Valid | Invalid


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of a top-level check; ``value`` is meaningful only when valid."""

    value: Any
    error: ValidateError | None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the normalized value or raise the recorded error."""

        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> ValidationResult:
        if isinstance(outcome, Invalid):
            return cls(value=None, error=outcome.error)
        return cls(value=outcome.value, error=None)


__all__ = ["Invalid", "Outcome", "Valid", "ValidationResult"]
