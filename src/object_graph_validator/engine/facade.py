"""Schema bound to engine settings, with failure logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from object_graph_validator.constants import DEFAULT_MAX_DEPTH, ROOT_PATH
from object_graph_validator.engine.context import ValidationContext
from object_graph_validator.engine.validator import check
from object_graph_validator.schema.nodes import Schema, is_schema

if TYPE_CHECKING:
    from object_graph_validator.config.schema import ValidatorSettings
    from object_graph_validator.engine.outcome import ValidationResult

_LOGGER = logging.getLogger(__name__)


class Validator:
    """Reusable validator for one schema.

    Holds no per-call state, so one instance may serve many threads.
    """

    __slots__ = ("_allow_extra_keys", "_max_depth", "_schema")

    def __init__(
        self,
        schema: Schema,
        *,
        allow_extra_keys: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if not is_schema(schema):
            raise TypeError(f"schema must be a schema node, got {type(schema).__name__}")
        ValidationContext(allow_extra_keys=allow_extra_keys, max_depth=max_depth)
        self._schema = schema
        self._allow_extra_keys = allow_extra_keys
        self._max_depth = max_depth

    @classmethod
    def from_settings(cls, schema: Schema, settings: ValidatorSettings) -> Validator:
        return cls(
            schema,
            allow_extra_keys=settings.allow_extra_keys,
            max_depth=settings.max_depth,
        )

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def allow_extra_keys(self) -> bool:
        return self._allow_extra_keys

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def check(self, value: Any, path: str = ROOT_PATH) -> ValidationResult:
        result = check(
            self._schema,
            value,
            path,
            self._allow_extra_keys,
            max_depth=self._max_depth,
        )
        if result.error is not None:
            _LOGGER.debug(
                "validation failed: %s",
                result.error,
                extra={
                    "error_code": result.error.code.value,
                    "error_path": result.error.path,
                    "input_value": result.error.value,
                },
            )
        return result

    def validate(self, value: Any, path: str = ROOT_PATH) -> Any:
        """Return the normalized value or raise ``ValidateError``."""

        return self.check(value, path).unwrap()

    def __repr__(self) -> str:
        return (
            f"Validator(schema={self._schema!r}, allow_extra_keys={self._allow_extra_keys}, "
            f"max_depth={self._max_depth})"
        )


__all__ = ["Validator"]
