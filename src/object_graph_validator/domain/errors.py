"""
object-graph-validator — validation error model.

File: src/object_graph_validator/domain/errors.py

Purpose
- Define the failure codes, their fixed messages, and the two exception types
  reported by the engine.

Functional requirements
- ``ValidateError`` carries a code, message and JSON-Pointer-like path, plus
  the schema node that failed and the value it rejected.
- ``CompositeValidateError`` aggregates every alternative failure of an
  ``AnyOf`` attempt, in attempt order.

Non-functional requirements
- ``to_dict`` exports are JSON-safe and deterministic.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from object_graph_validator.schema.nodes import Schema

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


class ErrorCode(StrEnum):
    """Canonical failure codes."""

    TYPE_MISMATCH = "type_mismatch"
    MISSING_KEY = "missing_key"
    EXTRA_KEY = "extra_key"
    REQUIRED_VALUE = "required_value"
    NOT_EQUAL = "not_equal"
    CANT_EQUAL = "cant_equal"
    NOT_ENUM_CONSTANT = "not_enum_constant"
    CANT_CHECK_ENUM = "cant_check_enum"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    CANT_CHECK_LENGTH = "cant_check_length"
    NOT_DIGIT = "not_digit"
    CANT_CHECK_DIGIT = "cant_check_digit"
    NOT_ASCII = "not_ascii"
    CANT_CHECK_ASCII = "cant_check_ascii"
    NOT_UNICODE = "not_unicode"
    CANT_CHECK_UNICODE = "cant_check_unicode"
    DONT_MATCH = "dont_match"
    CANT_MATCH = "cant_match"
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    CANT_COMPARE = "cant_compare"
    CANT_COUNT = "cant_count"
    DONT_CONVERT = "dont_convert"
    CANT_CONVERT = "cant_convert"
    DONT_VALIDATE = "dont_validate"
    CANT_VALIDATE = "cant_validate"
    ALL_FAILURE = "all_failure"
    TOO_DEEP = "too_deep"


ERROR_MESSAGES: Final[Mapping[ErrorCode, str]] = MappingProxyType(
    {
        ErrorCode.TYPE_MISMATCH: "Type mismatch.",
        ErrorCode.MISSING_KEY: "Missing key.",
        ErrorCode.EXTRA_KEY: "Extra key.",
        ErrorCode.REQUIRED_VALUE: "Required value.",
        ErrorCode.NOT_EQUAL: "Not equal.",
        ErrorCode.CANT_EQUAL: "Can't equal.",
        ErrorCode.NOT_ENUM_CONSTANT: "Not enum constant.",
        ErrorCode.CANT_CHECK_ENUM: "Can't check enum.",
        ErrorCode.TOO_SHORT: "Too short.",
        ErrorCode.TOO_LONG: "Too long.",
        ErrorCode.CANT_CHECK_LENGTH: "Can't check length.",
        ErrorCode.NOT_DIGIT: "Not digit.",
        ErrorCode.CANT_CHECK_DIGIT: "Can't check digit.",
        ErrorCode.NOT_ASCII: "Not ascii.",
        ErrorCode.CANT_CHECK_ASCII: "Can't check ascii.",
        ErrorCode.NOT_UNICODE: "Not unicode.",
        ErrorCode.CANT_CHECK_UNICODE: "Can't check unicode.",
        ErrorCode.DONT_MATCH: "Don't match.",
        ErrorCode.CANT_MATCH: "Can't match.",
        ErrorCode.TOO_SMALL: "Too small.",
        ErrorCode.TOO_LARGE: "Too large.",
        ErrorCode.CANT_COMPARE: "Can't compare.",
        ErrorCode.CANT_COUNT: "Can't count.",
        ErrorCode.DONT_CONVERT: "Don't convert.",
        ErrorCode.CANT_CONVERT: "Can't convert.",
        ErrorCode.DONT_VALIDATE: "Don't validate.",
        ErrorCode.CANT_VALIDATE: "Can't validate.",
        ErrorCode.ALL_FAILURE: "All failure.",
        ErrorCode.TOO_DEEP: "Too deep.",
    }
)


class ValidateError(ValueError):
    """A single localized validation failure."""

    def __init__(
        self,
        code: ErrorCode,
        path: str,
        *,
        message: str | None = None,
        schema: Schema | None = None,
        value: Any = None,
    ) -> None:
        self.code = ErrorCode(code)
        self.path = path
        self.message = message if message is not None else ERROR_MESSAGES[self.code]
        self.schema = schema
        self.value = value
        super().__init__(f"{self.message} (at {display_path(path)})")

    def to_dict(self) -> dict[str, JSONValue]:
        """Stable-key JSON-safe export."""

        return {
            "code": self.code.value,
            "message": self.message,
            "path": self.path,
        }

    def leaves(self) -> Iterator[ValidateError]:
        """Yield every non-composite failure, depth-first."""

        yield self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, path={self.path!r})"


class CompositeValidateError(ValidateError):
    """Aggregated failure of every alternative tried by ``AnyOf``."""

    def __init__(
        self,
        path: str,
        children: Sequence[ValidateError],
        *,
        schema: Schema | None = None,
        value: Any = None,
    ) -> None:
        self.children: tuple[ValidateError, ...] = tuple(children)
        super().__init__(ErrorCode.ALL_FAILURE, path, schema=schema, value=value)

    def to_dict(self) -> dict[str, JSONValue]:
        payload = super().to_dict()
        payload["children"] = [child.to_dict() for child in self.children]
        return payload

    def leaves(self) -> Iterator[ValidateError]:
        for child in self.children:
            yield from child.leaves()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self.path!r}, "
            f"children=[{', '.join(repr(child) for child in self.children)}])"
        )


def display_path(path: str) -> str:
    """Render a path for humans; the root path is shown as ``<root>``."""

    return path if path else "<root>"


__all__ = [
    "CompositeValidateError",
    "ERROR_MESSAGES",
    "ErrorCode",
    "JSONScalar",
    "JSONValue",
    "ValidateError",
    "display_path",
]
