"""
object-graph-validator — modifier rules.

File: src/object_graph_validator/engine/rules.py

Purpose
- Apply the one extra constraint of each modifier to the already-validated,
  non-null result of its inner schema.

Functional requirements
- A value of a kind the rule cannot evaluate fails with the modifier's
  type-guard code (``CANT_*``); a value that fails the rule itself fails
  with the violation code.
- ``Convert`` is the only rule that replaces the value.

Non-functional requirements
- Rules never recurse into child schemas and keep no state.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Final

from object_graph_validator.domain.errors import ErrorCode, ValidateError
from object_graph_validator.domain.values import NUMERIC_KINDS, ValueKind, is_nan, kind_of
from object_graph_validator.engine.context import ValidationContext
from object_graph_validator.engine.outcome import Invalid, Outcome, Valid
from object_graph_validator.schema.nodes import (
    Ascii,
    Convert,
    Count,
    Digit,
    EnumOf,
    Equal,
    Length,
    Match,
    Predicate,
    Range,
    Schema,
    Unicode,
)

_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]*")
_PRINTABLE_ASCII: Final[re.Pattern[str]] = re.compile(r"[\x20-\x7e]*")
_CONTROL_CHARS: Final[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_CONTROL_CHARS_EXCEPT_LF: Final[re.Pattern[str]] = re.compile(r"[\x00-\x09\x0b-\x1f\x7f-\x9f]")

Rule = Callable[[Any, Any, ValidationContext], Outcome]


def fail(code: ErrorCode, ctx: ValidationContext, schema: Schema, value: Any) -> Invalid:
    """Build a failure located at the context's path."""

    return Invalid(ValidateError(code, ctx.path, schema=schema, value=value))


def check_equal(node: Equal, value: Any, ctx: ValidationContext) -> Outcome:
    if kind_of(value) is not node.kind:
        return fail(ErrorCode.CANT_EQUAL, ctx, node, value)
    # NaN equals nothing; a signaling NaN raises on comparison.
    if is_nan(value) or value != node.value:
        return fail(ErrorCode.NOT_EQUAL, ctx, node, value)
    return Valid(value)


def check_enum(node: EnumOf, value: Any, ctx: ValidationContext) -> Outcome:
    if kind_of(value) is not node.kind:
        return fail(ErrorCode.CANT_CHECK_ENUM, ctx, node, value)
    if is_nan(value) or value not in node.values:
        return fail(ErrorCode.NOT_ENUM_CONSTANT, ctx, node, value)
    return Valid(value)


def check_length(node: Length, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_CHECK_LENGTH, ctx, node, value)
    if node.min is not None and len(value) < node.min:
        return fail(ErrorCode.TOO_SHORT, ctx, node, value)
    if node.max is not None and len(value) > node.max:
        return fail(ErrorCode.TOO_LONG, ctx, node, value)
    return Valid(value)


def check_digit(node: Digit, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_CHECK_DIGIT, ctx, node, value)
    if _DIGITS.fullmatch(value) is None:
        return fail(ErrorCode.NOT_DIGIT, ctx, node, value)
    return Valid(value)


def check_ascii(node: Ascii, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_CHECK_ASCII, ctx, node, value)
    if _PRINTABLE_ASCII.fullmatch(value) is None:
        return fail(ErrorCode.NOT_ASCII, ctx, node, value)
    return Valid(value)


def check_unicode(node: Unicode, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_CHECK_UNICODE, ctx, node, value)
    forbidden = _CONTROL_CHARS if node.exclude_line_feed else _CONTROL_CHARS_EXCEPT_LF
    if forbidden.search(value) is not None:
        return fail(ErrorCode.NOT_UNICODE, ctx, node, value)
    return Valid(value)


def check_match(node: Match, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_MATCH, ctx, node, value)
    if node.pattern.search(value) is None:
        return fail(ErrorCode.DONT_MATCH, ctx, node, value)
    return Valid(value)


def check_range(node: Range, value: Any, ctx: ValidationContext) -> Outcome:
    kind = kind_of(value)
    comparable = kind in NUMERIC_KINDS if node.kind is None else kind is node.kind
    if not comparable:
        return fail(ErrorCode.CANT_COMPARE, ctx, node, value)
    # NaN orders below every number.
    if is_nan(value):
        if node.min is not None:
            return fail(ErrorCode.TOO_SMALL, ctx, node, value)
        return Valid(value)
    if node.min is not None:
        too_small = value < node.min if node.min_inclusive else value <= node.min
        if too_small:
            return fail(ErrorCode.TOO_SMALL, ctx, node, value)
    if node.max is not None:
        too_large = value > node.max if node.max_inclusive else value >= node.max
        if too_large:
            return fail(ErrorCode.TOO_LARGE, ctx, node, value)
    return Valid(value)


def check_count(node: Count, value: Any, ctx: ValidationContext) -> Outcome:
    if kind_of(value) is not ValueKind.LIST:
        return fail(ErrorCode.CANT_COUNT, ctx, node, value)
    if node.min is not None and len(value) < node.min:
        return fail(ErrorCode.TOO_SHORT, ctx, node, value)
    if node.max is not None and len(value) > node.max:
        return fail(ErrorCode.TOO_LONG, ctx, node, value)
    return Valid(value)


def check_convert(node: Convert, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_CONVERT, ctx, node, value)
    converted = node.func(value)
    if converted is None:
        return fail(ErrorCode.DONT_CONVERT, ctx, node, value)
    return Valid(converted)


def check_predicate(node: Predicate, value: Any, ctx: ValidationContext) -> Outcome:
    if not isinstance(value, str):
        return fail(ErrorCode.CANT_VALIDATE, ctx, node, value)
    if not node.func(value):
        return fail(ErrorCode.DONT_VALIDATE, ctx, node, value)
    return Valid(value)


MODIFIER_RULES: Final[Mapping[type, Rule]] = MappingProxyType(
    {
        Equal: check_equal,
        EnumOf: check_enum,
        Length: check_length,
        Digit: check_digit,
        Ascii: check_ascii,
        Unicode: check_unicode,
        Match: check_match,
        Range: check_range,
        Count: check_count,
        Convert: check_convert,
        Predicate: check_predicate,
    }
)

__all__ = [
    "MODIFIER_RULES",
    "Rule",
    "check_ascii",
    "check_convert",
    "check_count",
    "check_digit",
    "check_enum",
    "check_equal",
    "check_length",
    "check_match",
    "check_predicate",
    "check_range",
    "check_unicode",
    "fail",
]
