"""
object-graph-validator — schema node variants.

File: src/object_graph_validator/schema/nodes.py

Purpose
- Define the closed set of immutable schema nodes: type nodes, the optional
  marker, modifiers and the ``AnyOf`` operator.

What should be included in this file
- One frozen dataclass per node carrying its own configuration payload.
- Construction-time argument checks (bad arguments raise ``TypeError`` or
  ``ValueError`` immediately, never during validation).

Functional requirements
- Nodes never change after construction and hold no per-call state, so one
  schema tree can be shared across threads and validation calls.

Non-functional requirements
- No validation logic lives here; the engine dispatches on node type.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, TypeAlias

from object_graph_validator.domain.values import (
    NUMERIC_KINDS,
    SCALAR_KINDS,
    ValueKind,
    coerce_constant,
    is_nan,
    kind_of,
)

# --- type nodes -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StringType:
    target: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(frozen=True, slots=True)
class Int32Type:
    target: ClassVar[ValueKind] = ValueKind.INT32


@dataclass(frozen=True, slots=True)
class Int64Type:
    """Accepts 32- and 64-bit integers and returns ``Int64`` values."""

    target: ClassVar[ValueKind] = ValueKind.INT64


@dataclass(frozen=True, slots=True)
class DecimalType:
    """Accepts integers and decimals; integers become exact ``Decimal`` values."""

    target: ClassVar[ValueKind] = ValueKind.DECIMAL


@dataclass(frozen=True, slots=True)
class Float64Type:
    """Accepts every numeric kind and returns ``float``.

    Widening large integers or decimals to a double can lose precision; the
    loss is accepted silently.
    """

    target: ClassVar[ValueKind] = ValueKind.FLOAT64


@dataclass(frozen=True, slots=True)
class BoolType:
    target: ClassVar[ValueKind] = ValueKind.BOOL


@dataclass(frozen=True, slots=True)
class ListType:
    """Ordered list whose every element must satisfy ``element``."""

    element: Schema

    def __post_init__(self) -> None:
        _require_schema(self.element, "ListType.element")


@dataclass(frozen=True, slots=True)
class MapType:
    """String-keyed map with declared fields.

    Fields wrapped in ``OptionalMarker`` may be absent from the input; every
    other declared field is required to be present (its value may still be
    null unless wrapped in ``Required``).
    """

    fields: Mapping[str, Schema]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            raise TypeError(
                f"MapType.fields must be a mapping, got {type(self.fields).__name__}"
            )
        frozen: dict[str, Schema] = {}
        for key, schema in self.fields.items():
            if not isinstance(key, str):
                raise TypeError(f"MapType.fields keys must be strings, got {key!r}")
            _require_schema(schema, f"MapType.fields[{key!r}]")
            frozen[key] = schema
        object.__setattr__(self, "fields", MappingProxyType(frozen))

    def __hash__(self) -> int:
        # mappingproxy is unhashable; field order does not affect equality.
        return hash(frozenset(self.fields.items()))


# --- marker -----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OptionalMarker:
    """Marks a ``MapType`` field as allowed to be absent. Validates as ``schema``."""

    schema: Schema

    def __post_init__(self) -> None:
        _require_schema(self.schema, "OptionalMarker.schema")


# --- modifiers --------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Required:
    """Rejects null; the only node that does not pass null through."""

    schema: Schema

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Required.schema")


@dataclass(frozen=True, slots=True)
class Equal:
    """Value must be of the constant's kind and equal to it.

    The constant's kind is inferred with ``kind_of`` unless ``kind`` is given,
    in which case the constant is widened to that kind first (for example
    ``Equal(Int64Type(), 5, kind=ValueKind.INT64)``).
    """

    schema: Schema
    value: Any
    kind: ValueKind | None = None

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Equal.schema")
        if self.value is None:
            raise TypeError("Equal.value must not be None")
        resolved = _resolve_kind((self.value,), self.kind, SCALAR_KINDS, "Equal")
        object.__setattr__(self, "kind", resolved)
        coerced = coerce_constant(self.value, resolved)
        if is_nan(coerced):
            raise ValueError("Equal.value must not be NaN")
        object.__setattr__(self, "value", coerced)


@dataclass(frozen=True, slots=True, init=False)
class EnumOf:
    """Value must be of the constants' kind and one of them."""

    schema: Schema
    values: tuple[Any, ...]
    kind: ValueKind | None

    def __init__(self, schema: Schema, *values: Any, kind: ValueKind | None = None) -> None:
        _require_schema(schema, "EnumOf.schema")
        if any(value is None for value in values):
            raise TypeError("EnumOf.values must not contain None")
        if not values and kind is None:
            raise ValueError("EnumOf requires at least one value or an explicit kind")
        resolved = _resolve_kind(values, kind, SCALAR_KINDS, "EnumOf")
        object.__setattr__(self, "schema", schema)
        coerced = tuple(coerce_constant(value, resolved) for value in values)
        if any(is_nan(value) for value in coerced):
            raise ValueError("EnumOf.values must not contain NaN")
        object.__setattr__(self, "kind", resolved)
        object.__setattr__(self, "values", coerced)


@dataclass(frozen=True, slots=True)
class Length:
    """String length bounds, both inclusive. Lengths count code points."""

    schema: Schema
    min: int | None = None
    max: int | None = None

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Length.schema")
        _check_size_bounds(self.min, self.max, "Length")


@dataclass(frozen=True, slots=True)
class Digit:
    schema: Schema

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Digit.schema")


@dataclass(frozen=True, slots=True)
class Ascii:
    """String must contain only printable ASCII (0x20-0x7E)."""

    schema: Schema

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Ascii.schema")


@dataclass(frozen=True, slots=True)
class Unicode:
    """String must not contain C0/C1 control characters or DEL.

    Line feed is allowed unless ``exclude_line_feed`` is set.
    """

    schema: Schema
    exclude_line_feed: bool = False

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Unicode.schema")
        _require_bool(self.exclude_line_feed, "Unicode.exclude_line_feed")


@dataclass(frozen=True, slots=True)
class Match:
    """String must contain a match of ``pattern`` (``re.search`` semantics).

    ``flags`` takes the usual ``re`` flags such as ``re.IGNORECASE`` or
    ``re.MULTILINE``. A precompiled pattern keeps its own flags.
    """

    schema: Schema
    pattern: re.Pattern[str]
    flags: int = 0

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Match.schema")
        raw: object = self.pattern
        if isinstance(raw, re.Pattern):
            if self.flags:
                raise ValueError("Match.flags cannot be combined with a compiled pattern")
            if not isinstance(raw.pattern, str):
                raise TypeError("Match.pattern must be a text pattern")
            return
        if not isinstance(raw, str):
            raise TypeError(f"Match.pattern must be a string, got {type(raw).__name__}")
        if isinstance(self.flags, bool) or not isinstance(self.flags, int):
            raise TypeError(f"Match.flags must be an integer, got {type(self.flags).__name__}")
        object.__setattr__(self, "pattern", re.compile(raw, self.flags))


@dataclass(frozen=True, slots=True)
class Range:
    """Numeric bounds, each side independently inclusive or exclusive.

    Bounds share one numeric kind, inferred from them or given as ``kind``.
    Without bounds and kind, any numeric value passes the kind guard.
    """

    schema: Schema
    min: Any = None
    max: Any = None
    min_inclusive: bool = True
    max_inclusive: bool = True
    kind: ValueKind | None = None

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Range.schema")
        _require_bool(self.min_inclusive, "Range.min_inclusive")
        _require_bool(self.max_inclusive, "Range.max_inclusive")
        bounds = tuple(bound for bound in (self.min, self.max) if bound is not None)
        resolved = _resolve_kind(bounds, self.kind, NUMERIC_KINDS, "Range")
        object.__setattr__(self, "kind", resolved)
        if resolved is None:
            return
        for name in ("min", "max"):
            bound = getattr(self, name)
            if bound is None:
                continue
            coerced = coerce_constant(bound, resolved)
            if is_nan(coerced):
                raise ValueError(f"Range.{name} must not be NaN")
            object.__setattr__(self, name, coerced)
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("Range.min must be <= Range.max")


@dataclass(frozen=True, slots=True)
class Count:
    """List length bounds, both inclusive."""

    schema: Schema
    min: int | None = None
    max: int | None = None

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Count.schema")
        _check_size_bounds(self.min, self.max, "Count")


@dataclass(frozen=True, slots=True)
class Convert:
    """Replace a string with ``func(value)``; a ``None`` result is a failure.

    The replacement may be any object, so schema nodes above a ``Convert``
    see an open-typed value. Purity of ``func`` is the caller's concern.
    """

    schema: Schema
    func: Callable[[str], Any]

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Convert.schema")
        _require_callable(self.func, "Convert.func")


@dataclass(frozen=True, slots=True)
class Predicate:
    """String must satisfy ``func``."""

    schema: Schema
    func: Callable[[str], bool]

    def __post_init__(self) -> None:
        _require_schema(self.schema, "Predicate.schema")
        _require_callable(self.func, "Predicate.func")


# --- operator ---------------------------------------------------------------


@dataclass(frozen=True, slots=True, init=False)
class AnyOf:
    """First alternative that validates wins; otherwise every failure is reported."""

    schemas: tuple[Schema, ...]

    def __init__(self, *schemas: Schema) -> None:
        if not schemas:
            raise ValueError("AnyOf requires at least one schema")
        for index, schema in enumerate(schemas):
            _require_schema(schema, f"AnyOf.schemas[{index}]")
        object.__setattr__(self, "schemas", tuple(schemas))


TypeNode: TypeAlias = (
    StringType | Int32Type | Int64Type | DecimalType | Float64Type | BoolType | ListType | MapType
)
ScalarTypeNode: TypeAlias = (
    StringType | Int32Type | Int64Type | DecimalType | Float64Type | BoolType
)
Modifier: TypeAlias = (
    Required
    | Equal
    | EnumOf
    | Length
    | Digit
    | Ascii
    | Unicode
    | Match
    | Range
    | Count
    | Convert
    | Predicate
)
Schema: TypeAlias = TypeNode | OptionalMarker | Modifier | AnyOf

SCALAR_TYPE_NODES: tuple[type, ...] = (
    StringType,
    Int32Type,
    Int64Type,
    DecimalType,
    Float64Type,
    BoolType,
)
SCHEMA_NODE_TYPES: tuple[type, ...] = (
    *SCALAR_TYPE_NODES,
    ListType,
    MapType,
    OptionalMarker,
    Required,
    Equal,
    EnumOf,
    Length,
    Digit,
    Ascii,
    Unicode,
    Match,
    Range,
    Count,
    Convert,
    Predicate,
    AnyOf,
)


def is_schema(value: object) -> bool:
    """Return whether ``value`` is a schema node."""

    return isinstance(value, SCHEMA_NODE_TYPES)


def _require_schema(value: object, field_name: str) -> None:
    if not is_schema(value):
        raise TypeError(f"{field_name} must be a schema node, got {type(value).__name__}")


def _require_bool(value: object, field_name: str) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"{field_name} must be a boolean, got {type(value).__name__}")


def _require_callable(value: object, field_name: str) -> None:
    if not callable(value):
        raise TypeError(f"{field_name} must be callable, got {type(value).__name__}")


def _check_size_bounds(minimum: object, maximum: object, owner: str) -> None:
    for name, bound in (("min", minimum), ("max", maximum)):
        if bound is None:
            continue
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise TypeError(f"{owner}.{name} must be an integer, got {type(bound).__name__}")
        if bound < 0:
            raise ValueError(f"{owner}.{name} must be >= 0")
    if isinstance(minimum, int) and isinstance(maximum, int) and minimum > maximum:
        raise ValueError(f"{owner}.min must be <= {owner}.max")


def _resolve_kind(
    constants: Iterable[object],
    kind: ValueKind | str | None,
    allowed: frozenset[ValueKind],
    owner: str,
) -> ValueKind | None:
    if kind is not None:
        resolved = ValueKind(kind)
        if resolved not in allowed:
            expected = ", ".join(sorted(item.value for item in allowed))
            raise ValueError(f"{owner}.kind must be one of: {expected}")
        return resolved

    inferred: ValueKind | None = None
    for constant in constants:
        constant_kind = kind_of(constant)
        if constant_kind not in allowed:
            raise TypeError(f"{owner} does not support constants of kind {constant_kind.value}")
        if inferred is not None and constant_kind is not inferred:
            raise TypeError(
                f"{owner} constants mix kinds {inferred.value} and {constant_kind.value}; "
                "pass kind= to widen them"
            )
        inferred = constant_kind
    return inferred


__all__ = [
    "AnyOf",
    "Ascii",
    "BoolType",
    "Convert",
    "Count",
    "DecimalType",
    "Digit",
    "EnumOf",
    "Equal",
    "Float64Type",
    "Int32Type",
    "Int64Type",
    "Length",
    "ListType",
    "MapType",
    "Match",
    "Modifier",
    "OptionalMarker",
    "Predicate",
    "Range",
    "Required",
    "SCALAR_TYPE_NODES",
    "SCHEMA_NODE_TYPES",
    "ScalarTypeNode",
    "Schema",
    "StringType",
    "TypeNode",
    "Unicode",
    "is_schema",
]
