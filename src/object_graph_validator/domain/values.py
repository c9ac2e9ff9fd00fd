"""Object graph value model: kind classification and numeric widening."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final

from object_graph_validator.constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN


class ValueKind(StrEnum):
    """Closed set of object graph value kinds."""

    NULL = "null"
    STRING = "string"
    INT32 = "int32"
    INT64 = "int64"
    DECIMAL = "decimal"
    FLOAT64 = "float64"
    BOOL = "bool"
    LIST = "list"
    MAP = "map"
    OTHER = "other"


class Int64(int):
    """Integer tagged as a 64-bit value.

    Plain ``int`` values inside the 32-bit range classify as ``INT32``; wrap
    them in ``Int64`` to mark them as 64-bit. ``Int64Type`` returns instances
    of this class so that normalized output keeps its widened kind.
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> Int64:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Int64 expects an integer, got {type(value).__name__}")
        parsed = int.__new__(cls, value)
        if not INT64_MIN <= parsed <= INT64_MAX:
            raise OverflowError(f"{int(parsed)} is outside the 64-bit integer range")
        return parsed

    def __repr__(self) -> str:
        return f"Int64({int(self)})"


NUMERIC_KINDS: Final[frozenset[ValueKind]] = frozenset(
    {ValueKind.INT32, ValueKind.INT64, ValueKind.DECIMAL, ValueKind.FLOAT64}
)
SCALAR_KINDS: Final[frozenset[ValueKind]] = NUMERIC_KINDS | {ValueKind.STRING, ValueKind.BOOL}

# Target kind -> input kinds the widening rules accept for it.
ACCEPTED_KINDS: Final[Mapping[ValueKind, frozenset[ValueKind]]] = MappingProxyType(
    {
        ValueKind.STRING: frozenset({ValueKind.STRING}),
        ValueKind.BOOL: frozenset({ValueKind.BOOL}),
        ValueKind.INT32: frozenset({ValueKind.INT32}),
        ValueKind.INT64: frozenset({ValueKind.INT32, ValueKind.INT64}),
        ValueKind.DECIMAL: frozenset({ValueKind.INT32, ValueKind.INT64, ValueKind.DECIMAL}),
        ValueKind.FLOAT64: NUMERIC_KINDS,
    }
)


def kind_of(value: object) -> ValueKind:
    """Classify ``value`` into its object graph kind."""

    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, Int64):
        return ValueKind.INT64
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return ValueKind.INT32
        if INT64_MIN <= value <= INT64_MAX:
            return ValueKind.INT64
        return ValueKind.OTHER
    if isinstance(value, Decimal):
        return ValueKind.DECIMAL
    if isinstance(value, float):
        return ValueKind.FLOAT64
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    if isinstance(value, Mapping):
        if all(isinstance(key, str) for key in value):
            return ValueKind.MAP
        return ValueKind.OTHER
    return ValueKind.OTHER


def accepts(target: ValueKind, value: object) -> bool:
    """Return whether ``value`` can be widened to ``target``."""

    accepted = ACCEPTED_KINDS.get(target)
    return accepted is not None and kind_of(value) in accepted


def widen(value: Any, target: ValueKind) -> Any:
    """Convert an accepted ``value`` to the representation of ``target``.

    Callers check ``accepts`` first. Widening to ``FLOAT64`` may lose
    precision; that loss is not reported.
    """

    if target is ValueKind.INT64:
        return value if isinstance(value, Int64) else Int64(value)
    if target is ValueKind.DECIMAL:
        return value if isinstance(value, Decimal) else Decimal(int(value))
    if target is ValueKind.FLOAT64:
        if isinstance(value, float):
            return value
        # float() refuses signaling NaN.
        if isinstance(value, Decimal) and value.is_snan():
            return math.nan
        return float(value)
    return value


def is_nan(value: object) -> bool:
    """Return whether ``value`` is a float or decimal NaN."""

    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def coerce_constant(value: object, kind: ValueKind) -> Any:
    """Represent a schema constant in ``kind`` or raise ``TypeError``."""

    if not accepts(kind, value):
        raise TypeError(
            f"constant {value!r} of kind {kind_of(value).value} cannot be used as {kind.value}"
        )
    return widen(value, kind)


__all__ = [
    "ACCEPTED_KINDS",
    "Int64",
    "NUMERIC_KINDS",
    "SCALAR_KINDS",
    "ValueKind",
    "accepts",
    "coerce_constant",
    "is_nan",
    "kind_of",
    "widen",
]
