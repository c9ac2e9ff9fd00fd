"""
object-graph-validator — package root.

File: src/object_graph_validator/__init__.py

Purpose
- Validate dynamically typed object graphs (nulls, strings, numbers,
  booleans, lists, string-keyed maps) against a declarative schema tree and
  return a normalized copy, or a path-located error.

What should be included in this file
- Version export and the public API surface: schema nodes, ``validate`` /
  ``check``, ``Validator`` and the error types.
- Import boundary rules: ``config``, ``observability`` and ``ui`` are imported
  explicitly by callers.

Functional requirements
- Must not have side effects at import time (no config loading, no logging init).
"""

from object_graph_validator.domain.errors import CompositeValidateError, ErrorCode, ValidateError
from object_graph_validator.domain.values import Int64, ValueKind, kind_of
from object_graph_validator.engine import Validator, ValidationResult, check, validate
from object_graph_validator.schema import (
    AnyOf,
    Ascii,
    BoolType,
    Convert,
    Count,
    DecimalType,
    Digit,
    EnumOf,
    Equal,
    Float64Type,
    Int32Type,
    Int64Type,
    Length,
    ListType,
    MapType,
    Match,
    OptionalMarker,
    Predicate,
    Range,
    Required,
    Schema,
    StringType,
    Unicode,
)

__version__ = "0.1.0"

__all__ = [
    "AnyOf",
    "Ascii",
    "BoolType",
    "CompositeValidateError",
    "Convert",
    "Count",
    "DecimalType",
    "Digit",
    "EnumOf",
    "Equal",
    "ErrorCode",
    "Float64Type",
    "Int32Type",
    "Int64",
    "Int64Type",
    "Length",
    "ListType",
    "MapType",
    "Match",
    "OptionalMarker",
    "Predicate",
    "Range",
    "Required",
    "Schema",
    "StringType",
    "Unicode",
    "ValidateError",
    "ValidationResult",
    "Validator",
    "ValueKind",
    "__version__",
    "check",
    "kind_of",
    "validate",
]
