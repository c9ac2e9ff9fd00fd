"""Object graph value model and validation error types."""

from object_graph_validator.domain.errors import (
    ERROR_MESSAGES,
    CompositeValidateError,
    ErrorCode,
    JSONScalar,
    JSONValue,
    ValidateError,
    display_path,
)
from object_graph_validator.domain.values import (
    ACCEPTED_KINDS,
    NUMERIC_KINDS,
    SCALAR_KINDS,
    Int64,
    ValueKind,
    accepts,
    coerce_constant,
    is_nan,
    kind_of,
    widen,
)

__all__ = [
    "ACCEPTED_KINDS",
    "CompositeValidateError",
    "ERROR_MESSAGES",
    "ErrorCode",
    "Int64",
    "JSONScalar",
    "JSONValue",
    "NUMERIC_KINDS",
    "SCALAR_KINDS",
    "ValidateError",
    "ValueKind",
    "accepts",
    "coerce_constant",
    "display_path",
    "is_nan",
    "kind_of",
    "widen",
]
