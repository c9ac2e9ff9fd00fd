"""Composable, immutable schema nodes."""

from object_graph_validator.schema.nodes import (
    SCALAR_TYPE_NODES,
    SCHEMA_NODE_TYPES,
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
    Modifier,
    OptionalMarker,
    Predicate,
    Range,
    Required,
    ScalarTypeNode,
    Schema,
    StringType,
    TypeNode,
    Unicode,
    is_schema,
)

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
