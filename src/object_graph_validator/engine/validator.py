"""
object-graph-validator — recursive validation engine.

File: src/object_graph_validator/engine/validator.py

Purpose
- Validate an object graph against a schema tree and build the normalized
  result.

What should be included in this file
- One dispatch function that walks the schema tree in lock-step with the
  input, threading path, extra-key policy and depth.
- Type coercion, list/map recursion, marker delegation, modifier chaining
  and ``AnyOf`` aggregation.
- Public ``check`` (result value) and ``validate`` (raises) entrypoints.

Functional requirements
- Every node except ``Required`` passes null through unchanged.
- Lists and maps stop at their first failing child; only ``AnyOf`` collects
  several failures.
- Output containers are always newly built.

Non-functional requirements
- Node checks return ``Valid``/``Invalid`` values; exceptions are raised only
  at the public ``validate`` boundary.
- Nesting is bounded by ``max_depth`` instead of the interpreter stack.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Final

from object_graph_validator.constants import DEFAULT_MAX_DEPTH, ROOT_PATH
from object_graph_validator.domain.errors import (
    CompositeValidateError,
    ErrorCode,
    ValidateError,
)
from object_graph_validator.domain.values import ValueKind, accepts, kind_of, widen
from object_graph_validator.engine.context import ValidationContext
from object_graph_validator.engine.outcome import Invalid, Outcome, Valid, ValidationResult
from object_graph_validator.engine.rules import MODIFIER_RULES, fail
from object_graph_validator.schema.nodes import (
    SCALAR_TYPE_NODES,
    AnyOf,
    ListType,
    MapType,
    OptionalMarker,
    Required,
    ScalarTypeNode,
    Schema,
    is_schema,
)

_Handler = Callable[[Any, Any, ValidationContext], Outcome]


def check(
    schema: Schema,
    value: Any,
    path: str = ROOT_PATH,
    allow_extra_keys: bool = False,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ValidationResult:
    """Validate ``value`` and return a result instead of raising."""

    if not is_schema(schema):
        raise TypeError(f"schema must be a schema node, got {type(schema).__name__}")
    ctx = ValidationContext(path=path, allow_extra_keys=allow_extra_keys, max_depth=max_depth)
    return ValidationResult.from_outcome(check_node(schema, value, ctx))


def validate(
    schema: Schema,
    value: Any,
    path: str = ROOT_PATH,
    allow_extra_keys: bool = False,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Any:
    """Validate ``value`` and return its normalized copy.

    Raises ``ValidateError`` (or ``CompositeValidateError`` from ``AnyOf``)
    located at the failing path.
    """

    return check(schema, value, path, allow_extra_keys, max_depth=max_depth).unwrap()


def check_node(schema: Schema, value: Any, ctx: ValidationContext) -> Outcome:
    """Dispatch ``schema`` against ``value``; the single recursion point."""

    return _lookup(_HANDLERS, type(schema))(schema, value, ctx)


def _check_scalar(node: ScalarTypeNode, value: Any, ctx: ValidationContext) -> Outcome:
    if value is None:
        return Valid(None)
    if not accepts(node.target, value):
        return fail(ErrorCode.TYPE_MISMATCH, ctx, node, value)
    return Valid(widen(value, node.target))


def _check_list(node: ListType, value: Any, ctx: ValidationContext) -> Outcome:
    if value is None:
        return Valid(None)
    if kind_of(value) is not ValueKind.LIST:
        return fail(ErrorCode.TYPE_MISMATCH, ctx, node, value)
    if ctx.exhausted:
        return fail(ErrorCode.TOO_DEEP, ctx, node, value)

    normalized: list[Any] = []
    for index, item in enumerate(value):
        outcome = check_node(node.element, item, ctx.child(index))
        if isinstance(outcome, Invalid):
            return outcome
        normalized.append(outcome.value)
    return Valid(normalized)


def _check_map(node: MapType, value: Any, ctx: ValidationContext) -> Outcome:
    if value is None:
        return Valid(None)
    if kind_of(value) is not ValueKind.MAP:
        return fail(ErrorCode.TYPE_MISMATCH, ctx, node, value)
    if ctx.exhausted:
        return fail(ErrorCode.TOO_DEEP, ctx, node, value)

    for key, field_schema in node.fields.items():
        if key not in value and not isinstance(field_schema, OptionalMarker):
            return fail(ErrorCode.MISSING_KEY, ctx.child(key), node, value)

    normalized: dict[str, Any] = {}
    for key, item in value.items():
        child_ctx = ctx.child(key)
        field_schema = node.fields.get(key)
        if field_schema is None:
            if not ctx.allow_extra_keys:
                return fail(ErrorCode.EXTRA_KEY, child_ctx, node, value)
            continue
        outcome = check_node(field_schema, item, child_ctx)
        if isinstance(outcome, Invalid):
            return outcome
        normalized[key] = outcome.value
    return Valid(normalized)


def _check_optional(node: OptionalMarker, value: Any, ctx: ValidationContext) -> Outcome:
    return check_node(node.schema, value, ctx)


def _check_required(node: Required, value: Any, ctx: ValidationContext) -> Outcome:
    outcome = check_node(node.schema, value, ctx)
    if isinstance(outcome, Invalid):
        return outcome
    if outcome.value is None:
        return fail(ErrorCode.REQUIRED_VALUE, ctx, node, None)
    return outcome


def _check_modifier(node: Any, value: Any, ctx: ValidationContext) -> Outcome:
    outcome = check_node(node.schema, value, ctx)
    if isinstance(outcome, Invalid) or outcome.value is None:
        return outcome
    return _lookup(MODIFIER_RULES, type(node))(node, outcome.value, ctx)


def _check_any_of(node: AnyOf, value: Any, ctx: ValidationContext) -> Outcome:
    failures: list[ValidateError] = []
    for alternative in node.schemas:
        outcome = check_node(alternative, value, ctx)
        if isinstance(outcome, Valid):
            return outcome
        failures.append(outcome.error)
    return Invalid(CompositeValidateError(ctx.path, failures, schema=node, value=value))


def _build_handlers() -> dict[type, _Handler]:
    handlers: dict[type, _Handler] = {node_type: _check_scalar for node_type in SCALAR_TYPE_NODES}
    handlers[ListType] = _check_list
    handlers[MapType] = _check_map
    handlers[OptionalMarker] = _check_optional
    handlers[Required] = _check_required
    handlers[AnyOf] = _check_any_of
    for modifier_type in MODIFIER_RULES:
        handlers[modifier_type] = _check_modifier
    return handlers


_HANDLERS: Final[Mapping[type, _Handler]] = MappingProxyType(_build_handlers())


def _lookup(table: Mapping[type, _Handler], node_type: type) -> _Handler:
    for base in node_type.__mro__:
        handler = table.get(base)
        if handler is not None:
            return handler
    raise TypeError(f"unsupported schema node {node_type.__name__}")


__all__ = ["check", "check_node", "validate"]
