"""
object-graph-validator — unit tests for list and map validation

File: tests/unit/engine/test_structures.py

Purpose
- Validate container recursion, path construction, key presence rules and
  the nesting bound.

What this test file should cover
- List element paths and fail-fast behavior.
- Missing-key detection in declared order, before any value is checked.
- Extra-key policy and its propagation to nested maps.
- ``OptionalMarker`` / ``Required`` interplay with presence and null.
- ``TOO_DEEP`` at the configured container depth.
"""

from __future__ import annotations

import pytest

from object_graph_validator.constants import MAX_DEPTH_LIMIT
from object_graph_validator.domain.errors import ErrorCode, ValidateError
from object_graph_validator.domain.values import Int64
from object_graph_validator.engine import Validator, check, validate
from object_graph_validator.schema import (
    Int32Type,
    Int64Type,
    ListType,
    MapType,
    OptionalMarker,
    Required,
    StringType,
)


def _error(schema: object, value: object, **kwargs: object) -> ValidateError:
    result = check(schema, value, **kwargs)  # type: ignore[arg-type]
    assert result.error is not None
    return result.error


def test_list_elements_are_normalized_into_a_new_list() -> None:
    source = (1, 2, 3)
    result = validate(ListType(Int64Type()), source)

    assert result == [1, 2, 3]
    assert isinstance(result, list)
    assert all(isinstance(item, Int64) for item in result)
    assert validate(ListType(StringType()), []) == []


def test_list_reports_first_failing_index() -> None:
    error = _error(ListType(Int32Type()), [1, "a", "b"])
    assert error.code is ErrorCode.TYPE_MISMATCH
    assert error.path == "/1"
    assert error.value == "a"


def test_nested_list_failure_is_located_through_the_map() -> None:
    error = _error(MapType({"a": ListType(Int32Type())}), {"a": [1, "x"]})
    assert error.code is ErrorCode.TYPE_MISMATCH
    assert error.path == "/a/1"


def test_list_rejects_non_list() -> None:
    assert _error(ListType(StringType()), "abc").code is ErrorCode.TYPE_MISMATCH
    assert _error(ListType(StringType()), {"a": "b"}).code is ErrorCode.TYPE_MISMATCH


def test_map_normalizes_declared_fields() -> None:
    schema = MapType({"name": StringType(), "age": Int64Type()})
    source = {"name": "ada", "age": 36}

    result = validate(schema, source)

    assert result == {"name": "ada", "age": 36}
    assert result is not source
    assert isinstance(result["age"], Int64)


def test_map_rejects_non_map_and_non_string_keys() -> None:
    schema = MapType({"a": StringType()})
    assert _error(schema, ["a"]).code is ErrorCode.TYPE_MISMATCH
    assert _error(schema, {1: "a"}).code is ErrorCode.TYPE_MISMATCH


def test_missing_key_reported_in_declared_order_before_value_errors() -> None:
    schema = MapType({"first": StringType(), "second": StringType(), "third": StringType()})

    error = _error(schema, {"third": 1, "first": 2})

    assert error.code is ErrorCode.MISSING_KEY
    assert error.path == "/second"


def test_present_null_satisfies_presence_but_not_required() -> None:
    schema = MapType({"a": StringType(), "b": Required(StringType())})

    assert validate(schema, {"a": None, "b": "x"}) == {"a": None, "b": "x"}
    error = _error(schema, {"a": None, "b": None})
    assert error.code is ErrorCode.REQUIRED_VALUE
    assert error.path == "/b"
    assert _error(schema, {"b": "x"}).code is ErrorCode.MISSING_KEY


def test_optional_field_may_be_absent_and_is_omitted_from_output() -> None:
    schema = MapType({"a": StringType(), "b": OptionalMarker(Int32Type())})

    assert validate(schema, {"a": "x"}) == {"a": "x"}
    assert validate(schema, {"a": "x", "b": None}) == {"a": "x", "b": None}
    assert _error(schema, {"a": "x", "b": "no"}).path == "/b"


def test_optional_required_field_may_be_absent_but_not_null() -> None:
    schema = MapType({"a": OptionalMarker(Required(StringType()))})

    assert validate(schema, {}) == {}
    assert _error(schema, {"a": None}).code is ErrorCode.REQUIRED_VALUE


def test_extra_keys_rejected_by_default_and_dropped_when_allowed() -> None:
    schema = MapType({"a": StringType()})
    source = {"a": "x", "zzz": 1, "b": 2}

    error = _error(schema, source)
    assert error.code is ErrorCode.EXTRA_KEY
    assert error.path == "/zzz"

    assert validate(schema, source, allow_extra_keys=True) == {"a": "x"}


def test_extra_key_policy_applies_to_nested_maps() -> None:
    schema = MapType({"outer": ListType(MapType({"a": StringType()}))})
    source = {"outer": [{"a": "x"}, {"a": "y", "extra": True}]}

    error = _error(schema, source)
    assert error.code is ErrorCode.EXTRA_KEY
    assert error.path == "/outer/1/extra"
    assert validate(schema, source, allow_extra_keys=True) == {"outer": [{"a": "x"}, {"a": "y"}]}


def test_keys_are_not_escaped_in_paths() -> None:
    schema = MapType({"a/b": MapType({"~x": Int32Type()})})
    error = _error(schema, {"a/b": {"~x": "nope"}})
    assert error.path == "/a/b/~x"


def test_nesting_beyond_max_depth_fails_with_too_deep() -> None:
    schema = ListType(ListType(ListType(Int32Type())))

    assert validate(schema, [[[1]]], max_depth=3) == [[[1]]]
    error = _error(schema, [[[1]]], max_depth=2)
    assert error.code is ErrorCode.TOO_DEEP
    assert error.path == "/0/0"


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        check(StringType(), "x", max_depth=0)


def test_max_depth_is_capped_on_direct_calls() -> None:
    schema = ListType(Int32Type())

    assert validate(schema, [1], max_depth=MAX_DEPTH_LIMIT) == [1]
    with pytest.raises(ValueError, match="max_depth"):
        check(schema, [1], max_depth=MAX_DEPTH_LIMIT + 1)
    with pytest.raises(ValueError, match="max_depth"):
        Validator(schema, max_depth=MAX_DEPTH_LIMIT + 1)
