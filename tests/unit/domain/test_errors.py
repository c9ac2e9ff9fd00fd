"""
object-graph-validator — unit tests for the error model

File: tests/unit/domain/test_errors.py

Purpose
- Validate error codes, fixed messages, string form and JSON export.
"""

from __future__ import annotations

import json

import pytest

from object_graph_validator.domain.errors import (
    ERROR_MESSAGES,
    CompositeValidateError,
    ErrorCode,
    ValidateError,
    display_path,
)


def test_every_code_has_a_message() -> None:
    assert set(ERROR_MESSAGES) == set(ErrorCode)
    assert ERROR_MESSAGES[ErrorCode.TYPE_MISMATCH] == "Type mismatch."
    assert ERROR_MESSAGES[ErrorCode.ALL_FAILURE] == "All failure."


def test_validate_error_carries_location_and_context() -> None:
    error = ValidateError(ErrorCode.MISSING_KEY, "/a/0", value={"b": 1})

    assert isinstance(error, ValueError)
    assert error.code is ErrorCode.MISSING_KEY
    assert error.message == "Missing key."
    assert error.path == "/a/0"
    assert error.value == {"b": 1}
    assert error.schema is None
    assert str(error) == "Missing key. (at /a/0)"
    assert repr(error) == "ValidateError(code='missing_key', path='/a/0')"
    assert list(error.leaves()) == [error]


def test_validate_error_accepts_code_value_and_custom_message() -> None:
    error = ValidateError("too_long", "", message="Name too long.")  # type: ignore[arg-type]
    assert error.code is ErrorCode.TOO_LONG
    assert str(error) == "Name too long. (at <root>)"

    with pytest.raises(ValueError):
        ValidateError("no_such_code", "")  # type: ignore[arg-type]


def test_composite_error_nests_children_in_order() -> None:
    first = ValidateError(ErrorCode.TYPE_MISMATCH, "/x")
    inner = CompositeValidateError(
        "/x",
        [ValidateError(ErrorCode.TOO_SHORT, "/x"), ValidateError(ErrorCode.NOT_DIGIT, "/x")],
    )
    composite = CompositeValidateError("/x", [first, inner])

    assert composite.code is ErrorCode.ALL_FAILURE
    assert composite.children == (first, inner)
    assert [leaf.code for leaf in composite.leaves()] == [
        ErrorCode.TYPE_MISMATCH,
        ErrorCode.TOO_SHORT,
        ErrorCode.NOT_DIGIT,
    ]

    exported = composite.to_dict()
    assert json.loads(json.dumps(exported)) == exported
    assert exported["code"] == "all_failure"
    children = exported["children"]
    assert isinstance(children, list)
    assert [child["code"] for child in children] == ["type_mismatch", "all_failure"]


def test_display_path_names_root() -> None:
    assert display_path("") == "<root>"
    assert display_path("/a") == "/a"
