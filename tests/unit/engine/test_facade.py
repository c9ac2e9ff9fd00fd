"""
object-graph-validator — unit tests for the Validator facade

File: tests/unit/engine/test_facade.py

Purpose
- Validate bound settings, eager argument checks, results and debug logging.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from object_graph_validator.config.schema import ValidatorSettings
from object_graph_validator.constants import LOGGER_NAME
from object_graph_validator.domain.errors import ErrorCode, ValidateError
from object_graph_validator.engine import ValidationResult, Validator
from object_graph_validator.schema import Int32Type, ListType, MapType, StringType


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def captured() -> Iterator[list[logging.LogRecord]]:
    logger = logging.getLogger(LOGGER_NAME)
    handler = _ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


def test_validator_binds_engine_settings() -> None:
    validator = Validator(MapType({"a": StringType()}), allow_extra_keys=True, max_depth=4)

    assert validator.allow_extra_keys is True
    assert validator.max_depth == 4
    assert validator.validate({"a": "x", "b": 1}) == {"a": "x"}
    assert "max_depth=4" in repr(validator)


def test_validator_rejects_bad_arguments_eagerly() -> None:
    with pytest.raises(TypeError):
        Validator({"a": StringType()})  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Validator(StringType(), max_depth=0)
    with pytest.raises(TypeError):
        Validator(StringType(), allow_extra_keys="yes")  # type: ignore[arg-type]


def test_from_settings_uses_engine_section() -> None:
    settings = ValidatorSettings(max_depth=1, allow_extra_keys=False)
    validator = Validator.from_settings(ListType(ListType(Int32Type())), settings)

    result = validator.check([[1]])

    assert isinstance(result, ValidationResult)
    assert not result.is_valid
    assert result.error is not None
    assert result.error.code is ErrorCode.TOO_DEEP


def test_check_returns_result_and_validate_raises() -> None:
    validator = Validator(Int32Type())

    ok = validator.check(3)
    assert ok.is_valid
    assert ok.unwrap() == 3

    with pytest.raises(ValidateError) as excinfo:
        validator.validate("3", "/field")
    assert excinfo.value.path == "/field"


def test_failures_are_logged_at_debug(captured: list[logging.LogRecord]) -> None:
    validator = Validator(MapType({"a": Int32Type()}))

    validator.check({"a": "secret-ish"})
    validator.check({"a": 1})

    records = list(captured)
    assert len(records) == 1
    record = records[0]
    assert record.levelno == logging.DEBUG
    assert record.error_code == "type_mismatch"  # type: ignore[attr-defined]
    assert record.error_path == "/a"  # type: ignore[attr-defined]
    assert record.input_value == "secret-ish"  # type: ignore[attr-defined]
