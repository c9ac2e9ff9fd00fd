"""
object-graph-validator — property tests for the validation engine

File: tests/unit/engine/test_engine_properties.py

Purpose
- Validate engine-wide guarantees over generated inputs.

What this test file should cover
- Idempotence: validating a normalized value returns an equal value.
- Path correctness: a failure's path names the offending element.
- Fail-fast: a list reports its first failing element only.
- Shared schema trees are safe to use from many threads.
"""

from __future__ import annotations

import threading

import pytest

from object_graph_validator.domain.errors import ErrorCode
from object_graph_validator.engine import Validator, check, validate
from object_graph_validator.schema import (
    AnyOf,
    BoolType,
    Float64Type,
    Int32Type,
    Int64Type,
    ListType,
    MapType,
    OptionalMarker,
    Range,
    StringType,
)

try:
    from hypothesis import given, settings
    from hypothesis import strategies as st
except ModuleNotFoundError:
    _HYPOTHESIS_AVAILABLE = False
else:
    _HYPOTHESIS_AVAILABLE = True

_RECORD_SCHEMA = MapType(
    {
        "name": StringType(),
        "count": Int64Type(),
        "ratio": OptionalMarker(Float64Type()),
        "flags": ListType(BoolType()),
        "tag": AnyOf(Int32Type(), StringType()),
    }
)

if _HYPOTHESIS_AVAILABLE:
    _INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
    _RECORDS = st.fixed_dictionaries(
        {
            "name": st.one_of(st.none(), st.text(max_size=8)),
            "count": _INT32,
            "flags": st.lists(st.booleans(), max_size=5),
            "tag": st.one_of(_INT32, st.text(max_size=4)),
        },
        optional={"ratio": st.floats(allow_nan=False)},
    )

    @settings(max_examples=25, derandomize=True, deadline=None)
    @given(record=_RECORDS)
    def test_property_normalization_is_idempotent(record: dict[str, object]) -> None:
        once = validate(_RECORD_SCHEMA, record)
        twice = validate(_RECORD_SCHEMA, once)

        assert twice == once
        assert once is not record

    @settings(max_examples=25, derandomize=True, deadline=None)
    @given(
        prefix=st.lists(_INT32, max_size=6),
        bad=st.text(max_size=3),
        suffix=st.lists(st.one_of(_INT32, st.text(max_size=3)), max_size=6),
    )
    def test_property_list_fails_fast_at_first_bad_index(
        prefix: list[int], bad: str, suffix: list[object]
    ) -> None:
        result = check(ListType(Int32Type()), [*prefix, bad, *suffix])

        assert result.error is not None
        assert result.error.code is ErrorCode.TYPE_MISMATCH
        assert result.error.path == f"/{len(prefix)}"
        assert result.error.value == bad

    @settings(max_examples=25, derandomize=True, deadline=None)
    @given(
        keys=st.lists(
            st.text(alphabet="abcdefgh", min_size=1, max_size=4),
            min_size=1,
            max_size=4,
            unique=True,
        ),
        depth=st.integers(min_value=0, max_value=3),
    )
    def test_property_error_path_names_offending_field(keys: list[str], depth: int) -> None:
        leaf_key = keys[-1]
        schema: MapType = MapType({leaf_key: Range(Int32Type(), max=0)})
        value: object = {leaf_key: 1}
        expected = f"/{leaf_key}"
        for _ in range(depth):
            schema = MapType({"n": ListType(schema)})
            value = {"n": [value]}
            expected = "/n/0" + expected

        result = check(schema, value, "/base")

        assert result.error is not None
        assert result.error.code is ErrorCode.TOO_LARGE
        assert result.error.path == "/base" + expected

else:

    def test_property_normalization_is_idempotent() -> None:
        pytest.skip("hypothesis is not installed")

    def test_property_list_fails_fast_at_first_bad_index() -> None:
        pytest.skip("hypothesis is not installed")

    def test_property_error_path_names_offending_field() -> None:
        pytest.skip("hypothesis is not installed")


def test_shared_validator_is_thread_safe() -> None:
    validator = Validator(ListType(MapType({"n": Range(Int32Type(), min=0)})))
    failures: list[str] = []
    lock = threading.Lock()

    def worker(offset: int) -> None:
        for step in range(200):
            good = [{"n": offset + step}]
            bad = [{"n": 1}, {"n": -1 - step}]
            ok = validator.check(good)
            err = validator.check(bad).error
            if ok.value != good or err is None or err.path != "/1/n":
                with lock:
                    failures.append(f"worker {offset} step {step}")

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert failures == []
