"""Tests for the recursive Stringifier."""

import datetime
import math
from collections import OrderedDict, defaultdict
from enum import IntEnum

import pytest
from pydantic import BaseModel

from jsonbeautify.kernel.stringify import (
    ValueKind,
    classify,
    format_number,
    key_text,
    stringify,
)
from jsonbeautify.kernel.values import UNDEFINED, SupportsToJSON


class Color(IntEnum):
    RED = 1


class TestClassify:
    """Every Python value maps to exactly one kind."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            ("text", ValueKind.TEXT),
            (0, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            (Color.RED, ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            (None, ValueKind.NULL),
            ([], ValueKind.ARRAY),
            ((1, 2), ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
            (OrderedDict(), ValueKind.OBJECT),
            (UNDEFINED, ValueKind.UNREPRESENTABLE),
            (len, ValueKind.UNREPRESENTABLE),
            ({1, 2}, ValueKind.UNREPRESENTABLE),
            (b"bytes", ValueKind.UNREPRESENTABLE),
            (object(), ValueKind.UNREPRESENTABLE),
        ],
    )
    def test_kind(self, value, kind):
        assert classify(value) is kind


class TestFormatNumber:
    """Numbers render in their canonical decimal form."""

    def test_int(self):
        assert format_number(42) == "42"
        assert format_number(-7) == "-7"

    def test_big_int(self):
        assert format_number(10**20) == "100000000000000000000"

    def test_float(self):
        assert format_number(1.5) == "1.5"
        assert format_number(1.0) == "1.0"
        assert format_number(1e16) == "1e+16"

    def test_int_enum_renders_as_int(self):
        assert format_number(Color.RED) == "1"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_is_null(self, value):
        assert format_number(value) == "null"


class TestKeyText:
    """Mapping keys are coerced to member names like the standard encoder."""

    def test_coercions(self):
        assert key_text("a") == "a"
        assert key_text(1) == "1"
        assert key_text(2.5) == "2.5"
        assert key_text(True) == "true"
        assert key_text(False) == "false"
        assert key_text(None) == "null"

    def test_unsupported_key(self):
        assert key_text((1, 2)) is None


class TestStringify:
    """Direct calls to stringify(key, holder, ...)."""

    def test_missing_key_is_absent(self):
        assert stringify("missing", {}, 0) is None

    def test_index_out_of_range_is_absent(self):
        assert stringify(3, [1], 0) is None

    def test_compact_by_default(self):
        assert stringify("", {"": [1, "a", None]}, 0) == '[1,"a",null]'

    def test_gap_is_parent_indentation(self):
        result = stringify("x", {"x": [1, 2]}, 0, "  ", "  ")
        assert result == "[\n    1,\n    2\n  ]"

    def test_sibling_containers_get_same_gap(self):
        result = stringify("", {"": [[1], [2]]}, 0, "  ", "")
        assert result == "[\n  [\n    1\n  ],\n  [\n    2\n  ]\n]"

    def test_defaultdict_not_mutated(self):
        value = defaultdict(list, {"a": 1})
        assert stringify("", {"": value}, 0, "", "", ["a", "b"]) == '{"a":1}'
        assert dict(value) == {"a": 1}

    def test_non_string_keys_coerced(self):
        value = {1: "a", None: "b", 2.5: "c", (1, 2): "skipped"}
        assert stringify("", {"": value}, 0) == '{"1":"a","null":"b","2.5":"c"}'

    def test_allow_list_matches_coerced_keys(self):
        value = {1: "one", 2: "two"}
        assert stringify("", {"": value}, 0, "", "", ["2"]) == '{"2":"two"}'


class TestReplacerFunction:
    """The replacer function sees every (key, value) pair."""

    def test_called_at_root_with_empty_key(self):
        calls = []

        def replacer(key, value):
            calls.append(key)
            return value

        stringify("", {"": {"a": [1]}}, 0, "", "", replacer)
        assert calls == ["", "a", "0"]

    def test_replacement_is_rendered(self):
        def replacer(key, value):
            return value * 10 if type(value) is int else value

        result = stringify("", {"": {"a": 1, "b": [2]}}, 0, "", "", replacer)
        assert result == '{"a":10,"b":[20]}'

    def test_undefined_drops_member(self):
        def replacer(key, value):
            return UNDEFINED if key == "secret" else value

        result = stringify("", {"": {"user": "x", "secret": "y"}}, 0, "", "", replacer)
        assert result == '{"user":"x"}'


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.keys = []

    def to_json(self, key):
        self.keys.append(key)
        return {"x": self.x, "y": self.y}


class Model(BaseModel):
    a: int
    b: str = "x"


class TestHooks:
    """Values providing their own JSON representation."""

    def test_protocol_check(self):
        assert isinstance(Point(1, 2), SupportsToJSON)
        assert not isinstance({}, SupportsToJSON)

    def test_to_json_receives_key(self):
        point = Point(1, 2)
        result = stringify("", {"": {"p": point, "list": [point]}}, 0)
        assert result == '{"p":{"x":1,"y":2},"list":[{"x":1,"y":2}]}'
        assert point.keys == ["p", "0"]

    def test_replacer_sees_hook_result(self):
        seen = []

        def replacer(key, value):
            seen.append(value)
            return value

        stringify("", {"": Point(1, 2)}, 0, "", "", replacer)
        assert seen[0] == {"x": 1, "y": 2}

    def test_pydantic_model(self):
        assert stringify("", {"": Model(a=1)}, 0) == '{"a":1,"b":"x"}'

    def test_dates(self):
        value = [
            datetime.date(2024, 1, 2),
            datetime.datetime(2024, 1, 2, 3, 4, 5),
            datetime.time(6, 7),
        ]
        assert stringify("", {"": value}, 0) == '["2024-01-02","2024-01-02T03:04:05","06:07:00"]'
