"""
Tests for JSON field decoding
"""

import pytest

from porkctl.api.fields import (
    JsonKind,
    as_flag,
    as_number,
    as_object,
    as_text,
    kind_of,
    lookup,
    text_or
)


class TestKindOf:

    @pytest.mark.parametrize("value, kind", [
        (None, JsonKind.ABSENT),
        ("yes", JsonKind.TEXT),
        (3, JsonKind.NUMBER),
        (3.5, JsonKind.NUMBER),
        (True, JsonKind.FLAG),
        ({"a": 1}, JsonKind.OBJECT),
        ([1, 2], JsonKind.ARRAY),
    ])
    def test_classifies_json_values(self, value, kind):
        """Each decoded JSON value maps to exactly one kind"""
        assert kind_of(value) is kind

    def test_bool_is_not_a_number(self):
        """bool subclasses int but must be classified as a flag"""
        assert kind_of(False) is JsonKind.FLAG


class TestAsText:

    @pytest.mark.parametrize("value, expected", [
        ("12.34", "12.34"),
        (12.5, "12.5"),
        (8.0, "8"),
        (8, "8"),
        (0.0000001, "0.0000001"),
        (True, "true"),
        (False, "false"),
        (None, ""),
        ({"price": "1"}, ""),
        (["1"], ""),
    ])
    def test_renders_scalars(self, value, expected):
        """Numbers render as plain decimals, containers as empty text"""
        assert as_text(value) == expected

    def test_text_or_uses_default_for_blank(self):
        """Blank or missing values fall back to the default"""
        assert text_or("  ", "fallback") == "fallback"
        assert text_or(None, "fallback") == "fallback"
        assert text_or("value", "fallback") == "value"


class TestAsNumber:

    def test_numeric_values(self):
        """Numbers and numeric strings convert to float"""
        assert as_number(2) == 2.0
        assert as_number("3.5") == 3.5
        assert as_number(" 4 ") == 4.0

    def test_non_numeric_values(self):
        """Anything else is None, including booleans and non-finite values"""
        assert as_number("abc") is None
        assert as_number("") is None
        assert as_number(True) is None
        assert as_number(None) is None
        assert as_number("nan") is None
        assert as_number("inf") is None


class TestAsFlag:

    @pytest.mark.parametrize("value", [True, "yes", "YES", "true", "True"])
    def test_truthy(self, value):
        assert as_flag(value) is True

    @pytest.mark.parametrize("value", [False, "no", "false", "", " yes ", "yes\n", 1, None, {"avail": "yes"}])
    def test_falsy(self, value):
        assert as_flag(value) is False


class TestLookup:

    def test_walks_nested_objects(self):
        data = {"a": {"b": {"c": "1"}}}
        assert lookup(data, "a", "b", "c") == "1"

    def test_missing_or_wrong_type_step_is_none(self):
        """A missing key or a non-object step ends the walk with None"""
        data = {"a": {"b": "not-an-object"}}
        assert lookup(data, "a", "x") is None
        assert lookup(data, "a", "b", "c") is None
        assert lookup("string", "a") is None

    def test_as_object(self):
        assert as_object({"a": 1}) == {"a": 1}
        assert as_object([1]) is None
