"""Tests for the pure comparator functions."""

import re

import pytest

from jsonpath_assert.assertions.comparators import (
    canonical_string,
    check_contains,
    check_greater_than,
    check_length,
    check_less_than,
    check_matches,
    includes_element,
    is_empty,
    kind_of,
    length_of,
    values_equal,
)
from jsonpath_assert.assertions.errors import (
    ContainsTypeError,
    LengthMismatchError,
    NoMatchError,
    NotContainedError,
    NullValueError,
    PatternMismatchError,
    UnsupportedTypeError,
)


def test_includes_element():
    """Verify containment rules per kind of container."""
    list1 = ["Foo", "Bar"]
    list2 = [1, 2]
    simple_map = {"Foo": "Bar"}

    assert includes_element("Hello World", "World") == (True, True)
    assert includes_element(list1, "Foo") == (True, True)
    assert includes_element(list1, "Bar") == (True, True)
    assert includes_element(list2, 1) == (True, True)
    assert includes_element(list2, 2) == (True, True)
    assert includes_element(list1, "Foo!") == (True, False)
    assert includes_element(list2, 3) == (True, False)
    assert includes_element(list2, "1") == (True, False)
    # maps are searched by key, not by value
    assert includes_element(simple_map, "Foo") == (True, True)
    assert includes_element(simple_map, "Bar") == (True, False)
    assert includes_element(1433, "1") == (False, False)
    assert includes_element(None, "1") == (False, False)


class TestValuesEqual:

    def test_nested_structures(self):
        assert values_equal({"a": [1, {"b": "c"}]}, {"a": [1, {"b": "c"}]})
        assert not values_equal({"a": [1, {"b": "c"}]}, {"a": [1, {"b": "d"}]})

    def test_numbers_compare_numerically(self):
        assert values_equal(12345, 12345.0)

    def test_bool_is_not_a_number(self):
        assert not values_equal(True, 1)
        assert not values_equal(0, False)

    def test_bytes_by_content(self):
        assert values_equal(b"abc", bytearray(b"abc"))
        assert not values_equal(b"abc", "abc")

    def test_null(self):
        assert values_equal(None, None)
        assert not values_equal(None, 0)

    def test_mapping_keys_must_agree(self):
        assert not values_equal({"a": 1}, {"a": 1, "b": 2})


class TestLength:

    def test_length_of(self):
        assert length_of("$.a", "abc") == 3
        assert length_of("$.a", [1, 2]) == 2
        assert length_of("$.a", {"x": 1}) == 1

    def test_null_is_rejected(self):
        with pytest.raises(NullValueError):
            length_of("$.a", None)

    def test_number_has_no_length(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            length_of("$.a", 7)
        assert exc_info.value.kind == "number"

    def test_check_length(self):
        check_length("$.a", [1, 2, 3], 3)
        with pytest.raises(LengthMismatchError):
            check_length("$.a", [1, 2, 3], 2)

    def test_greater_than_fails_only_below_bound(self):
        check_greater_than("$.a", [1, 2, 3], 2)
        check_greater_than("$.a", [1, 2, 3], 3)
        with pytest.raises(LengthMismatchError):
            check_greater_than("$.a", [1, 2, 3], 4)

    def test_less_than_fails_only_above_bound(self):
        check_less_than("$.a", [1, 2, 3], 4)
        check_less_than("$.a", [1, 2, 3], 3)
        with pytest.raises(LengthMismatchError):
            check_less_than("$.a", [1, 2, 3], 2)


def test_check_contains_distinguishes_inapplicable_from_missing():
    with pytest.raises(ContainsTypeError):
        check_contains("$.a", 1433, "1")
    with pytest.raises(NotContainedError):
        check_contains("$.a", [1, 2], 3)


@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("", True),
    ([], True),
    ({}, True),
    (False, True),
    (0, True),
    (0.0, True),
    ("a", False),
    ([0], False),
    (True, False),
    (22, False),
])
def test_is_empty(value, expected):
    assert is_empty(value) is expected


@pytest.mark.parametrize("value, expected", [
    (True, "true"),
    (False, "false"),
    (7, "7"),
    (7.0, "7"),
    (7.212, "7.212"),
    ("tom<3Beer", "tom<3Beer"),
])
def test_canonical_string(value, expected):
    assert canonical_string(value) == expected


class TestCheckMatches:

    def test_scalar_match(self):
        check_matches("$.a", 7.212, re.compile(r"^\d\.\d{3}$"))

    def test_mismatch(self):
        with pytest.raises(PatternMismatchError):
            check_matches("$.a", "abc", re.compile(r"^\d+$"))

    def test_null(self):
        with pytest.raises(NoMatchError) as exc_info:
            check_matches("$.a", None, re.compile(".+"))
        assert str(exc_info.value) == "no match for pattern: '$.a'"

    @pytest.mark.parametrize("value, kind", [({"a": 1}, "map"), ([1], "slice")])
    def test_containers_are_unsupported(self, value, kind):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            check_matches("$.a", value, re.compile(".+"))
        assert exc_info.value.kind == kind
        assert kind_of(value) == kind
